"""Page 1: the root page. Pushes Page 2."""

from loguru import logger

from ...Widgets.name_form import NameForm
from .base_page_screen import BasePageScreen


class PageOneScreen(BasePageScreen):

    TITLE = "Page 1"
    NAVIGATE_LABEL = "Navigate to Page 2"

    def on_name_form_navigate_requested(self, message: NameForm.NavigateRequested) -> None:
        message.stop()
        if not self.shared_app.navigation.push("page_two"):
            logger.warning("Could not open Page 2")
            self.notify("Could not open Page 2", severity="error")
