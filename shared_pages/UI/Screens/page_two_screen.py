"""Page 2: pushed on top of Page 1. Pops back to its caller."""

from loguru import logger

from ...Widgets.name_form import NameForm
from .base_page_screen import BasePageScreen


class PageTwoScreen(BasePageScreen):

    TITLE = "Page 2"
    NAVIGATE_LABEL = "Navigate back to Page 1"

    def on_name_form_navigate_requested(self, message: NameForm.NavigateRequested) -> None:
        message.stop()
        if not self.shared_app.navigation.pop():
            logger.warning("Page 2 has nothing to pop back to")
            self.notify("Nothing to go back to", severity="error")
