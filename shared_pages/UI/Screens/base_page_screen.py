"""Base screen shared by both pages."""

from typing import TYPE_CHECKING, Optional

from loguru import logger
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...config import FormSettings
from ...state.user_state import Subscription, UserState
from ...Widgets.name_form import NameForm
from ...Widgets.user_data_label import UserDataLabel

if TYPE_CHECKING:
    from ...app import SharedPagesApp


class BasePageScreen(Screen):
    """
    A page with the name form and the shared "Your Data" label.

    The screen subscribes to the UserState while it is mounted and drops the
    subscription when it is unmounted, so a popped page never hears about
    later changes.
    """

    DEFAULT_CSS = """
    BasePageScreen #screen-content {
        width: 100%;
        height: 1fr;
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save Data"),
    ]

    NAVIGATE_LABEL = ""

    user_name: reactive[Optional[str]] = reactive(None, init=False)

    def __init__(self, user_state: UserState, form_settings: Optional[FormSettings] = None, **kwargs):
        super().__init__(**kwargs)
        self.user_state = user_state
        self.form_settings = form_settings or FormSettings()
        self._subscription: Optional[Subscription] = None
        logger.debug(f"Initializing {self.__class__.__name__}")

    @property
    def shared_app(self) -> "SharedPagesApp":
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="screen-content"):
            yield NameForm(
                save_callback=self.user_state.set_name,
                navigate_label=self.NAVIGATE_LABEL,
                placeholder=self.form_settings.placeholder,
                required_message=self.form_settings.required_message,
                id="name-form",
            )
            yield UserDataLabel(prefix=self.form_settings.label_prefix, id="user-data")
        yield Footer()

    def on_mount(self) -> None:
        self._subscription = self.user_state.subscribe(self._on_name_changed)
        self.user_name = self.user_state.get_name()
        self.query_one(UserDataLabel).user_name = self.user_name
        logger.info(f"Screen {self.__class__.__name__} mounted")

    def on_unmount(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        logger.info(f"Screen {self.__class__.__name__} unmounted")

    @property
    def is_subscribed(self) -> bool:
        return self._subscription is not None

    def _on_name_changed(self, name: Optional[str]) -> None:
        self.user_name = name

    def watch_user_name(self, user_name: Optional[str]) -> None:
        self.query_one(UserDataLabel).user_name = user_name

    def action_save(self) -> None:
        self.query_one(NameForm).save()
