# shared_pages/app.py
# Description: Application root. Owns the single UserState and drives page navigation.
#
# Imports
import sys
from typing import Optional
#
# Third-Party Imports
from loguru import logger
from textual.app import App
from textual.binding import Binding
from textual.theme import Theme
#
# Local Imports
from .config import AppSettings, load_app_settings
from .Logging_Config import configure_application_logging
from .navigation.navigation_manager import NavigationManager
from .state.navigation_state import NavigationState
from .state.user_state import UserState
#
#######################################################################################################################

DEFAULT_THEME_NAME = "shared-pages-light"
FALLBACK_THEME_NAME = "textual-light"

SHARED_PAGES_LIGHT_THEME = Theme(
    name=DEFAULT_THEME_NAME,
    primary="#FBC02D",
    secondary="#F9A825",
    accent="#F9A825",
    warning="#F9A825",
    error="#D32F2F",
    success="#388E3C",
    foreground="#212121",
    background="#FAFAFA",
    surface="#FFFFFF",
    panel="#EEEEEE",
    dark=False,
)


class SharedPagesApp(App):
    """
    Two pages sharing one observable name.

    The app creates the UserState once and every page it pushes gets the
    same instance.
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+r", "reset_name", "Clear Data"),
    ]

    def __init__(self, settings: Optional[AppSettings] = None, user_state: Optional[UserState] = None):
        super().__init__()
        self.app_settings = settings or load_app_settings()
        self.user_state = user_state or UserState()
        self.navigation_state = NavigationState()
        self.navigation = NavigationManager(
            self,
            self.navigation_state,
            self.user_state,
            form_settings=self.app_settings.form,
        )
        self.title = self.app_settings.general.title
        logger.info("Application initialized")

    def on_mount(self) -> None:
        self.register_theme(SHARED_PAGES_LIGHT_THEME)
        theme_name = self.app_settings.general.theme
        try:
            self.theme = theme_name
        except Exception as e:
            logger.warning(f"Failed to apply theme '{theme_name}', falling back to '{FALLBACK_THEME_NAME}': {e}")
            self.theme = FALLBACK_THEME_NAME

        initial_screen = self.app_settings.general.initial_screen
        if not self.navigation.push(initial_screen):
            logger.warning(f"Initial screen '{initial_screen}' unavailable, using page_one")
            self.notify(f"Unknown initial screen: {initial_screen}", severity="error")
            self.navigation.push("page_one")

    def action_reset_name(self) -> None:
        self.user_state.reset()


def main_cli_runner() -> None:
    """Entry point for the shared-pages command."""
    settings = load_app_settings()
    configure_application_logging(settings)
    app = SharedPagesApp(settings=settings)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("--- KeyboardInterrupt received ---")
    except Exception:
        logger.exception("--- CRITICAL ERROR DURING app.run() ---")
        sys.exit(1)

#
# End of app.py
#######################################################################################################################
