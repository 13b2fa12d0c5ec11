"""
Navigation manager: push/pop over Textual's screen stack.
"""

from typing import TYPE_CHECKING, List, Optional

from loguru import logger

from ..config import FormSettings
from ..state.navigation_state import NavigationState
from ..state.user_state import UserState
from .screen_registry import ScreenRegistry

if TYPE_CHECKING:
    from textual.app import App


class NavigationManager:
    """
    Issues push/pop requests to the app's screen stack.

    Every pushed page is a fresh instance bound to the same UserState, the
    way a new route is built each time. Navigation never touches the state
    itself.
    """

    def __init__(
        self,
        app: 'App',
        state: NavigationState,
        user_state: UserState,
        form_settings: Optional[FormSettings] = None,
    ):
        self.app = app
        self.state = state
        self.user_state = user_state
        self.form_settings = form_settings or FormSettings()
        self.registry = ScreenRegistry()

    def push(self, screen_name: str) -> bool:
        """
        Push a new instance of a screen.

        Args:
            screen_name: Name or alias of the screen

        Returns:
            True if the push was issued, False otherwise
        """
        canonical = self.registry.resolve(screen_name)
        if canonical is None:
            logger.error(f"Unknown screen: {screen_name}")
            return False

        screen_class = self.registry.get_screen_class(canonical)
        try:
            screen = screen_class(self.user_state, self.form_settings)
            self.app.push_screen(screen)
        except Exception as e:
            logger.error(f"Failed to push {canonical}: {e}")
            return False

        self.state.push(canonical)
        logger.info(f"Pushed screen: {canonical} (depth {self.state.depth})")
        return True

    def pop(self) -> bool:
        """
        Pop the current screen back to its caller.

        Returns:
            True if the pop was issued, False if there is nothing to go back to
        """
        if not self.state.can_go_back():
            logger.debug("No previous screen to go back to")
            return False

        try:
            self.app.pop_screen()
        except Exception as e:
            logger.error(f"Failed to pop {self.state.current_screen}: {e}")
            return False

        current = self.state.pop()
        logger.info(f"Popped back to screen: {current} (depth {self.state.depth})")
        return True

    def get_current_screen(self) -> Optional[str]:
        return self.state.current_screen

    def get_history(self) -> List[str]:
        return self.state.history.copy()

    def can_go_back(self) -> bool:
        return self.state.can_go_back()
