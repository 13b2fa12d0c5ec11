"""
Registry of all available screens in the application.
"""

from typing import Dict, Optional, Type

from loguru import logger
from textual.screen import Screen


class ScreenRegistry:
    """Central registry for all application screens."""

    def __init__(self):
        self._screens: Dict[str, Type[Screen]] = {}
        self._aliases: Dict[str, str] = {}
        self._load_screens()

    def _load_screens(self) -> None:
        """Load all screen classes."""
        from ..UI.Screens.page_one_screen import PageOneScreen
        from ..UI.Screens.page_two_screen import PageTwoScreen

        self._screens = {
            'page_one': PageOneScreen,
            'page_two': PageTwoScreen,
        }

        self._aliases = {
            'page1': 'page_one',
            'page2': 'page_two',
        }

        logger.info(f"Registered {len(self._screens)} screens with {len(self._aliases)} aliases")

    def resolve(self, name: str) -> Optional[str]:
        """Canonical screen name for a name or alias, or None if unknown."""
        name = self._aliases.get(name, name)
        return name if name in self._screens else None

    def get_screen_class(self, name: str) -> Optional[Type[Screen]]:
        """Get a screen class by name or alias."""
        canonical = self.resolve(name)
        return self._screens.get(canonical) if canonical else None

    def register_alias(self, alias: str, screen_name: str) -> None:
        if screen_name in self._screens:
            self._aliases[alias] = screen_name
            logger.debug(f"Registered alias: {alias} -> {screen_name}")
        else:
            logger.warning(f"Cannot register alias {alias}: screen {screen_name} not found")

    def is_valid_screen(self, name: str) -> bool:
        return self.resolve(name) is not None
