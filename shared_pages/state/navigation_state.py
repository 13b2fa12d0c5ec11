"""
Navigation state management.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class NavigationState:
    """Mirrors the screen stack so the app can inspect it without Textual."""

    # Stack of screen names, bottom first
    stack: List[str] = field(default_factory=list)

    # Every screen ever shown, most recent last
    history: List[str] = field(default_factory=list)
    max_history: int = 50

    @property
    def current_screen(self) -> Optional[str]:
        return self.stack[-1] if self.stack else None

    @property
    def previous_screen(self) -> Optional[str]:
        return self.stack[-2] if len(self.stack) > 1 else None

    @property
    def depth(self) -> int:
        return len(self.stack)

    def push(self, screen: str) -> None:
        """Record a screen being pushed."""
        self.stack.append(screen)
        self._remember(screen)

    def pop(self) -> Optional[str]:
        """Record the top screen being popped; returns the screen now on top."""
        if len(self.stack) <= 1:
            return None
        self.stack.pop()
        current = self.current_screen
        self._remember(current)
        return current

    def can_go_back(self) -> bool:
        return len(self.stack) > 1

    def clear_history(self) -> None:
        """Clear navigation history."""
        self.history.clear()

    def _remember(self, screen: str) -> None:
        self.history.append(screen)
        if len(self.history) > self.max_history:
            self.history.pop(0)
