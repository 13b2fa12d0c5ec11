"""
User state: the single observable value shared by every page.
"""

import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from loguru import logger


NameListener = Callable[[Optional[str]], None]

_subscription_ids = itertools.count(1)


@dataclass(frozen=True)
class Subscription:
    """Handle returned by UserState.subscribe()."""

    id: int
    state: "UserState" = field(repr=False, compare=False)

    def cancel(self) -> None:
        """Stop receiving notifications."""
        self.state.unsubscribe(self)


@dataclass
class UserState:
    """
    Holds the user's name and notifies listeners whenever it is set.

    One instance is created by the application root and handed to every
    screen. All access happens on the UI thread, so there is no locking.
    """

    name: Optional[str] = None
    _listeners: Dict[int, NameListener] = field(default_factory=dict, repr=False)

    def get_name(self) -> Optional[str]:
        return self.name

    def set_name(self, name: str) -> None:
        """Replace the stored name and notify every listener, even if unchanged."""
        self.name = name
        logger.debug(f"UserState name set, notifying {len(self._listeners)} listener(s)")
        self._notify()

    def reset(self) -> None:
        """Clear the name back to unset."""
        self.name = None
        logger.debug("UserState name reset")
        self._notify()

    def subscribe(self, callback: NameListener) -> Subscription:
        subscription = Subscription(id=next(_subscription_ids), state=self)
        self._listeners[subscription.id] = callback
        logger.debug(f"Listener {subscription.id} subscribed")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if self._listeners.pop(subscription.id, None) is not None:
            logger.debug(f"Listener {subscription.id} unsubscribed")

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self) -> None:
        # Copy so a listener may unsubscribe while we iterate
        for subscription_id, callback in list(self._listeners.items()):
            try:
                callback(self.name)
            except Exception:
                logger.exception(f"Listener {subscription_id} raised during notification")
