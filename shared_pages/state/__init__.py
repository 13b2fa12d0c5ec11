"""
State management module for shared_pages.
"""

from .user_state import UserState, Subscription
from .navigation_state import NavigationState

__all__ = [
    'UserState',
    'Subscription',
    'NavigationState',
]
