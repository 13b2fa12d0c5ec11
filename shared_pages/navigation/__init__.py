"""
Navigation management module.
"""

from .navigation_manager import NavigationManager
from .screen_registry import ScreenRegistry

__all__ = [
    'NavigationManager',
    'ScreenRegistry',
]
