"""Application screens."""

from .base_page_screen import BasePageScreen
from .page_one_screen import PageOneScreen
from .page_two_screen import PageTwoScreen

__all__ = [
    'BasePageScreen',
    'PageOneScreen',
    'PageTwoScreen',
]
