"""
shared_pages: two Textual pages sharing one observable user name.
"""

__version__ = "0.1.0"
