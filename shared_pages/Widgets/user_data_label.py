"""Read-only view of the shared user name."""

from typing import Optional

from textual.reactive import reactive
from textual.widgets import Static

DEFAULT_LABEL_PREFIX = "Your Data: "


def format_user_data(name: Optional[str], prefix: str = DEFAULT_LABEL_PREFIX) -> str:
    """Label text for a name; empty while the name is unset."""
    return f"{prefix}{name}" if name is not None else ""


class UserDataLabel(Static):
    """Shows ``Your Data: <name>`` once a name has been saved."""

    DEFAULT_CSS = """
    UserDataLabel {
        height: 1;
        margin: 1 1 0 1;
        text-style: bold;
    }
    """

    user_name: reactive[Optional[str]] = reactive(None)

    def __init__(self, prefix: str = DEFAULT_LABEL_PREFIX, **kwargs):
        super().__init__("", **kwargs)
        self.prefix = prefix
        self.display_text = ""

    def watch_user_name(self, user_name: Optional[str]) -> None:
        self.display_text = format_user_data(user_name, self.prefix)
        self.update(self.display_text)
