# shared_pages/Widgets/name_form.py
"""
Single-field form used by both pages.

The form owns its own validation and only hands a value to ``save_callback`` once it
passes. Everything else (which store to write, where to navigate) belongs to
the screen that hosts it.
"""

from enum import Enum
from typing import Callable, Optional

from loguru import logger
from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Input, Static

REQUIRED_FIELD_MESSAGE = "This is a required field"
DEFAULT_PLACEHOLDER = "Enter anything you want"


def validate_form_field(text: Optional[str], message: str = REQUIRED_FIELD_MESSAGE) -> Optional[str]:
    """Return the error message for an empty value, or None when the value is acceptable."""
    return message if not text else None


class FormState(str, Enum):
    IDLE = "Idle"
    VALIDATION_ERROR = "ValidationError"


class NameForm(Container):
    """
    Text input, inline error line, and the Save / Navigate buttons.

    Emits:
        NameForm.NavigateRequested when the navigation button is pressed.
    """

    DEFAULT_CSS = """
    NameForm {
        height: auto;
        width: 100%;
    }

    NameForm #name-input {
        width: 100%;
        border: round $panel-lighten-2;
    }

    NameForm #name-input:focus {
        border: round $accent;
    }

    NameForm #name-input.-required {
        border: round $error;
    }

    NameForm .form-error {
        color: $error;
        height: 1;
        margin: 0 1;
    }

    NameForm .form-buttons {
        height: auto;
        margin-top: 1;
    }

    NameForm .form-buttons Button {
        margin-right: 2;
    }
    """

    class NavigateRequested(Message):
        """Posted when the user asks to go to the sibling page."""

    error_message: reactive[Optional[str]] = reactive(None, init=False)

    def __init__(
        self,
        save_callback: Callable[[str], None],
        navigate_label: str,
        placeholder: str = DEFAULT_PLACEHOLDER,
        required_message: str = REQUIRED_FIELD_MESSAGE,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.save_callback = save_callback
        self.navigate_label = navigate_label
        self.placeholder = placeholder
        self.required_message = required_message

    def compose(self) -> ComposeResult:
        yield Input(placeholder=self.placeholder, id="name-input")
        yield Static("", classes="form-error", id="name-error")
        with Horizontal(classes="form-buttons"):
            yield Button("Save Data", id="save-data", variant="warning")
            yield Button(self.navigate_label, id="navigate", variant="default")

    @property
    def state(self) -> FormState:
        return FormState.VALIDATION_ERROR if self.error_message is not None else FormState.IDLE

    @property
    def value(self) -> str:
        return self.query_one("#name-input", Input).value

    def save(self) -> bool:
        """
        Validate the input and hand it to save_callback.

        Returns:
            True if the value was saved, False if validation failed
        """
        value = self.value
        error = validate_form_field(value, self.required_message)
        if error is not None:
            logger.debug("Form submit rejected: required field is empty")
            self.error_message = error
            return False

        self.error_message = None
        self.save_callback(value)
        return True

    def watch_error_message(self, error_message: Optional[str]) -> None:
        self.query_one("#name-error", Static).update(error_message or "")
        self.query_one("#name-input", Input).set_class(error_message is not None, "-required")

    @on(Input.Changed, "#name-input")
    def clear_error(self) -> None:
        self.error_message = None

    @on(Input.Submitted, "#name-input")
    def submit_from_input(self, event: Input.Submitted) -> None:
        event.stop()
        self.save()

    @on(Button.Pressed, "#save-data")
    def submit_from_button(self, event: Button.Pressed) -> None:
        event.stop()
        self.save()

    @on(Button.Pressed, "#navigate")
    def request_navigation(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.NavigateRequested())
