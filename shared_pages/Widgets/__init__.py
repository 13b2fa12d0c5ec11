"""Reusable widgets for the shared_pages screens."""

from .name_form import NameForm, FormState, validate_form_field, REQUIRED_FIELD_MESSAGE
from .user_data_label import UserDataLabel, format_user_data

__all__ = [
    'NameForm',
    'FormState',
    'validate_form_field',
    'REQUIRED_FIELD_MESSAGE',
    'UserDataLabel',
    'format_user_data',
]
