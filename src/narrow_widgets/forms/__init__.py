"""
Host-facing widget and settings form.

ReferenceNarrowWidget exposes the hooks a host form pipeline calls;
SettingsFormBuilder contributes and reads the admin settings sub-form.
"""

from .form_state import FormState
from .settings_form import SettingsFormBuilder, parse_handler
from .reference_widget import ReferenceNarrowWidget

__all__ = [
    "FormState",
    "SettingsFormBuilder",
    "parse_handler",
    "ReferenceNarrowWidget",
]
