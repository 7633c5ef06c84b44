"""
Multiplicity validation for multi-valued reference fields.

Counts the populated value slots of a submitted field and reports when the
count falls below the configured minimum or exceeds the configured maximum.
Errors are attributed to the primary value of the last ordinal slot only,
so a single message is shown instead of one per rendered slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional

from narrow_widgets.core import tree
from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.core.field import FieldDefinition, ValueSlot
from narrow_widgets.core.settings import SettingsModel
from narrow_widgets.protocols.form_config import get_widget_config
from narrow_widgets.protocols.form_state import FormStateProtocol
from narrow_widgets.protocols.host_services import Translator, default_translator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationError:
    """A user-correctable error attributed to one element."""
    name: str     # Host error name, e.g. "field][2][target_id"
    message: str


def count_populated(values: Any, primary_key: str) -> int:
    """Number of ordinal slots that are structured values with a non-empty primary value."""
    slots = (
        ValueSlot(delta=key, primary_value=values[key].get(primary_key))
        for key in tree.ordinal_keys(values)
        if isinstance(values[key], dict)
    )
    return sum(1 for slot in slots if slot.is_populated)


class MultiplicityValidator:
    """Element-validate hook enforcing min/max value counts. Stateless."""

    def __init__(self, translator: Optional[Translator] = None):
        self._t = translator or default_translator

    def validate(
        self,
        element: Dict[Hashable, Any],
        form_state: FormStateProtocol,
        settings: SettingsModel,
        field: FieldDefinition,
    ) -> List[ValidationError]:
        """Validate the submitted values of ``field`` and record any errors.

        Args:
            element: The field's widget element; ``#field_parents`` locates
                the field inside the submitted values
            form_state: Current form state
            settings: Widget settings
            field: Field definition

        Returns:
            The errors raised in this pass (also recorded on ``form_state``)
        """
        if field.is_unlimited:
            return []

        # Partial submissions (ajax, preview) don't validate
        if form_state.limit_validation_errors:
            logger.debug(f"Validation of '{field.name}' suppressed by form state")
            return []

        field_selector = list(element.get(CONSTANTS.FIELD_PARENTS) or []) + [field.name]
        primary_key = field.primary_value_key or CONSTANTS.DEFAULT_PRIMARY_KEY

        values = form_state.get_value(field_selector) or {}
        element_count = len(tree.ordinal_keys(values))
        error_path = field_selector + [element_count - 1, primary_key]
        name = tree.error_name(error_path)

        item_count = count_populated(values, primary_key)
        logger.debug(
            f"Validating '{field.name}': {item_count} populated of {element_count} slots "
            f"(min={settings.min}, max={settings.max})"
        )

        config = get_widget_config()
        errors: List[ValidationError] = []

        if settings.min and item_count < settings.min:
            errors.append(ValidationError(name, self._t(config.min_error_message, {
                "@label": field.label,
                "@number": settings.min,
            })))

        if settings.max and item_count > settings.max:
            errors.append(ValidationError(name, self._t(config.max_error_message, {
                "@label": field.label,
                "@number": settings.max,
            })))

        for error in errors:
            form_state.set_error_by_name(error.name, error.message)

        return errors
