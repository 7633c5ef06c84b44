"""
Widget factory with explicit element-type dispatch.

Maps the ``#type`` of a settings form element to the Qt input rendering it.
Container types (details, fieldset) are handled by the settings panel.
"""

from typing import Any, Callable, Dict, Hashable
import logging

from PyQt6.QtWidgets import QWidget

from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.protocols.widget_adapters import CheckBoxAdapter, LineEditAdapter
from .no_scroll_spinbox import NoScrollComboBox, NoScrollSpinBox

logger = logging.getLogger(__name__)

CONTAINER_TYPES = frozenset({CONSTANTS.DETAILS_TYPE, CONSTANTS.FIELDSET_TYPE})


def _number(element: Dict[Hashable, Any]) -> QWidget:
    widget = NoScrollSpinBox()
    widget.set_placeholder("No limit")
    return widget


def _checkbox(element: Dict[Hashable, Any]) -> QWidget:
    return CheckBoxAdapter(str(element.get(CONSTANTS.TITLE) or ""))


def _select(element: Dict[Hashable, Any]) -> QWidget:
    widget = NoScrollComboBox()
    widget.populate_options(element.get(CONSTANTS.OPTIONS) or {})
    return widget


def _textfield(element: Dict[Hashable, Any]) -> QWidget:
    return LineEditAdapter()


# Element #type → widget factory
ELEMENT_TYPE_REGISTRY: Dict[str, Callable[[Dict[Hashable, Any]], QWidget]] = {
    CONSTANTS.NUMBER_TYPE: _number,
    CONSTANTS.CHECKBOX_TYPE: _checkbox,
    CONSTANTS.SELECT_TYPE: _select,
    "textfield": _textfield,
}


class ElementWidgetFactory:
    """Creates and initializes the input widget for one form element."""

    def create(self, element: Dict[Hashable, Any]) -> QWidget:
        element_type = element.get(CONSTANTS.TYPE) or "textfield"
        factory = ELEMENT_TYPE_REGISTRY.get(element_type)
        if factory is None:
            logger.debug(f"No widget registered for '{element_type}', rendering as text")
            factory = _textfield

        widget = factory(element)
        widget.set_value(element.get(CONSTANTS.DEFAULT_VALUE))
        description = element.get(CONSTANTS.DESCRIPTION)
        if description:
            widget.setToolTip(str(description))
        return widget
