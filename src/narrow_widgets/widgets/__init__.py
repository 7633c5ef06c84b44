"""
PyQt6 admin widgets.

Settings panel rendering the narrow widget's settings sub-form, and the
no-scroll inputs it is built from.
"""

from .no_scroll_spinbox import NoScrollSpinBox, NoScrollComboBox
from .element_factory import ElementWidgetFactory, ELEMENT_TYPE_REGISTRY
from .settings_panel import NarrowSettingsPanel

__all__ = [
    "NoScrollSpinBox",
    "NoScrollComboBox",
    "ElementWidgetFactory",
    "ELEMENT_TYPE_REGISTRY",
    "NarrowSettingsPanel",
]
