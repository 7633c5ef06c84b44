"""
No-scroll input widgets for PyQt6.

Prevents accidental value changes from mouse wheel events while the
settings panel is scrolled.
"""

from PyQt6.QtGui import QWheelEvent

from narrow_widgets.protocols.widget_adapters import SpinBoxAdapter, ComboBoxAdapter


class NoScrollSpinBox(SpinBoxAdapter):
    """SpinBox that ignores wheel events; its minimum reads as "no value"."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


class NoScrollComboBox(ComboBoxAdapter):
    """ComboBox that ignores wheel events to prevent accidental value changes."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()
