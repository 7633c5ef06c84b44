"""
Widget adapters that wrap Qt widgets to implement the widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QComboBox.currentData()
- QLineEdit.setText() vs QSpinBox.setValue() vs QComboBox.setCurrentIndex()
- textChanged vs valueChanged vs currentIndexChanged vs stateChanged
"""

from typing import Any, Callable, Dict
from abc import ABCMeta

from PyQt6.QtWidgets import QLineEdit, QSpinBox, QComboBox, QCheckBox
from PyQt6.QtCore import QObject

from .widget_protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable,
    ChangeSignalEmitter
)

# Order matters: Qt's metaclass first, ABCMeta for the ABC checks
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class _SignalBindings:
    """Tracks the slot wrappers connected per callback so they can be disconnected."""

    def _bind(self, signal, callback: Callable[[Any], None]) -> None:
        bindings: Dict[Callable, Callable] = self.__dict__.setdefault("_bindings", {})
        wrapper = lambda *_: callback(self.get_value())
        bindings[callback] = wrapper
        signal.connect(wrapper)

    def _unbind(self, signal, callback: Callable[[Any], None]) -> None:
        wrapper = self.__dict__.get("_bindings", {}).pop(callback, None)
        if wrapper is None:
            return
        try:
            signal.disconnect(wrapper)
        except TypeError:
            # Signal not connected - ignore
            pass


class LineEditAdapter(QLineEdit, _SignalBindings, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Adapter for QLineEdit; empty text reads as None."""

    _widget_id = "line_edit"

    def get_value(self) -> Any:
        text = self.text().strip()
        return None if text == "" else text

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.textChanged, callback)


class SpinBoxAdapter(QSpinBox, _SignalBindings, ValueGettable, ValueSettable, PlaceholderCapable,
                     ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QSpinBox.

    Handles None values using the special value text mechanism: the minimum
    displays the placeholder text and reads back as None.
    """

    _widget_id = "spin_box"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSpecialValueText(" ")  # Empty special value = None
        self.setRange(0, 2147483647)

    def get_value(self) -> Any:
        if self.value() == self.minimum() and self.specialValueText():
            return None
        return self.value()

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setValue(self.minimum())
        else:
            self.setValue(int(value))

    def set_placeholder(self, text: str) -> None:
        self.setSpecialValueText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.valueChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.valueChanged, callback)


class ComboBoxAdapter(QComboBox, _SignalBindings, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Adapter for QComboBox; values live in itemData, not the display text."""

    _widget_id = "combo_box"

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def populate_options(self, options: Dict[Any, str]) -> None:
        """Replace the items with ``{value: label}`` options, keeping order."""
        self.clear()
        for value, label in options.items():
            self.addItem(str(label), value)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.currentIndexChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.currentIndexChanged, callback)


class CheckBoxAdapter(QCheckBox, _SignalBindings, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Adapter for QCheckBox; None reads as unchecked."""

    _widget_id = "check_box"

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.stateChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.stateChanged, callback)
