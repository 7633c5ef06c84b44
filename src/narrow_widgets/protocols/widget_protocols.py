"""
Widget ABC contracts for the settings panel.

Every Qt input the settings panel renders implements these, so values are
read and written through one interface instead of Qt's per-class APIs.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.

    All input widgets must implement this to participate in value extraction.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """ABC for widgets that can accept a value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class PlaceholderCapable(ABC):
    """ABC for widgets that can display text while they hold no value."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Hides the differences between textChanged, valueChanged,
    currentIndexChanged and stateChanged.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        Args:
            callback: Called with the new value whenever the widget changes.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        pass
