"""Narrow widget exceptions."""


class SettingsError(ValueError):
    """Raised when widget settings cannot be parsed into a SettingsModel."""
