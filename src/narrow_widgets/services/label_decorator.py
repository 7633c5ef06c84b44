"""Appends the configured value limits to a field title."""

from narrow_widgets.core.settings import SettingsModel


class LabelDecorator:
    """Shows the configured min/max next to the field title. Stateless."""

    def decorate(self, title: str, settings: SettingsModel) -> str:
        """Return ``title`` with a ``(min: x, max: y)`` suffix for the limits that are set."""
        parts = []
        if settings.min:
            parts.append(f"min: {settings.min}")
        if settings.max:
            parts.append(f"max: {settings.max}")
        if not parts:
            return title
        return f"{title} ({', '.join(parts)})"
