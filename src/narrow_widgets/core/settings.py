"""Typed widget settings.

The host persists widget settings as a flat mapping. SettingsModel is the
typed view of that mapping the narrow widget components consume; it is
built with defaults, changed only through the settings form, and handed
back to the host through ``to_dict()``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constants import CONSTANTS
from .exceptions import SettingsError


@dataclass(frozen=True)
class HandlerConfig:
    """Filtering strategy for one bundle.

    Attributes:
        view_name: Name of the view delegated to, or ``"default"`` for a
            direct bundle restriction
        display_name: Display of the view to execute
        arguments: Optional argument string passed to the view
    """

    view_name: str = CONSTANTS.DEFAULT_VIEW_NAME
    display_name: str = ""
    arguments: Optional[str] = None

    @classmethod
    def default(cls) -> "HandlerConfig":
        return cls()

    @property
    def is_default(self) -> bool:
        return self.view_name == CONSTANTS.DEFAULT_VIEW_NAME

    @property
    def view_and_display(self) -> str:
        """Combined ``view.display`` key used by the view selection sub-form."""
        if self.is_default or not self.display_name:
            return CONSTANTS.DEFAULT_VIEW_NAME
        return f"{self.view_name}{CONSTANTS.VIEW_DISPLAY_SEPARATOR}{self.display_name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "view_name": self.view_name,
            "display_name": self.display_name,
            "arguments": self.arguments,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "HandlerConfig":
        if not data:
            return cls.default()
        arguments = data.get("arguments") or None
        return cls(
            view_name=data.get("view_name") or CONSTANTS.DEFAULT_VIEW_NAME,
            display_name=data.get("display_name") or "",
            arguments=arguments,
        )


def _parse_limit(name: str, raw: Any) -> Optional[int]:
    """Normalize a persisted min/max value; empty and zero mean no limit."""
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"Setting '{name}' must be an integer, got {raw!r}") from e
    if value < 0:
        raise SettingsError(f"Setting '{name}' must not be negative, got {value}")
    return value or None


@dataclass(frozen=True)
class SettingsModel:
    """Configuration of one narrow widget instance.

    No ordering between ``min`` and ``max`` is enforced.
    """

    min: Optional[int] = None
    max: Optional[int] = None
    show_bundle_selector: bool = False  # Stored for the settings form; narrowing follows the bundle count
    handlers: Dict[str, HandlerConfig] = field(default_factory=dict)

    def handler_for(self, bundle: str) -> HandlerConfig:
        """Return the handler configured for a bundle, defaulting to direct restriction."""
        return self.handlers.get(bundle) or HandlerConfig.default()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "show_bundle_selector": self.show_bundle_selector,
            "handlers": {bundle: handler.to_dict() for bundle, handler in self.handlers.items()},
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SettingsModel":
        """Build settings from the host's persisted mapping, filling defaults."""
        merged = default_settings()
        merged.update(data or {})
        handlers = {
            bundle: HandlerConfig.from_dict(handler)
            for bundle, handler in (merged.get(CONSTANTS.HANDLERS_KEY) or {}).items()
        }
        return cls(
            min=_parse_limit("min", merged.get("min")),
            max=_parse_limit("max", merged.get("max")),
            show_bundle_selector=bool(merged.get("show_bundle_selector")),
            handlers=handlers,
        )


def reference_narrow_default_settings() -> Dict[str, Any]:
    return {
        "show_bundle_selector": False,
        "handlers": {},
    }


def multiple_narrow_default_settings() -> Dict[str, Any]:
    return {
        "min": None,
        "max": None,
    }


def default_settings() -> Dict[str, Any]:
    """Widget defaults: bundle narrowing defaults merged with multiplicity defaults."""
    settings = reference_narrow_default_settings()
    settings.update(multiple_narrow_default_settings())
    return settings
