"""
Core types and helpers.

Pure Python with no host or Qt dependencies: widget settings, field and
value slot types, form tree helpers, constants and logging setup.
"""

from .constants import CONSTANTS, NarrowWidgetConstants
from .exceptions import SettingsError
from .settings import HandlerConfig, SettingsModel, default_settings
from .field import (
    CARDINALITY_UNLIMITED,
    BundleOption,
    FieldDefinition,
    FieldItems,
    ReferencedEntity,
    ValueSlot,
)
from . import tree

__all__ = [
    "CONSTANTS",
    "NarrowWidgetConstants",
    "SettingsError",
    "HandlerConfig",
    "SettingsModel",
    "default_settings",
    "CARDINALITY_UNLIMITED",
    "BundleOption",
    "FieldDefinition",
    "FieldItems",
    "ReferencedEntity",
    "ValueSlot",
    "tree",
]
