"""
narrow-widgets: bundle narrowing and value count limits for reference field widgets.

Augments a host's reference (autocomplete) field widget with a per-slot
bundle selector, optional delegation of candidate filtering to a named view,
and a configurable minimum/maximum number of values.

Architecture:
- Tier 1 (Core): Settings, field/slot types and form tree helpers, no host deps
- Tier 2 (Protocols): Host collaborator contracts, runtime config, widget ABCs
- Tier 3 (Services): Validator, add-more controller, label decorator,
  bundle catalog and bundle selector
- Tier 4 (Forms): The composed ReferenceNarrowWidget and its settings form
- Tier 5 (Widgets): PyQt6 admin panel for editing widget settings

Every service takes its settings and collaborators as explicit parameters
and returns new form trees instead of mutating the host's.
"""

__version__ = "0.1.0"

from narrow_widgets.core.settings import HandlerConfig, SettingsModel
from narrow_widgets.core.field import (
    CARDINALITY_UNLIMITED,
    BundleOption,
    FieldDefinition,
    FieldItems,
    ReferencedEntity,
    ValueSlot,
)
from narrow_widgets.forms.reference_widget import ReferenceNarrowWidget

__all__ = [
    "__version__",
    "HandlerConfig",
    "SettingsModel",
    "CARDINALITY_UNLIMITED",
    "BundleOption",
    "FieldDefinition",
    "FieldItems",
    "ReferencedEntity",
    "ValueSlot",
    "ReferenceNarrowWidget",
]
