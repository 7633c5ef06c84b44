"""
Service layer for the narrow widget.

Small stateless components the widget composes: value count validation,
add-more post-processing, title decoration, bundle discovery and the
per-slot bundle selector.
"""

from .multiplicity_validator import MultiplicityValidator, ValidationError, count_populated
from .add_more_controller import AddMoreController
from .label_decorator import LabelDecorator
from .bundle_catalog import BundleCatalog
from .bundle_selector import BundleSelector

__all__ = [
    "MultiplicityValidator",
    "ValidationError",
    "count_populated",
    "AddMoreController",
    "LabelDecorator",
    "BundleCatalog",
    "BundleSelector",
]
