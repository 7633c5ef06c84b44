"""
Host collaborator protocols, runtime configuration and widget contracts.

The Qt adapters are loaded lazily so the form services never import PyQt6.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .form_config import NarrowWidgetsConfig, set_widget_config, get_widget_config
from .form_state import FormStateProtocol
from .host_services import (
    BundleInfoService,
    SelectionHandler,
    SelectionManager,
    ViewExecutor,
    Translator,
    default_translator,
)
from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    ChangeSignalEmitter,
)

if TYPE_CHECKING:
    from .widget_adapters import (
        LineEditAdapter,
        SpinBoxAdapter,
        ComboBoxAdapter,
        CheckBoxAdapter,
        PyQtWidgetMeta,
    )

_EXPORTS = {
    "LineEditAdapter": ("narrow_widgets.protocols.widget_adapters", "LineEditAdapter"),
    "SpinBoxAdapter": ("narrow_widgets.protocols.widget_adapters", "SpinBoxAdapter"),
    "ComboBoxAdapter": ("narrow_widgets.protocols.widget_adapters", "ComboBoxAdapter"),
    "CheckBoxAdapter": ("narrow_widgets.protocols.widget_adapters", "CheckBoxAdapter"),
    "PyQtWidgetMeta": ("narrow_widgets.protocols.widget_adapters", "PyQtWidgetMeta"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "NarrowWidgetsConfig",
    "set_widget_config",
    "get_widget_config",
    "FormStateProtocol",
    "BundleInfoService",
    "SelectionHandler",
    "SelectionManager",
    "ViewExecutor",
    "Translator",
    "default_translator",
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "ChangeSignalEmitter",
    *_EXPORTS.keys(),
]
