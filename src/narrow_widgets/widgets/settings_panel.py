"""
Admin settings panel for the narrow widget.

Renders the settings sub-form produced by SettingsFormBuilder as a PyQt6
form: number inputs become no-scroll spin boxes, selects become combo boxes,
details/fieldsets become group boxes. Edits are read back through
``SettingsFormBuilder.extract`` and announced as a new SettingsModel.
"""

import logging
from typing import Any, Dict, Hashable, Optional, Tuple

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFormLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from narrow_widgets.core import tree
from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.core.exceptions import SettingsError
from narrow_widgets.core.field import FieldDefinition
from narrow_widgets.core.settings import SettingsModel
from narrow_widgets.forms.form_state import FormState
from narrow_widgets.forms.settings_form import SettingsFormBuilder
from .element_factory import CONTAINER_TYPES, ElementWidgetFactory

logger = logging.getLogger(__name__)

KeyPath = Tuple[Hashable, ...]


class NarrowSettingsPanel(QWidget):
    """Editable view of one widget's SettingsModel."""

    settings_changed = pyqtSignal(object)  # SettingsModel after each valid edit
    settings_invalid = pyqtSignal(str)     # Error message when an edit can't be parsed

    def __init__(
        self,
        builder: SettingsFormBuilder,
        field: FieldDefinition,
        settings: Optional[SettingsModel] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.builder = builder
        self.field = field
        self.settings = settings or SettingsModel()
        self.inputs: Dict[KeyPath, QWidget] = {}
        self._factory = ElementWidgetFactory()

        layout = QVBoxLayout(self)
        form_tree = self.builder.build({}, self.settings, self.field, FormState())
        if not tree.child_keys(form_tree):
            layout.addWidget(QLabel("This field has no narrowing settings."))
        else:
            self._render_children(form_tree, layout, ())
        layout.addStretch()

    def _render_children(self, node: Dict[Hashable, Any], layout, path: KeyPath) -> None:
        form_layout = layout if isinstance(layout, QFormLayout) else None
        for key in tree.child_keys(node):
            element = node[key]
            if not isinstance(element, dict):
                continue
            child_path = path + (key,)
            element_type = element.get(CONSTANTS.TYPE)

            if element_type in CONTAINER_TYPES:
                group = QGroupBox(str(element.get(CONSTANTS.TITLE) or key))
                self._render_children(element, QFormLayout(group), child_path)
                self._add_row(layout, form_layout, None, group)
                continue

            widget = self._factory.create(element)
            widget.connect_change_signal(self._on_value_changed)
            self.inputs[child_path] = widget
            label = None if element_type == CONSTANTS.CHECKBOX_TYPE else element.get(CONSTANTS.TITLE)
            self._add_row(layout, form_layout, label, widget)

    @staticmethod
    def _add_row(layout, form_layout: Optional[QFormLayout], label: Optional[str], widget: QWidget) -> None:
        if form_layout is not None:
            if label:
                form_layout.addRow(str(label), widget)
            else:
                form_layout.addRow(widget)
            return
        if label:
            layout.addWidget(QLabel(str(label)))
        layout.addWidget(widget)

    def get_values(self) -> Dict[Hashable, Any]:
        """Submitted-values shaped dict of the current inputs."""
        values: Dict[Hashable, Any] = {}
        for path, widget in self.inputs.items():
            tree.set_value(values, list(path), widget.get_value())
        return values

    def get_settings(self) -> SettingsModel:
        """Raises SettingsError when the inputs don't form valid settings."""
        return self.builder.extract(self.get_values())

    def set_input_value(self, path: Tuple[Hashable, ...], value: Any) -> None:
        self.inputs[tuple(path)].set_value(value)

    def _on_value_changed(self, value: Any) -> None:
        try:
            self.settings = self.get_settings()
        except SettingsError as e:
            logger.warning(f"Invalid narrow widget settings for '{self.field.name}': {e}")
            self.settings_invalid.emit(str(e))
            return
        self.settings_changed.emit(self.settings)
