"""
Reference narrow widget.

An autocomplete reference widget with:
- inline selection of the referenceable bundle per value slot
- limitation of the number of references (min, max)

The widget composes the stateless components by delegation. Each host hook
takes the tree the host's base widget built and returns a new tree.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, List, Optional

from narrow_widgets.core import tree
from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.core.field import FieldDefinition, FieldItems, ValueSlot
from narrow_widgets.core.settings import SettingsModel, default_settings
from narrow_widgets.protocols.form_state import FormStateProtocol
from narrow_widgets.protocols.host_services import (
    BundleInfoService,
    SelectionManager,
    Translator,
    ViewExecutor,
    default_translator,
)
from narrow_widgets.services.add_more_controller import AddMoreController
from narrow_widgets.services.bundle_catalog import BundleCatalog
from narrow_widgets.services.bundle_selector import BundleSelector
from narrow_widgets.services.label_decorator import LabelDecorator
from narrow_widgets.services.multiplicity_validator import MultiplicityValidator, ValidationError
from .settings_form import SettingsFormBuilder

logger = logging.getLogger(__name__)

Tree = Dict[Hashable, Any]


class ReferenceNarrowWidget:
    """Reference widget with bundle narrowing and value count limits."""

    widget_id = "reference_narrow_widget"
    label = "Autocomplete (Narrower)"
    field_types = ("entity_reference",)

    def __init__(
        self,
        field: FieldDefinition,
        settings: Optional[SettingsModel] = None,
        bundle_info: Optional[BundleInfoService] = None,
        selection_manager: Optional[SelectionManager] = None,
        translator: Optional[Translator] = None,
    ):
        self.field = field
        self.settings = settings or SettingsModel()
        translator = translator or default_translator

        self.catalog = BundleCatalog(bundle_info)
        self.bundle_selector = BundleSelector(self.catalog)
        self.validator = MultiplicityValidator(translator)
        self.add_more_controller = AddMoreController()
        self.label_decorator = LabelDecorator()
        self.settings_form_builder = SettingsFormBuilder(self.catalog, selection_manager, translator)

    @staticmethod
    def default_settings() -> Dict[str, Any]:
        return default_settings()

    def settings_form(self, form: Tree, form_state: FormStateProtocol) -> Tree:
        return self.settings_form_builder.build(form, self.settings, self.field, form_state)

    def submit_settings_form(self, values: Dict[str, Any]) -> SettingsModel:
        """Read the submitted settings sub-form and adopt it as the widget settings."""
        self.settings = self.settings_form_builder.extract(values)
        logger.info(f"Updated settings of '{self.field.name}': {self.settings.to_dict()}")
        return self.settings

    def form(self, form_build: Tree, form_state: FormStateProtocol) -> Tree:
        """Attach the value count validation and the limits to the widget title."""
        result = tree.copy_tree(form_build)
        widget = result.setdefault(CONSTANTS.WIDGET_KEY, {})
        widget[CONSTANTS.ELEMENT_VALIDATE] = [self.validate_element]
        title = widget.get(CONSTANTS.TITLE)
        if title:
            widget[CONSTANTS.TITLE] = self.label_decorator.decorate(title, self.settings)
        return result

    def form_multiple_elements(self, elements: Tree, form_state: FormStateProtocol) -> Tree:
        return self.add_more_controller.adjust(elements, CONSTANTS.ADD_MORE_KEY, self.settings)

    def form_element(
        self,
        form_build: Tree,
        items: FieldItems,
        delta: int,
        element: Tree,
        form_state: FormStateProtocol,
    ) -> Tree:
        """Wrap one slot's reference input with the bundle selector."""
        slot = ValueSlot.from_items(items, delta)
        return self.bundle_selector.render(
            form_build,
            slot,
            self.field,
            element.get(CONSTANTS.FIELD_PARENTS) or [],
            form_state,
            self.settings,
            ajax_callback=self.set_referenceable_bundle,
        )

    def validate_element(self, element: Tree, form_state: FormStateProtocol) -> List[ValidationError]:
        return self.validator.validate(element, form_state, self.settings, self.field)

    def set_referenceable_bundle(self, form: Tree, form_state: FormStateProtocol) -> Tree:
        return self.bundle_selector.refresh(form, form_state)

    def candidates(self, target: Tree, executor: ViewExecutor, match: Optional[str] = None) -> Optional[List[Any]]:
        """Candidates of a slot's reference input when it delegates to a view."""
        return self.bundle_selector.run_view_filter(target, executor, match)
