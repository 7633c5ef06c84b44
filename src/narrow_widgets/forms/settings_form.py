"""
Admin settings sub-form for the narrow widget.

Contributes the widget's settings elements to the host's field settings form
and converts the submitted sub-form back into a SettingsModel.

Elements contributed:
- ``show_bundle_selector`` and one ``handlers`` fieldset per bundle, only
  when the field can reference more than one bundle; each fieldset clones
  the host's view selection sub-form
- ``min`` and ``max``, only when the field's cardinality is limited
"""

import logging
from typing import Any, Dict, Hashable, Mapping, Optional

from narrow_widgets.core import tree
from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.core.exceptions import SettingsError
from narrow_widgets.core.field import FieldDefinition
from narrow_widgets.core.settings import HandlerConfig, SettingsModel
from narrow_widgets.protocols.form_config import get_widget_config
from narrow_widgets.protocols.form_state import FormStateProtocol
from narrow_widgets.protocols.host_services import SelectionManager, Translator, default_translator
from narrow_widgets.services.bundle_catalog import BundleCatalog

logger = logging.getLogger(__name__)

Tree = Dict[Hashable, Any]


class SettingsFormBuilder:
    """Builds and reads the widget settings sub-form."""

    def __init__(
        self,
        catalog: BundleCatalog,
        selection_manager: Optional[SelectionManager] = None,
        translator: Optional[Translator] = None,
    ):
        self.catalog = catalog
        self.selection_manager = selection_manager
        self._t = translator or default_translator

    def build(
        self,
        form: Tree,
        settings: SettingsModel,
        field: FieldDefinition,
        form_state: FormStateProtocol,
    ) -> Tree:
        """Return ``form`` extended with the narrow widget settings."""
        result = tree.copy_tree(form)
        self.add_reference_narrow_settings(result, settings, field, form_state)
        self.add_multiple_narrow_settings(result, settings, field)
        return result

    def add_multiple_narrow_settings(self, form: Tree, settings: SettingsModel, field: FieldDefinition) -> None:
        # Unlimited fields aren't limited by this widget
        if field.is_unlimited:
            return

        form["min"] = {
            CONSTANTS.TYPE: CONSTANTS.NUMBER_TYPE,
            CONSTANTS.TITLE: self._t("Minimum"),
            CONSTANTS.DEFAULT_VALUE: settings.min,
            CONSTANTS.DESCRIPTION: self._t(
                "The minimum number of values that should be allowed in this field. Leave blank for no minimum."
            ),
        }
        form["max"] = {
            CONSTANTS.TYPE: CONSTANTS.NUMBER_TYPE,
            CONSTANTS.TITLE: self._t("Maximum"),
            CONSTANTS.DEFAULT_VALUE: settings.max,
            CONSTANTS.DESCRIPTION: self._t(
                "The maximum number of values that should be allowed in this field. Leave blank for no maximum."
            ),
        }

    def add_reference_narrow_settings(
        self,
        form: Tree,
        settings: SettingsModel,
        field: FieldDefinition,
        form_state: FormStateProtocol,
    ) -> None:
        if not self.catalog.can_narrow(field):
            return

        form["show_bundle_selector"] = {
            CONSTANTS.TYPE: CONSTANTS.CHECKBOX_TYPE,
            CONSTANTS.TITLE: self._t("Display bundle narrowing"),
            CONSTANTS.DEFAULT_VALUE: settings.show_bundle_selector,
        }
        handlers: Tree = {
            CONSTANTS.TYPE: CONSTANTS.DETAILS_TYPE,
            CONSTANTS.TITLE: self._t("Bundle selection handlers"),
            CONSTANTS.TREE: True,
        }

        view_selection = self.view_selection_form(field, form_state)
        for bundle in self.catalog.referenceable_bundles(field):
            handler = settings.handler_for(bundle)
            element = tree.copy_tree(view_selection)
            element[CONSTANTS.TYPE] = CONSTANTS.FIELDSET_TYPE
            element[CONSTANTS.TITLE] = bundle
            tree.set_value(element, [CONSTANTS.VIEW_AND_DISPLAY_KEY, CONSTANTS.DEFAULT_VALUE], handler.view_and_display)
            tree.set_value(element, [CONSTANTS.ARGUMENTS_KEY, CONSTANTS.DEFAULT_VALUE], handler.arguments or None)
            tree.set_value(element, [CONSTANTS.ARGUMENTS_KEY, CONSTANTS.REQUIRED], False)
            handlers[bundle] = element

        form[CONSTANTS.HANDLERS_KEY] = handlers

    def view_selection_form(self, field: FieldDefinition, form_state: FormStateProtocol) -> Tree:
        """The view selection elements of the host's views selection handler."""
        view_selection: Tree = {}
        if self.selection_manager is not None:
            handler = self.selection_manager.get_instance({
                "target_type": field.target_type,
                "handler": CONSTANTS.VIEWS_HANDLER,
                "handler_settings": {},
                "entity": None,
            })
            configuration = handler.build_configuration_form({}, form_state) or {}
            view_selection = tree.copy_tree(configuration.get(CONSTANTS.VIEW_KEY) or {})
        else:
            logger.debug("No selection manager, view selection offers direct restriction only")

        view_and_display = view_selection.setdefault(CONSTANTS.VIEW_AND_DISPLAY_KEY, {
            CONSTANTS.TYPE: CONSTANTS.SELECT_TYPE,
            CONSTANTS.TITLE: self._t("View used to select the entities"),
        })
        options = view_and_display.setdefault(CONSTANTS.OPTIONS, {})
        options[CONSTANTS.DEFAULT_VIEW_NAME] = self._t(get_widget_config().no_view_option_label)
        view_selection.setdefault(CONSTANTS.ARGUMENTS_KEY, {
            CONSTANTS.TYPE: "textfield",
            CONSTANTS.TITLE: self._t("View arguments"),
        })
        return view_selection

    def extract(self, values: Optional[Mapping[str, Any]]) -> SettingsModel:
        """Convert submitted settings sub-form values into a SettingsModel.

        Raises:
            SettingsError: If a limit or a ``view_and_display`` value is malformed
        """
        values = values or {}
        handlers = {
            bundle: parse_handler(raw)
            for bundle, raw in (values.get(CONSTANTS.HANDLERS_KEY) or {}).items()
        }
        return SettingsModel.from_dict({
            "min": values.get("min"),
            "max": values.get("max"),
            "show_bundle_selector": values.get("show_bundle_selector", False),
            "handlers": {bundle: handler.to_dict() for bundle, handler in handlers.items()},
        })


def parse_handler(raw: Optional[Mapping[str, Any]]) -> HandlerConfig:
    """Parse one submitted handler fieldset (``view_and_display`` + ``arguments``)."""
    raw = raw or {}
    view_and_display = raw.get(CONSTANTS.VIEW_AND_DISPLAY_KEY) or CONSTANTS.DEFAULT_VIEW_NAME
    if view_and_display == CONSTANTS.DEFAULT_VIEW_NAME:
        return HandlerConfig.default()

    view_name, separator, display_name = str(view_and_display).partition(CONSTANTS.VIEW_DISPLAY_SEPARATOR)
    if not separator or not view_name or not display_name:
        raise SettingsError(f"Expected 'view.display', got {view_and_display!r}")
    return HandlerConfig(
        view_name=view_name,
        display_name=display_name,
        arguments=raw.get(CONSTANTS.ARGUMENTS_KEY) or None,
    )
