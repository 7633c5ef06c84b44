"""
Per-slot bundle narrowing.

Wraps a slot's reference input together with a companion bundle selector.
The active bundle of a slot is resolved on every render, in priority order:

1. the bundle submitted for the slot (preserves user edits across a failed
   validation round-trip),
2. the bundle of the record the slot currently references,
3. the first referenceable bundle.

The resolved bundle's handler then either restricts the reference input to
that bundle directly or hands candidate filtering to a named view. Changing
the selector triggers an ajax refresh that replaces the reference input with
a cleared copy, so a record of the previous bundle never reaches validation.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

from narrow_widgets.core import tree
from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.core.field import BundleOption, FieldDefinition, ValueSlot
from narrow_widgets.core.settings import HandlerConfig, SettingsModel
from narrow_widgets.protocols.form_config import get_widget_config
from narrow_widgets.protocols.form_state import FormStateProtocol
from narrow_widgets.protocols.host_services import ViewExecutor
from .bundle_catalog import BundleCatalog

logger = logging.getLogger(__name__)

# Debug flag for verbose bundle resolution logging
DEBUG_BUNDLE_SELECTOR = False

Tree = Dict[Hashable, Any]


class BundleSelector:
    """Render hook and ajax refresh callback for bundle narrowing."""

    def __init__(self, catalog: BundleCatalog):
        self.catalog = catalog

    def is_active(self, field: FieldDefinition) -> bool:
        return self.catalog.can_narrow(field)

    def resolve_bundle(
        self,
        options: List[BundleOption],
        slot: ValueSlot,
        bundle_path: Sequence[Hashable],
        form_state: FormStateProtocol,
    ) -> str:
        """Pick the active bundle of a slot: submitted, then referenced, then first."""
        known = {option.id for option in options}

        submitted = form_state.get_value(bundle_path)
        if submitted and submitted in known:
            source, bundle = "submitted", submitted
        elif slot.bundle and slot.bundle in known:
            source, bundle = "referenced", slot.bundle
        else:
            if submitted:
                logger.debug(f"Ignoring unknown submitted bundle {submitted!r} for slot {slot.delta}")
            source, bundle = "fallback", options[0].id

        if DEBUG_BUNDLE_SELECTOR:
            logger.info(f"🔍 Slot {slot.delta}: bundle '{bundle}' ({source})")
        return bundle

    def render(
        self,
        form: Tree,
        slot: ValueSlot,
        field: FieldDefinition,
        field_parents: Sequence[Hashable],
        form_state: FormStateProtocol,
        settings: SettingsModel,
        ajax_callback: Optional[Callable[..., Any]] = None,
    ) -> Tree:
        """Return the slot element wrapped with the bundle selector.

        Args:
            form: The slot element holding the reference input under ``target_id``
            slot: The slot being rendered
            field: Field definition
            field_parents: ``#field_parents`` of the widget element
            form_state: Current form state
            settings: Widget settings
            ajax_callback: Callback the host invokes when the selector changes;
                defaults to ``self.refresh``

        Returns:
            A new element; ``form`` is left untouched
        """
        if not self.is_active(field):
            return tree.copy_tree(form)

        options = self.catalog.bundle_options(field)
        bundle_path = list(field_parents) + [field.name, slot.delta, CONSTANTS.BUNDLE_KEY]
        current = self.resolve_bundle(options, slot, bundle_path, form_state)

        target = tree.copy_tree(form.get(CONSTANTS.TARGET_ID_KEY) or {})
        wrapper = f"{tree.wrapper_id(bundle_path)}-{slot.delta}-{get_widget_config().wrapper_id_suffix}"

        build: Tree = {
            CONSTANTS.TYPE: CONSTANTS.FIELDSET_TYPE,
            CONSTANTS.TITLE: target.get(CONSTANTS.TITLE),
            CONSTANTS.ATTRIBUTES: {"class": [CONSTANTS.INLINE_FORM_CLASS]},
            CONSTANTS.BUNDLE_KEY: self.build_selector(options, current, wrapper, ajax_callback or self.refresh),
        }
        for key, value in form.items():
            if key not in build:
                build[key] = tree.copy_tree(value)

        target[CONSTANTS.TITLE_DISPLAY] = False
        self.apply_handler(target, current, self.catalog.handler_for(current, settings))

        if slot.bundle and slot.bundle != current:
            # Referenced record belongs to another bundle
            logger.debug(f"Clearing stale '{slot.bundle}' reference in slot {slot.delta} (active '{current}')")
            target[CONSTANTS.VALUE] = None
            target[CONSTANTS.DEFAULT_VALUE] = None

        target[CONSTANTS.PREFIX] = f"<div id='{wrapper}'>"
        target[CONSTANTS.SUFFIX] = "</div>"
        build[CONSTANTS.TARGET_ID_KEY] = target
        return build

    def build_selector(
        self,
        options: List[BundleOption],
        current: str,
        wrapper: str,
        callback: Callable[..., Any],
    ) -> Tree:
        return {
            CONSTANTS.TYPE: CONSTANTS.SELECT_TYPE,
            CONSTANTS.OPTIONS: {option.id: option.label for option in options},
            CONSTANTS.DEFAULT_VALUE: current,
            CONSTANTS.AJAX: {
                "callback": callback,
                "event": CONSTANTS.CHANGE_EVENT,
                "wrapper": wrapper,
                "method": CONSTANTS.REPLACE_METHOD,
                "progress": {
                    "type": CONSTANTS.THROBBER,
                    "message": None,
                },
            },
        }

    @staticmethod
    def apply_handler(target: Tree, bundle: str, handler: HandlerConfig) -> None:
        """Point the reference input at a bundle, directly or through a view."""
        selection_settings = target.setdefault(CONSTANTS.SELECTION_SETTINGS, {})
        if handler.is_default:
            selection_settings[CONSTANTS.TARGET_BUNDLES_KEY] = [bundle]
            return

        selection_settings.pop(CONSTANTS.TARGET_BUNDLES_KEY, None)
        target[CONSTANTS.SELECTION_HANDLER] = CONSTANTS.VIEWS_HANDLER
        selection_settings[CONSTANTS.VIEW_KEY] = handler.to_dict()

    def refresh(self, form: Tree, form_state: FormStateProtocol) -> Tree:
        """Ajax callback: return the triggering slot's reference input, cleared.

        The slot is found from the triggering selector's ``#array_parents``;
        the form is marked for rebuild so the next build applies the new
        bundle's filter.
        """
        trigger = form_state.triggering_element or {}
        array_parents = list(trigger.get(CONSTANTS.ARRAY_PARENTS) or [])
        element_widget = tree.get_value(form, array_parents[:-1])

        if not array_parents or not isinstance(element_widget, dict):
            logger.warning(f"Bundle refresh could not locate the slot at {array_parents!r}")
            return {}

        element = tree.copy_tree(element_widget.get(CONSTANTS.TARGET_ID_KEY) or {})
        element[CONSTANTS.VALUE] = None
        element[CONSTANTS.DEFAULT_VALUE] = None

        form_state.set_rebuild(True)
        logger.debug(f"Bundle changed at {array_parents!r}, reference input cleared")
        return element

    @staticmethod
    def view_arguments(handler: Dict[str, Any]) -> List[str]:
        """Split a view handler's comma separated argument string."""
        raw = handler.get(CONSTANTS.ARGUMENTS_KEY) or ""
        return [argument.strip() for argument in raw.split(",") if argument.strip()]

    def run_view_filter(
        self,
        target: Tree,
        executor: ViewExecutor,
        match: Optional[str] = None,
    ) -> Optional[List[Any]]:
        """Compute candidates of a view-delegated reference input.

        Returns None when the input is restricted directly to a bundle; the
        host's own selection handles that case.
        """
        if target.get(CONSTANTS.SELECTION_HANDLER) != CONSTANTS.VIEWS_HANDLER:
            return None
        view = (target.get(CONSTANTS.SELECTION_SETTINGS) or {}).get(CONSTANTS.VIEW_KEY) or {}
        return executor.execute(
            view.get("view_name"),
            view.get("display_name"),
            arguments=self.view_arguments(view),
            match=match,
        )
