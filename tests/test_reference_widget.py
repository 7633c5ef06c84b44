"""Tests for the composed reference narrow widget."""

import pytest

from narrow_widgets import FieldItems, ReferenceNarrowWidget, ReferencedEntity
from narrow_widgets.core.settings import HandlerConfig, SettingsModel
from narrow_widgets.forms.form_state import FormState


@pytest.fixture
def widget(field, bundle_info, selection_manager):
    settings = SettingsModel(
        min=1,
        max=2,
        show_bundle_selector=True,
        handlers={"page": HandlerConfig("related_pages", "entity_reference_1", "12")},
    )
    return ReferenceNarrowWidget(field, settings, bundle_info=bundle_info, selection_manager=selection_manager)


def test_default_settings():
    assert ReferenceNarrowWidget.default_settings() == {
        "show_bundle_selector": False,
        "handlers": {},
        "min": None,
        "max": None,
    }


def test_form_attaches_validation_and_title(widget, form_state):
    result = widget.form({"widget": {"#title": "Related"}}, form_state)
    assert result["widget"]["#title"] == "Related (min: 1, max: 2)"
    assert result["widget"]["#element_validate"] == [widget.validate_element]


def test_form_without_title_gets_no_limit_suffix(widget, form_state):
    result = widget.form({"widget": {}}, form_state)
    assert "#title" not in result["widget"]
    assert result["widget"]["#element_validate"] == [widget.validate_element]


def test_element_validate_hook_reports_errors(widget):
    form = widget.form({"widget": {"#title": "Related", "#field_parents": []}}, FormState())
    form_state = FormState({"field_refs": {0: {"target_id": None}, 1: {"target_id": None}}})

    for hook in form["widget"]["#element_validate"]:
        hook(form["widget"], form_state)

    assert form_state.errors == {
        "field_refs][1][target_id": "The minimum required amount of values for Related is 1.",
    }


def test_form_multiple_elements_drops_add_more(widget, form_state):
    elements = {0: {}, 1: {}, "add_more": {"#type": "submit"}}
    assert "add_more" not in widget.form_multiple_elements(elements, form_state)


def test_form_element_wraps_slot_with_selector(widget, slot_form, form_state):
    items = FieldItems(widget.field, [ReferencedEntity(id=7, bundle="page")])
    result = widget.form_element(slot_form, items, 0, {"#field_parents": []}, form_state)

    assert result["bundle"]["#default_value"] == "page"
    assert result["bundle"]["#ajax"]["callback"] == widget.set_referenceable_bundle
    assert result["target_id"]["#selection_handler"] == "views"


def test_form_element_for_new_slot_uses_first_bundle(widget, slot_form, form_state):
    items = FieldItems(widget.field, [ReferencedEntity(id=7, bundle="page")])
    result = widget.form_element(slot_form, items, 1, {"#field_parents": []}, form_state)

    assert result["bundle"]["#default_value"] == "article"
    assert result["target_id"]["#selection_settings"]["target_bundles"] == ["article"]


def test_refresh_callback(widget, slot_form, article_items, form_state):
    slot = widget.form_element(slot_form, article_items, 0, {"#field_parents": []}, form_state)
    trigger = {"#array_parents": ["field_refs", "widget", 0, "bundle"]}
    refresh_state = FormState(triggering_element=trigger)

    element = widget.set_referenceable_bundle({"field_refs": {"widget": {0: slot}}}, refresh_state)

    assert element["#value"] is None
    assert element["#default_value"] is None
    assert refresh_state.rebuild


def test_settings_form_and_submit(widget, form_state):
    form = widget.settings_form({}, form_state)
    assert {"min", "max", "show_bundle_selector", "handlers"} <= set(form)

    settings = widget.submit_settings_form({
        "min": 2,
        "max": None,
        "show_bundle_selector": False,
        "handlers": {"page": {"view_and_display": "default"}},
    })
    assert settings is widget.settings
    assert settings == SettingsModel(min=2, handlers={"page": HandlerConfig()})


def test_candidates_delegate_to_view(widget, slot_form, form_state, view_executor):
    items = FieldItems(widget.field, [ReferencedEntity(id=7, bundle="page")])
    target = widget.form_element(slot_form, items, 0, {"#field_parents": []}, form_state)["target_id"]

    assert widget.candidates(target, view_executor, "abc") == ["candidate"]
    assert view_executor.calls == [("related_pages", "entity_reference_1", ["12"], "abc")]
