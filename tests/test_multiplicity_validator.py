"""Tests for value count validation."""

import pytest

from narrow_widgets.core.field import CARDINALITY_UNLIMITED, FieldDefinition
from narrow_widgets.core.settings import SettingsModel
from narrow_widgets.forms.form_state import FormState
from narrow_widgets.protocols.form_config import NarrowWidgetsConfig, set_widget_config
from narrow_widgets.services import MultiplicityValidator, ValidationError, count_populated


def _state(*target_ids, **kwargs):
    slots = {delta: {"target_id": target_id, "_weight": delta} for delta, target_id in enumerate(target_ids)}
    slots["add_more"] = "Add another item"
    return FormState({"field_refs": slots}, **kwargs)


ELEMENT = {"#field_parents": []}


def test_count_populated_ignores_empty_and_unstructured_values():
    values = {0: {"target_id": 3}, 1: {"target_id": ""}, 2: {"target_id": None}, "add_more": "Add"}
    assert count_populated(values, "target_id") == 1
    assert count_populated(None, "target_id") == 0


def test_non_ordinal_entries_are_not_counted(field):
    form_state = FormState({"field_refs": {0: {"target_id": 1}, "extra": {"target_id": 9}}})
    errors = MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=2), field)

    assert count_populated(form_state.get_value(["field_refs"]), "target_id") == 1
    assert [error.name for error in errors] == ["field_refs][0][target_id"]


def test_min_not_met_reports_on_last_slot(field):
    form_state = _state(1, None, None)
    errors = MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=2), field)

    assert errors == [ValidationError(
        "field_refs][2][target_id",
        "The minimum required amount of values for Related is 2.",
    )]
    assert form_state.errors == {"field_refs][2][target_id": errors[0].message}


@pytest.mark.parametrize("populated", [2, 3])
def test_min_met_reports_nothing(field, populated):
    form_state = _state(*range(1, populated + 1))
    assert MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=2), field) == []
    assert form_state.errors == {}


def test_max_exceeded_reports_once(field):
    form_state = _state(1, 2, 3)
    errors = MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(max=2), field)

    assert len(errors) == 1
    assert errors[0].name == "field_refs][2][target_id"
    assert errors[0].message == "The maximum number of values for Related is 2."


def test_max_reached_is_valid(field):
    form_state = _state(1, 2, None)
    assert MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(max=2), field) == []


def test_min_and_max_checks_are_independent(field):
    form_state = _state(1, 2)
    errors = MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=3, max=1), field)

    assert [error.message for error in errors] == [
        "The minimum required amount of values for Related is 3.",
        "The maximum number of values for Related is 1.",
    ]
    # The form state keeps the first error per element
    assert list(form_state.errors.values()) == [errors[0].message]


def test_unlimited_cardinality_is_not_validated(field):
    unlimited = FieldDefinition(name="field_refs", label="Related", cardinality=CARDINALITY_UNLIMITED)
    form_state = _state(None)
    assert MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=2), unlimited) == []


def test_suppressed_validation_reports_nothing(field):
    form_state = _state(None, limit_validation_errors=True)
    assert MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=2), field) == []
    assert form_state.errors == {}


def test_nested_field_parents_prefix_error_name(field):
    form_state = FormState({"paragraphs": {0: {"subform": {"field_refs": {0: {"target_id": None}}}}}})
    element = {"#field_parents": ["paragraphs", 0, "subform"]}
    errors = MultiplicityValidator().validate(element, form_state, SettingsModel(min=1), field)

    assert errors[0].name == "paragraphs][0][subform][field_refs][0][target_id"


def test_validation_is_idempotent(field):
    validator = MultiplicityValidator()
    form_state = _state(1, 2, 3)
    settings = SettingsModel(min=4, max=2)

    first = validator.validate(ELEMENT, form_state, settings, field)
    second = validator.validate(ELEMENT, form_state, settings, field)
    assert first == second


def test_messages_use_translator_and_config(field):
    set_widget_config(NarrowWidgetsConfig(min_error_message="@label needs @number"))
    validator = MultiplicityValidator(translator=lambda message, args=None: message.replace("@label", "Verwandt").replace("@number", str(args["@number"])))
    errors = validator.validate(ELEMENT, _state(None), SettingsModel(min=1), field)

    assert errors[0].message == "Verwandt needs 1"


def test_custom_primary_value_key(field):
    scalar_field = FieldDefinition(name="field_refs", label="Related", cardinality=3, primary_value_key="value")
    form_state = FormState({"field_refs": {0: {"value": "x"}, 1: {"value": ""}}})
    errors = MultiplicityValidator().validate(ELEMENT, form_state, SettingsModel(min=2), scalar_field)

    assert errors[0].name == "field_refs][1][value"
