"""Tests for the PyQt6 settings panel."""

import pytest

from narrow_widgets.core.field import CARDINALITY_UNLIMITED, FieldDefinition
from narrow_widgets.core.settings import HandlerConfig, SettingsModel
from narrow_widgets.forms.settings_form import SettingsFormBuilder
from narrow_widgets.services import BundleCatalog


@pytest.fixture
def builder(bundle_info, selection_manager):
    return SettingsFormBuilder(BundleCatalog(bundle_info), selection_manager)


def test_panel_renders_inputs_for_each_setting(qapp, builder, field):
    from narrow_widgets.widgets import NarrowSettingsPanel

    panel = NarrowSettingsPanel(builder, field, SettingsModel(min=2))

    assert set(panel.inputs) == {
        ("show_bundle_selector",),
        ("handlers", "article", "view_and_display"),
        ("handlers", "article", "arguments"),
        ("handlers", "page", "view_and_display"),
        ("handlers", "page", "arguments"),
        ("min",),
        ("max",),
    }
    assert panel.inputs[("min",)].get_value() == 2
    assert panel.inputs[("max",)].get_value() is None
    assert panel.get_settings() == SettingsModel(
        min=2,
        handlers={"article": HandlerConfig(), "page": HandlerConfig()},
    )


def test_panel_emits_settings_on_edit(qapp, builder, field):
    from narrow_widgets.widgets import NarrowSettingsPanel

    panel = NarrowSettingsPanel(builder, field)
    emitted = []
    panel.settings_changed.connect(emitted.append)

    panel.set_input_value(("max",), 3)
    panel.set_input_value(("handlers", "page", "view_and_display"), "related_pages.entity_reference_1")
    panel.set_input_value(("handlers", "page", "arguments"), "12")

    assert emitted[-1].max == 3
    assert emitted[-1].handlers["page"] == HandlerConfig("related_pages", "entity_reference_1", "12")
    assert panel.settings == emitted[-1]


def test_panel_without_applicable_settings(qapp, builder, single_bundle_field):
    from narrow_widgets.widgets import NarrowSettingsPanel

    unlimited = FieldDefinition(
        name="f", label="F", cardinality=CARDINALITY_UNLIMITED,
        handler_settings=single_bundle_field.handler_settings,
    )
    panel = NarrowSettingsPanel(builder, unlimited)
    assert panel.inputs == {}
    assert panel.get_settings() == SettingsModel()


def test_no_scroll_spinbox_reads_minimum_as_none(qapp):
    from narrow_widgets.widgets import NoScrollSpinBox
    from narrow_widgets.protocols import ValueGettable, ValueSettable

    spin = NoScrollSpinBox()
    assert isinstance(spin, ValueGettable)
    assert isinstance(spin, ValueSettable)
    assert spin.get_value() is None
    spin.set_value(4)
    assert spin.get_value() == 4


def test_change_signal_disconnect(qapp):
    from narrow_widgets.protocols import LineEditAdapter

    edit = LineEditAdapter()
    seen = []

    def on_change(value):
        seen.append(value)

    edit.connect_change_signal(on_change)
    edit.set_value("a")
    edit.disconnect_change_signal(on_change)
    edit.set_value("b")
    assert seen == ["a"]
