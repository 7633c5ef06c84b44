"""pytest configuration and fixtures for narrow-widgets tests."""

import os

import pytest

# Qt widgets need a platform plugin even when nothing is shown
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from narrow_widgets.core.field import FieldDefinition, FieldItems, ReferencedEntity
from narrow_widgets.forms.form_state import FormState
from narrow_widgets.protocols.form_config import set_widget_config


class FakeBundleInfo:
    """Bundle metadata for the 'node' entity type."""

    def __init__(self):
        self.calls = []

    def get_bundle_info(self, target_type):
        self.calls.append(target_type)
        return {
            "article": {"label": "Article"},
            "page": {"label": "Basic page"},
        }


class FakeSelectionHandler:

    def build_configuration_form(self, form, form_state):
        return {
            "view": {
                "view_and_display": {
                    "#type": "select",
                    "#title": "View used to select the entities",
                    "#options": {"related_pages.entity_reference_1": "Related pages"},
                },
                "arguments": {
                    "#type": "textfield",
                    "#title": "View arguments",
                    "#required": True,
                },
            },
        }


class FakeSelectionManager:

    def __init__(self):
        self.options = []

    def get_instance(self, options):
        self.options.append(dict(options))
        return FakeSelectionHandler()


class FakeViewExecutor:

    def __init__(self, results=None):
        self.calls = []
        self.results = results or ["candidate"]

    def execute(self, view_name, display_name, arguments=None, match=None):
        self.calls.append((view_name, display_name, arguments, match))
        return list(self.results)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_widget_config():
    yield
    set_widget_config(None)


@pytest.fixture
def field():
    """A limited, two-bundle reference field."""
    return FieldDefinition(
        name="field_refs",
        label="Related",
        cardinality=5,
        target_type="node",
        handler_settings={"target_bundles": {"article": "article", "page": "page"}},
    )


@pytest.fixture
def single_bundle_field():
    return FieldDefinition(
        name="field_refs",
        label="Related",
        cardinality=5,
        target_type="node",
        handler_settings={"target_bundles": {"article": "article"}},
    )


@pytest.fixture
def bundle_info():
    return FakeBundleInfo()


@pytest.fixture
def selection_manager():
    return FakeSelectionManager()


@pytest.fixture
def view_executor():
    return FakeViewExecutor()


@pytest.fixture
def form_state():
    return FormState()


@pytest.fixture
def slot_form():
    """A slot element as the host's autocomplete widget builds it."""
    return {
        "target_id": {
            "#type": "entity_autocomplete",
            "#title": "Related",
            "#default_value": "node:7",
            "#selection_handler": "default:node",
            "#selection_settings": {"target_bundles": {"article": "article", "page": "page"}},
        },
        "_weight": {"#type": "weight", "#default_value": 0},
    }


@pytest.fixture
def article_items(field):
    return FieldItems(field, [ReferencedEntity(id=7, bundle="article", label="An article")])
