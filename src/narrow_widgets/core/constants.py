"""
Narrow widget constants for eliminating magic strings in form tree handling.

This module centralizes the property names, child keys and literal values
shared by the validator, the bundle selector and the settings form, so the
host's render tree vocabulary lives in one place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NarrowWidgetConstants:
    """
    Centralized constants for the narrow widget components.

    Categories:
    - Render tree property names (keys prefixed with '#')
    - Child keys the widget reads or writes
    - Selection handler values
    - Path and id encoding
    """

    # Render tree properties
    TYPE: str = "#type"
    TITLE: str = "#title"
    TITLE_DISPLAY: str = "#title_display"
    DESCRIPTION: str = "#description"
    OPTIONS: str = "#options"
    VALUE: str = "#value"
    DEFAULT_VALUE: str = "#default_value"
    REQUIRED: str = "#required"
    TREE: str = "#tree"
    AJAX: str = "#ajax"
    ATTRIBUTES: str = "#attributes"
    PREFIX: str = "#prefix"
    SUFFIX: str = "#suffix"
    FIELD_PARENTS: str = "#field_parents"
    ARRAY_PARENTS: str = "#array_parents"
    ELEMENT_VALIDATE: str = "#element_validate"
    SELECTION_HANDLER: str = "#selection_handler"
    SELECTION_SETTINGS: str = "#selection_settings"

    # Child keys
    WIDGET_KEY: str = "widget"
    TARGET_ID_KEY: str = "target_id"
    BUNDLE_KEY: str = "bundle"
    ADD_MORE_KEY: str = "add_more"
    DEFAULT_PRIMARY_KEY: str = "value"
    TARGET_BUNDLES_KEY: str = "target_bundles"
    VIEW_KEY: str = "view"
    VIEW_AND_DISPLAY_KEY: str = "view_and_display"
    ARGUMENTS_KEY: str = "arguments"
    HANDLERS_KEY: str = "handlers"

    # Selection handlers
    DEFAULT_VIEW_NAME: str = "default"
    VIEWS_HANDLER: str = "views"

    # Element types
    SELECT_TYPE: str = "select"
    FIELDSET_TYPE: str = "fieldset"
    DETAILS_TYPE: str = "details"
    NUMBER_TYPE: str = "number"
    CHECKBOX_TYPE: str = "checkbox"
    INLINE_FORM_CLASS: str = "form--inline"

    # Path and id encoding
    ERROR_NAME_SEPARATOR: str = "]["
    WRAPPER_ID_SEPARATOR: str = "-"
    VIEW_DISPLAY_SEPARATOR: str = "."

    # Ajax
    CHANGE_EVENT: str = "change"
    REPLACE_METHOD: str = "replace"
    THROBBER: str = "throbber"


CONSTANTS = NarrowWidgetConstants()
