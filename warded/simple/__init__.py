"""Reference widgets and view model for warded forms."""

from warded.simple.fields import (
    CheckboxAttributes,
    CheckboxField,
    SelectSearchAttributes,
    SelectSearchField,
    SimpleField,
    TextAttributes,
    TextField,
    TextType,
    checkbox_field,
    email_field,
    password_field,
    select_search_field,
    text_field,
    textarea_field,
)
from warded.simple.view import (
    ErrorState,
    ErrorTracking,
    IdleState,
    LoadingState,
    Model,
    RenderedField,
    RenderedForm,
    SubmitOutcome,
    SuccessState,
    Validation,
    ViewConfig,
    blur,
    error_to_string,
    idle,
    render,
    submit,
)

__all__ = [
    # Fields
    "CheckboxAttributes",
    "CheckboxField",
    "SelectSearchAttributes",
    "SelectSearchField",
    "SimpleField",
    "TextAttributes",
    "TextField",
    "TextType",
    "checkbox_field",
    "email_field",
    "password_field",
    "select_search_field",
    "text_field",
    "textarea_field",
    # View
    "ErrorState",
    "ErrorTracking",
    "IdleState",
    "LoadingState",
    "Model",
    "RenderedField",
    "RenderedForm",
    "SubmitOutcome",
    "SuccessState",
    "Validation",
    "ViewConfig",
    "blur",
    "error_to_string",
    "idle",
    "render",
    "submit",
]
