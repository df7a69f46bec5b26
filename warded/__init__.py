"""warded: composable, renderer-agnostic form validation."""

__version__ = "0.1.0"

from warded.base import (
    CustomField,
    FieldConfig,
    FilledField,
    FilledForm,
    Form,
    FormDefinitionError,
    and_then,
    append,
    custom,
    field,
    fill,
    map,
    map_field,
    map_values,
    meta,
    optional,
    succeed,
)
from warded.error import Error, External, RequiredFieldIsEmpty, ValidationFailed
from warded.field import FieldDescriptor, FieldState
from warded.result import Err, Ok, Result

__all__ = [
    "__version__",
    # Errors
    "Error",
    "External",
    "RequiredFieldIsEmpty",
    "ValidationFailed",
    # Results
    "Err",
    "Ok",
    "Result",
    # Fields
    "FieldDescriptor",
    "FieldState",
    # Forms
    "CustomField",
    "FieldConfig",
    "FilledField",
    "FilledForm",
    "Form",
    "FormDefinitionError",
    # Combinators
    "and_then",
    "append",
    "custom",
    "field",
    "fill",
    "map",
    "map_field",
    "map_values",
    "meta",
    "optional",
    "succeed",
]
