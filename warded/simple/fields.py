"""Reference widget set built on the form combinators.

Each builder turns a ``FieldConfig`` into a ``Form`` whose filled fields are
members of the ``SimpleField`` union consumed by a renderer.
"""

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from warded.base import FieldConfig, Form, field
from warded.field import FieldState


class TextType(str, Enum):
    """Flavour of a text input."""

    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    TEXTAREA = "textarea"


class TextAttributes(BaseModel):
    """Attributes of a text-like input."""

    model_config = ConfigDict(frozen=True)

    label: str
    placeholder: str = ""


class CheckboxAttributes(BaseModel):
    """Attributes of a checkbox."""

    model_config = ConfigDict(frozen=True)

    text: str


class SelectSearchAttributes(BaseModel):
    """Attributes of a searchable select.

    ``load_options`` is only ever called by the renderer.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    label: str
    placeholder: str = ""
    load_options: Callable[[str], Awaitable[list[Any]]]
    get_option_value: Callable[[Any], str]
    get_option_label: Callable[[Any], str]


class TextField(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text_type: TextType
    state: FieldState


class CheckboxField(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["checkbox"] = "checkbox"
    state: FieldState


class SelectSearchField(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["select_search"] = "select_search"
    state: FieldState


SimpleField = TextField | CheckboxField | SelectSearchField


def is_blank(value: str) -> bool:
    return value == ""


def never_empty(value: Any) -> bool:
    return False


def _text(text_type: TextType, config: FieldConfig) -> Form:
    return field(is_blank, lambda state: TextField(text_type=text_type, state=state), config)


def text_field(config: FieldConfig) -> Form:
    return _text(TextType.TEXT, config)


def password_field(config: FieldConfig) -> Form:
    return _text(TextType.PASSWORD, config)


def email_field(config: FieldConfig) -> Form:
    return _text(TextType.EMAIL, config)


def textarea_field(config: FieldConfig) -> Form:
    return _text(TextType.TEXTAREA, config)


def checkbox_field(config: FieldConfig) -> Form:
    """A checkbox. An unchecked box is a value, not an empty input."""
    return field(never_empty, lambda state: CheckboxField(state=state), config)


def select_search_field(config: FieldConfig) -> Form:
    """A searchable select.

    The selection is never considered empty; callers that need a selection
    enforce it in the parser.
    """
    return field(never_empty, lambda state: SelectSearchField(state=state), config)
