"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from warded import FieldConfig, Form, field
from warded.base import no_external_error
from warded.simple import TextAttributes


def identity(value: Any) -> Any:
    return value


@pytest.fixture
def text_form() -> Callable[..., Form]:
    """Factory for leaf forms reading a string from a dict of values.

    The filled field's state is the raw ``FieldState`` unless ``build`` is given.
    """

    def make(
        key: str,
        parser: Callable[[Any], Any] = identity,
        error: Callable[[Any], str | None] = no_external_error,
        build: Callable[[Any], Any] = identity,
    ) -> Form:
        return field(
            lambda value: value == "",
            build,
            FieldConfig(
                parser=parser,
                value=lambda values: values[key],
                update=lambda new_value, values: {**values, key: new_value},
                error=error,
                attributes=TextAttributes(label=key),
            ),
        )

    return make


@pytest.fixture
def signup_values() -> dict[str, str]:
    """Values of a fully and correctly filled signup form."""
    return {"name": "Ada", "email": "ada@example.com", "age": "36"}
