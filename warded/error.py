"""Validation error kinds reported by filled forms.

A leaf field fails with exactly one of these. Composite forms aggregate
them into an ``Err`` (see ``warded.result``).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class RequiredFieldIsEmpty(BaseModel):
    """The field's input is empty; the parser was not run."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["required_field_is_empty"] = "required_field_is_empty"


class ValidationFailed(BaseModel):
    """The field's parser rejected the input."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["validation_failed"] = "validation_failed"
    reason: str

    def __init__(self, reason: str, **data: Any) -> None:
        super().__init__(reason=reason, **data)


class External(BaseModel):
    """An error supplied from outside the parser, e.g. server-side validation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["external"] = "external"
    reason: str

    def __init__(self, reason: str, **data: Any) -> None:
        super().__init__(reason=reason, **data)


Error = RequiredFieldIsEmpty | ValidationFailed | External

__all__ = [
    "Error",
    "External",
    "RequiredFieldIsEmpty",
    "ValidationFailed",
]
