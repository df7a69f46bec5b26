"""Renderer-agnostic view model for filled forms.

Tracks which errors the user should see, the submission state and whether
the form may be submitted. ``render`` produces plain data; turning it into
widgets is left to the hosting UI.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from warded.base import Form, fill
from warded.error import Error, External, RequiredFieldIsEmpty
from warded.result import Ok

log = logging.getLogger(__name__)


class Validation(str, Enum):
    """When field errors become visible."""

    VALIDATE_ON_SUBMIT = "validate_on_submit"
    VALIDATE_ON_BLUR = "validate_on_blur"


class IdleState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    """Submission failed outside of field validation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class SuccessState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    message: str


FormState = IdleState | LoadingState | ErrorState | SuccessState


class ErrorTracking(BaseModel):
    """Which field errors have been revealed to the user."""

    model_config = ConfigDict(frozen=True)

    show_all_errors: bool = False
    show_field_errors: frozenset[str] = Field(default_factory=frozenset)


class Model(BaseModel):
    """State of one form on screen."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    values: Any
    state: FormState = Field(default_factory=IdleState)
    error_tracking: ErrorTracking = Field(default_factory=ErrorTracking)


class ViewConfig(BaseModel):
    """Labels and validation strategy of a rendered form."""

    model_config = ConfigDict(frozen=True)

    action: str = "Submit"
    loading: str = "Loading"
    validation: Validation = Validation.VALIDATE_ON_SUBMIT


class RenderedField(BaseModel):
    """A filled field with the error the user should currently see."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field: Any
    label: str | None = None
    error: str | None = None
    is_disabled: bool = False
    track_blur: bool = False


class RenderedForm(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fields: tuple[RenderedField, ...] = ()
    action: str
    is_loading: bool = False
    can_submit: bool = False
    state_message: str | None = None


class SubmitOutcome(BaseModel):
    """Outcome of a submit attempt.

    ``output`` is set only when the form validated and may be submitted.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: Model
    output: Any = None
    submitted: bool = False


def idle(values: Any) -> Model:
    """Initial model for ``values``."""
    return Model(values=values)


def error_to_string(error: Error) -> str:
    if isinstance(error, RequiredFieldIsEmpty):
        return "This field is required"
    return error.reason


def field_label(state: Any) -> str | None:
    """Best-effort label of a filled field's state, used for error tracking."""
    descriptor = getattr(state, "state", state)
    attributes = getattr(descriptor, "attributes", None)
    return getattr(attributes, "label", None) or getattr(attributes, "text", None)


def _visible_error(error: Error | None, show_error: bool) -> str | None:
    if error is None:
        return None
    # External errors come from a previous submission and are always shown.
    if isinstance(error, External) or show_error:
        return error_to_string(error)
    return None


def render(config: ViewConfig, form: Form, model: Model) -> RenderedForm:
    """Fill ``form`` with the model's values and prepare it for display.

    Args:
        config: Labels and validation strategy.
        form: The form definition.
        model: Current values, state and error tracking.

    Returns:
        Rendered fields with their visible errors and the submit status.
    """
    filled = fill(form, model.values)
    is_loading = isinstance(model.state, LoadingState)
    tracking = model.error_tracking

    fields = []
    for filled_field in filled.fields:
        label = field_label(filled_field.state)
        show_error = tracking.show_all_errors or (
            label is not None and label in tracking.show_field_errors
        )
        fields.append(
            RenderedField(
                field=filled_field.state,
                label=label,
                error=_visible_error(filled_field.error, show_error),
                is_disabled=filled_field.is_disabled or is_loading,
                track_blur=config.validation == Validation.VALIDATE_ON_BLUR,
            )
        )

    if isinstance(model.state, (ErrorState, SuccessState)):
        state_message = model.state.message
    else:
        state_message = None

    return RenderedForm(
        fields=tuple(fields),
        action=config.loading if is_loading else config.action,
        is_loading=is_loading,
        can_submit=isinstance(filled.result, Ok) and not is_loading,
        state_message=state_message,
    )


def blur(config: ViewConfig, model: Model, label: str) -> Model:
    """Reveal the errors of the field labelled ``label`` after it loses focus.

    Only applies under ``Validation.VALIDATE_ON_BLUR``.
    """
    if config.validation != Validation.VALIDATE_ON_BLUR:
        return model

    tracking = model.error_tracking
    return model.model_copy(
        update={
            "error_tracking": tracking.model_copy(
                update={"show_field_errors": tracking.show_field_errors | {label}}
            )
        }
    )


def submit(form: Form, model: Model) -> SubmitOutcome:
    """Attempt to submit the form.

    A valid form yields its output unless a submission is already loading.
    An invalid form yields no output and reveals every field error.
    """
    filled = fill(form, model.values)

    if isinstance(filled.result, Ok):
        if isinstance(model.state, LoadingState):
            log.debug("Ignoring submit while loading")
            return SubmitOutcome(model=model)
        return SubmitOutcome(model=model, output=filled.result.value, submitted=True)

    tracking = model.error_tracking.model_copy(update={"show_all_errors": True})
    return SubmitOutcome(model=model.model_copy(update={"error_tracking": tracking}))
