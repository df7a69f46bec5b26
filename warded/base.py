"""Form combinators and evaluation.

A ``Form`` is an immutable function from a values snapshot to a
``FilledForm``. Leaf forms are built with ``field`` or ``custom`` and
combined with ``append``, ``and_then`` and ``map``; ``fill`` runs a composed
form against the current values.

Example:
    form = (
        succeed(lambda email: lambda password: (email, password))
        .append(email_field)
        .append(password_field)
    )
    filled = fill(form, values)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from warded.error import Error, External, RequiredFieldIsEmpty, ValidationFailed
from warded.field import FieldState
from warded.result import Err, Ok, Result

log = logging.getLogger(__name__)


class FormDefinitionError(TypeError):
    """Raised when a form is composed incorrectly.

    Validation failures never raise; this only signals a programming error
    in the form definition itself.
    """

    pass


class FilledField(BaseModel):
    """A field rendered for one values snapshot."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: Any
    error: Error | None = None
    is_disabled: bool = False


class FilledForm(BaseModel):
    """Result of filling a form.

    Attributes:
        fields: Filled fields in declaration order.
        result: ``Ok(output)`` or ``Err(first, others)``.
        is_empty: Whether every contributing field is empty.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fields: tuple[FilledField, ...] = ()
    result: Result
    is_empty: bool


class CustomField(BaseModel):
    """Value returned by the evaluator passed to ``custom``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: Any
    result: Result
    is_empty: bool


def no_external_error(values: Any) -> str | None:
    """Default external error accessor: never reports an error."""
    return None


class FieldConfig(BaseModel):
    """Describes how a single field behaves.

    Attributes:
        parser: Turns the input into the field output. Raise ``ValueError``
            with a message to reject the input.
        value: Reads the field input from the values.
        update: Folds a new input back into the values, ``update(new, values)``.
        error: Returns an external error message for the values, or ``None``.
        attributes: Widget-specific data (label, placeholder, ...).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    parser: Callable[[Any], Any]
    value: Callable[[Any], Any]
    update: Callable[[Any, Any], Any]
    error: Callable[[Any], str | None] = no_external_error
    attributes: Any = None


class Form:
    """An immutable form definition.

    Wraps a function ``values -> FilledForm``. Forms hold no state and can be
    shared and evaluated concurrently.
    """

    __slots__ = ("_fill",)

    def __init__(self, fill_fn: Callable[[Any], FilledForm]) -> None:
        object.__setattr__(self, "_fill", fill_fn)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Form is immutable")

    def fill(self, values: Any) -> FilledForm:
        """Evaluate the form against ``values``."""
        return self._fill(values)

    def append(self, new_form: Form) -> Form:
        return append(new_form, self)

    def and_then(self, child: Callable[[Any], Form]) -> Form:
        return and_then(child, self)

    def map(self, fn: Callable[[Any], Any]) -> Form:
        return map(fn, self)

    def map_values(self, fn: Callable[[Any], Any]) -> Form:
        return map_values(fn, self)

    def map_field(self, fn: Callable[[Any], Any]) -> Form:
        return map_field(fn, self)

    def optional(self) -> Form:
        return optional(self)


def _ensure_form(candidate: Any, source: str) -> Form:
    if not isinstance(candidate, Form):
        raise FormDefinitionError(
            f"{source} must return a Form, got {type(candidate).__name__}"
        )
    return candidate


def fill(form: Form, values: Any) -> FilledForm:
    """Evaluate ``form`` against a values snapshot.

    Args:
        form: The composed form definition.
        values: The current values.

    Returns:
        The filled fields, the aggregated result and the emptiness flag.
    """
    filled = form.fill(values)
    log.debug(
        "Filled form: %d field(s), %s, is_empty=%s",
        len(filled.fields),
        "ok" if isinstance(filled.result, Ok) else f"{len(filled.result.errors)} error(s)",
        filled.is_empty,
    )
    return filled


def succeed(output: Any) -> Form:
    """A form with no fields that always succeeds with ``output``."""
    return Form(lambda _values: FilledForm(fields=(), result=Ok(output), is_empty=True))


def custom(fill_field: Callable[[Any], CustomField]) -> Form:
    """Lift a hand-written field evaluator into a form with one field."""

    def fill_custom(values: Any) -> FilledForm:
        filled = fill_field(values)

        if filled.is_empty:
            error: Error | None = RequiredFieldIsEmpty()
        elif isinstance(filled.result, Err):
            error = filled.result.first
        else:
            error = None

        return FilledForm(
            fields=(FilledField(state=filled.state, error=error, is_disabled=False),),
            result=filled.result,
            is_empty=filled.is_empty,
        )

    return Form(fill_custom)


def meta(fn: Callable[[Any], Form]) -> Form:
    """Choose the form from the current values, then fill it with the same values."""

    def fill_meta(values: Any) -> FilledForm:
        return _ensure_form(fn(values), "meta callback").fill(values)

    return Form(fill_meta)


def map_values(fn: Callable[[Any], Any], form: Form) -> Form:
    """Embed a form over narrower values using the projection ``fn``."""
    return Form(lambda values: form.fill(fn(values)))


def map_field(fn: Callable[[Any], Any], form: Form) -> Form:
    """Rewrite the state of every filled field through ``fn``."""

    def fill_mapped(values: Any) -> FilledForm:
        filled = form.fill(values)
        return filled.model_copy(
            update={
                "fields": tuple(
                    field_.model_copy(update={"state": fn(field_.state)})
                    for field_ in filled.fields
                )
            }
        )

    return Form(fill_mapped)


def map(fn: Callable[[Any], Any], form: Form) -> Form:
    """Transform the output of a form. Fields and emptiness are unchanged."""

    def fill_mapped(values: Any) -> FilledForm:
        filled = form.fill(values)
        return filled.model_copy(update={"result": filled.result.map(fn)})

    return Form(fill_mapped)


def append(new_form: Form, current_form: Form) -> Form:
    """Apply the function produced by ``current_form`` to the output of ``new_form``.

    Both forms are always filled. Fields keep declaration order. When both
    fail, the current form's headline error stays first and every other
    error follows in declaration order.
    """

    def fill_appended(values: Any) -> FilledForm:
        filled_current = current_form.fill(values)
        filled_new = new_form.fill(values)

        fields = filled_current.fields + filled_new.fields
        is_empty = filled_current.is_empty and filled_new.is_empty
        current = filled_current.result
        new = filled_new.result

        if isinstance(current, Ok):
            if not callable(current.value):
                raise FormDefinitionError(
                    "append expects the current form to produce a function, "
                    f"got {type(current.value).__name__}"
                )
            result: Result = new.map(current.value)
        elif isinstance(new, Ok):
            result = current
        else:
            result = Err(current.first, current.others + (new.first,) + new.others)

        return FilledForm(fields=fields, result=result, is_empty=is_empty)

    return Form(fill_appended)


def and_then(child: Callable[[Any], Form], parent: Form) -> Form:
    """Fill ``child(output)`` once ``parent`` succeeds.

    While ``parent`` fails, ``child`` is never called and its fields are not
    rendered.
    """

    def fill_chained(values: Any) -> FilledForm:
        filled = parent.fill(values)

        if isinstance(filled.result, Err):
            return filled

        child_filled = _ensure_form(child(filled.result.value), "and_then callback").fill(values)

        return FilledForm(
            fields=filled.fields + child_filled.fields,
            result=child_filled.result,
            is_empty=filled.is_empty and child_filled.is_empty,
        )

    return Form(fill_chained)


def field(
    is_empty: Callable[[Any], bool],
    build: Callable[[FieldState], Any],
    config: FieldConfig,
) -> Form:
    """Build a leaf form with exactly one field.

    Args:
        is_empty: Tells whether a raw input counts as "nothing entered".
        build: Wraps the generic descriptor into the widget-specific field.
        config: Parser, accessors and attributes of the field.

    Returns:
        A form whose result follows the empty, parser, external error order.
    """

    def parse(values: Any, input_value: Any) -> Result:
        if is_empty(input_value):
            return Err(RequiredFieldIsEmpty())

        try:
            output = config.parser(input_value)
        except ValueError as e:
            return Err(ValidationFailed(str(e)))

        external = config.error(values)
        if external is not None:
            return Err(External(external))
        return Ok(output)

    def fill_field(values: Any) -> FilledForm:
        input_value = config.value(values)
        result = parse(values, input_value)

        def setter(new_value: Any) -> Any:
            return config.update(new_value, values)

        state = build(
            FieldState(value=input_value, setter=setter, attributes=config.attributes)
        )

        if isinstance(result, Err):
            error: Error | None = result.first
            empty = isinstance(result.first, RequiredFieldIsEmpty)
        else:
            error = None
            empty = False

        return FilledForm(
            fields=(FilledField(state=state, error=error, is_disabled=False),),
            result=result,
            is_empty=empty,
        )

    return Form(fill_field)


def optional(form: Form) -> Form:
    """Accept an untouched form as ``Ok(None)``.

    A partially filled form still has to validate: its error propagates and
    the form is no longer considered empty.

    A valid output ``v`` is returned as ``Ok(v)``, not wrapped. An inner form
    whose valid output is ``None`` therefore looks the same as an untouched
    one; check ``is_empty`` to tell them apart.
    """

    def fill_optional(values: Any) -> FilledForm:
        filled = form.fill(values)

        if isinstance(filled.result, Ok):
            return filled

        if filled.is_empty:
            return FilledForm(
                fields=tuple(
                    field_.model_copy(update={"error": None}) for field_ in filled.fields
                ),
                result=Ok(None),
                is_empty=filled.is_empty,
            )

        return filled.model_copy(update={"is_empty": False})

    return Form(fill_optional)
