"""Ok / Err results carried by filled forms.

``Err`` keeps one headline error (``first``) apart from the trailing
``others``; composite forms rely on that shape when aggregating.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from warded.error import Error


class Ok(BaseModel):
    """A successful form output."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)

    def map(self, fn: Callable[[Any], Any]) -> Ok:
        """Apply ``fn`` to the output."""
        return Ok(fn(self.value))


class Err(BaseModel):
    """A failed form result.

    Attributes:
        first: The leftmost error in declaration order.
        others: Every remaining error, in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    first: Error
    others: tuple[Error, ...] = ()

    def __init__(self, first: Error, others: tuple[Error, ...] = (), **data: Any) -> None:
        super().__init__(first=first, others=tuple(others), **data)

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self

    @property
    def errors(self) -> tuple[Error, ...]:
        """All errors, headline first."""
        return (self.first, *self.others)


Result = Ok | Err

__all__ = ["Err", "Ok", "Result"]
