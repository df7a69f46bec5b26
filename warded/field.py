"""Field descriptor contract.

The engine only depends on this shape: the current input, a setter
folding a new input back into the values, and widget attributes.
Concrete widgets wrap a descriptor into whatever their renderer consumes.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


@runtime_checkable
class FieldDescriptor(Protocol):
    """Protocol exposed by every field handed to a renderer."""

    @property
    def value(self) -> Any:
        """The field's current input value."""
        ...

    @property
    def attributes(self) -> Any:
        """Widget-specific data such as labels and placeholders."""
        ...

    def update(self, new_value: Any) -> Any:
        """Return the values snapshot with ``new_value`` applied to this field."""
        ...


class FieldState(BaseModel):
    """Descriptor built by ``warded.base.field`` on every fill."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any
    setter: Callable[[Any], Any]
    attributes: Any = None

    def update(self, new_value: Any) -> Any:
        return self.setter(new_value)
