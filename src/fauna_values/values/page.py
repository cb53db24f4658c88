"""Pagination envelope returned by paginated reads."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, field_validator

from fauna_values.errors import InvalidValue

T = TypeVar("T")
U = TypeVar("U")


class Page(BaseModel, Generic[T], frozen=True):
    """A single page of results with optional cursors on either side.

    Uses cursor-based pagination: `before` and `after` mark where the
    neighbouring pages start and are handed back to the server unchanged.
    """

    data: tuple[T, ...]
    """Always a tuple. Elements may still be raw data; `map_data` converts them."""

    before: Any = None
    """Optional cursor (usually a `Ref`) for the page preceding this one."""

    after: Any = None
    """Optional cursor (usually a `Ref`) for the page following this one."""

    @field_validator("data", mode="before")
    @classmethod
    def require_sequence(cls, value: object) -> object:
        if not isinstance(value, Sequence) or isinstance(value, str | bytes):
            msg = f"Page data must be a sequence, got {type(value).__name__}"
            raise InvalidValue(msg)
        return value

    @classmethod
    def from_raw(cls, obj: Mapping[str, Any]) -> Self:
        """Build a page from a decoded object known to represent one."""
        return cls(data=obj["data"], before=obj.get("before"), after=obj.get("after"))

    def map_data(self, func: Callable[[T], U]) -> "Page[U]":
        """Return a new page whose data has had `func` applied to each element.

        `func` runs once per element, in order. Cursors are carried over as-is.
        """
        return Page(
            data=tuple(func(item) for item in self.data),
            before=self.before,
            after=self.after,
        )

    def to_wire(self) -> dict[str, object]:
        wire: dict[str, object] = {"data": self.data}
        if self.before is not None:
            wire["before"] = self.before
        if self.after is not None:
            wire["after"] = self.after
        return wire
