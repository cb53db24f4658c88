"""Core protocols for wire-encodable values."""

from typing import Protocol, TypeAlias, runtime_checkable

# JSON-compatible value type, as produced by `to_wire` and consumed by `from_wire`
JsonValue: TypeAlias = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]


@runtime_checkable
class WireEncodable(Protocol):
    """Protocol for values with a tagged-JSON wire form."""

    def to_wire(self) -> dict[str, object]:
        """Return the tagged object for this value.

        Members of the returned mapping may still hold native values;
        the encoder walks them recursively. The mapping's own keys are
        emitted verbatim and never escaped.
        """
        ...


@runtime_checkable
class Expr(WireEncodable, Protocol):
    """Protocol for query expressions built outside this package.

    A `SetRef` carries one of these (or a plain JSON-like tree) without
    looking inside it.
    """
