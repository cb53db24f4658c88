"""Reference types: `Ref` for resource paths and `SetRef` for deferred sets."""

from typing import Any, Self

from pydantic import BaseModel

from fauna_values.errors import InvalidValue


class Ref(BaseModel, frozen=True):
    """A reference to a database resource.

    A thin wrapper around a slash-joined path such as `databases/prydain`.
    Queries that expect a reference will not accept a bare string.
    """

    value: str
    """Raw path, segments joined with `/`."""

    @classmethod
    def from_parts(cls, *parts: "str | int | Ref") -> Self:
        """Build a reference by joining path segments.

        `Ref.from_parts("databases", "prydain")` and
        `Ref.from_parts(Ref(value="databases"), "prydain")` both yield
        `databases/prydain`. Other segments are taken by their string
        form, so `Ref.from_parts("classes", 42)` is `classes/42`. Segments
        are not normalized.
        """
        if not parts:
            msg = "A Ref needs at least one path segment"
            raise InvalidValue(msg)
        return cls(value="/".join(p.value if isinstance(p, Ref) else str(p) for p in parts))

    @property
    def class_(self) -> "Ref":
        """The reference with its id removed.

        `Ref.from_parts("a", "b/c").class_` is `Ref(value="a/b")`. A
        single-segment reference is its own class.
        """
        parts = self.value.split("/")
        if len(parts) == 1:
            return self
        return Ref(value="/".join(parts[:-1]))

    @property
    def id(self) -> str:
        """Everything after the last `/`."""
        parts = self.value.split("/")
        if len(parts) == 1:
            msg = "The Ref does not have an id"
            raise InvalidValue(msg)
        return parts[-1]

    def to_wire(self) -> dict[str, object]:
        return {"@ref": self.value}

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class SetRef(BaseModel, frozen=True):
    """A set returned as part of a response, wire form `{"@set": query}`.

    The query is produced by set functions (match, union, intersection,
    difference, join) of the query builder and is carried unexamined.
    """

    query: Any
    """Raw query expression: an `Expr` or a tree of native values.

    Left untyped so the tree is stored as given; anything `to_wire` accepts
    can be carried.
    """

    def to_wire(self) -> dict[str, object]:
        return {"@set": self.query}

    def __repr__(self) -> str:
        return f"SetRef({self.query!r})"
