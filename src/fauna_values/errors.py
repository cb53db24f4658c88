"""Error types for value construction and wire encoding."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification of errors."""

    INVALID_VALUE = "invalid_value"
    INVALID_WIRE = "invalid_wire"
    UNSUPPORTED_TYPE = "unsupported_type"


class FaunaError(Exception):
    """Base error for all value and codec operations."""

    __slots__ = ("kind", "message", "source")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.INVALID_WIRE,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, kind={self.kind!r})"


class InvalidValue(FaunaError):  # noqa: N818
    """A value was constructed or queried with input it cannot represent.

    Not a `ValueError`, so pydantic validators propagate it unwrapped
    rather than folding it into a `ValidationError`.
    """

    def __init__(self, message: str, source: BaseException | None = None) -> None:
        super().__init__(message, kind=ErrorKind.INVALID_VALUE, source=source)
