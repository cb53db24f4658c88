"""Value types and tagged-JSON encoding for the query/response protocol."""

from fauna_values.codec import dumps, from_wire, loads
from fauna_values.errors import ErrorKind, FaunaError, InvalidValue
from fauna_values.protocols import Expr, JsonValue, WireEncodable
from fauna_values.settings import WireSettings, get_settings
from fauna_values.values import FaunaDate, FaunaTime, Page, Ref, SetRef
from fauna_values.wire import to_wire

__all__ = [
    # Errors
    "ErrorKind",
    "FaunaError",
    "InvalidValue",
    # Protocols
    "Expr",
    "JsonValue",
    "WireEncodable",
    # Values
    "FaunaDate",
    "FaunaTime",
    "Page",
    "Ref",
    "SetRef",
    # Encoding
    "dumps",
    "from_wire",
    "loads",
    "to_wire",
    # Settings
    "WireSettings",
    "get_settings",
]
