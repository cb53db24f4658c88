"""Encoding of native values into the tagged-JSON wire tree."""

import datetime as dt
import logging
from collections.abc import Mapping

from fauna_values.errors import ErrorKind, FaunaError
from fauna_values.protocols import JsonValue, WireEncodable
from fauna_values.values.temporal import FaunaDate, FaunaTime

logger = logging.getLogger(__name__)

OBJ_TAG = "@obj"


def to_wire(value: object) -> JsonValue:
    """Encode `value` into a JSON-compatible tree.

    Value types become their tagged objects, datetimes and dates become
    `@ts` and `@date`, and user mappings whose keys could be read as a
    tag are wrapped in `@obj`.
    """
    if isinstance(value, WireEncodable) and not isinstance(value, type):
        return {key: to_wire(member) for key, member in value.to_wire().items()}
    if isinstance(value, dt.datetime):
        return to_wire(FaunaTime.from_datetime(value))
    if isinstance(value, dt.date):
        return to_wire(FaunaDate.from_date(value))
    if isinstance(value, Mapping):
        return _encode_object(value)
    if isinstance(value, list | tuple):
        return [to_wire(item) for item in value]
    if value is None or isinstance(value, str | int | float | bool):
        return value

    msg = f"Cannot encode value of type {type(value).__name__}"
    raise FaunaError(msg, kind=ErrorKind.UNSUPPORTED_TYPE)


def _encode_object(value: Mapping[object, object]) -> JsonValue:
    encoded: dict[str, JsonValue] = {}
    for key, member in value.items():
        if not isinstance(key, str):
            msg = f"Object keys must be strings, got {type(key).__name__}"
            raise FaunaError(msg, kind=ErrorKind.UNSUPPORTED_TYPE)
        encoded[key] = to_wire(member)

    if any(key.startswith("@") for key in encoded):
        logger.debug("Escaping object with reserved keys: %s", sorted(encoded))
        return {OBJ_TAG: encoded}
    return encoded
