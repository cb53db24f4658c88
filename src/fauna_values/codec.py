"""Decoding of tagged-JSON trees, plus JSON text entry points."""

import json
import logging
from collections.abc import Callable
from typing import Any

from fauna_values.errors import ErrorKind, FaunaError
from fauna_values.settings import WireSettings, get_settings
from fauna_values.values import FaunaDate, FaunaTime, Ref, SetRef
from fauna_values.wire import OBJ_TAG, to_wire

logger = logging.getLogger(__name__)


def _require_str(tag: str, payload: object) -> str:
    if not isinstance(payload, str):
        msg = f"Expected a string for {tag}, got {type(payload).__name__}"
        raise FaunaError(msg, kind=ErrorKind.INVALID_WIRE)
    return payload


def _decode_obj(payload: object) -> dict[str, Any]:
    if not isinstance(payload, dict):
        msg = f"Expected an object for {OBJ_TAG}, got {type(payload).__name__}"
        raise FaunaError(msg, kind=ErrorKind.INVALID_WIRE)
    return {key: from_wire(member) for key, member in payload.items()}


_DECODERS: dict[str, Callable[[object], Any]] = {
    "@ref": lambda payload: Ref(value=_require_str("@ref", payload)),
    "@set": lambda payload: SetRef(query=from_wire(payload)),
    "@ts": lambda payload: FaunaTime.from_string(_require_str("@ts", payload)),
    "@date": lambda payload: FaunaDate.from_string(_require_str("@date", payload)),
    OBJ_TAG: _decode_obj,
}


def from_wire(value: Any) -> Any:
    """Decode a JSON tree, turning tagged objects back into value types.

    Only single-key objects are treated as tagged. Unknown tags are kept
    as plain objects.
    """
    if isinstance(value, list):
        return [from_wire(item) for item in value]
    if not isinstance(value, dict):
        return value

    if len(value) == 1:
        ((tag, payload),) = value.items()
        decoder = _DECODERS.get(tag)
        if decoder is not None:
            return decoder(payload)
        if tag.startswith("@"):
            logger.debug("Keeping unknown tag %s as a plain object", tag)

    return {key: from_wire(member) for key, member in value.items()}


def dumps(value: object, settings: WireSettings | None = None) -> str:
    """Encode `value` to tagged-JSON text."""
    settings = settings or get_settings()
    return json.dumps(
        to_wire(value),
        indent=settings.indent,
        sort_keys=settings.sort_keys,
        ensure_ascii=settings.ensure_ascii,
    )


def loads(text: str | bytes) -> Any:
    """Parse tagged-JSON text into native values."""
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise FaunaError(msg, kind=ErrorKind.INVALID_WIRE, source=e) from e
    return from_wire(tree)
