"""Decode entry points between raw response bodies and typed values."""

import logging
from functools import partial
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .error_payload import decode_error
from .errors import DecodeError, UnknownVariant

logger = logging.getLogger(__name__)

T = TypeVar("T")

Payload = bytes | bytearray | str | dict | list

# pydantic error type -> the kind of value that was expected
_EXPECTED_KINDS = {
    "missing": "field",
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "array",
    "tuple_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "json_invalid": "JSON document",
    "json_type": "JSON document",
    "timestamp_parsing": "timestamp",
    "enum_type": "enum tag",
    "literal_error": "literal",
    "union_tag_invalid": "known type tag",
    "union_tag_not_found": "type tag",
    "extra_forbidden": "known field",
}

_adapters: dict[Any, TypeAdapter] = {}


def _adapter(target: Any) -> TypeAdapter:
    try:
        return _adapters[target]
    except KeyError:
        adapter = _adapters[target] = TypeAdapter(target)
        return adapter
    except TypeError:
        # unhashable annotated types are rebuilt on each call
        return TypeAdapter(target)


def _path(loc: tuple) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        elif out:
            out += f".{part}"
        else:
            out = str(part)
    return out


def from_validation_error(exc: ValidationError) -> DecodeError:
    """Collapse a pydantic ValidationError into this package's DecodeError."""
    first = exc.errors(include_url=False)[0]
    field = _path(first["loc"])
    ctx = first.get("ctx") or {}
    if first["type"] == "unknown_variant":
        return UnknownVariant(ctx["type_name"], ctx["raw_value"], field)
    return DecodeError(field, _EXPECTED_KINDS.get(first["type"], first["type"]), first["msg"])


def _name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def decode(target: type[T], payload: Payload) -> T:
    """Decode ``payload`` (raw JSON text or already-parsed data) into ``target``.

    Unknown extra keys are ignored. Raises DecodeError when the payload does
    not fit; no partially built value is ever returned.
    """
    adapter = _adapter(target)
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return adapter.validate_json(payload)
        return adapter.validate_python(payload)
    except ValidationError as e:
        err = from_validation_error(e)
        logger.debug("Failed to decode %s: %s", _name(target), err)
        raise err from e


def decoder_for(target: type[T]) -> Callable[[Payload], T]:
    """Return a one-argument decoder for ``target``, e.g. for envelope items."""
    return partial(decode, target)


def encode(value: BaseModel) -> dict:
    """JSON-ready dict of a model, using API field names and omitting unset optionals."""
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode_response(status: int, body: bytes, decoder: Callable[[bytes], T] | None) -> T | None:
    """Route a transport response to ``decoder`` or to the error model.

    Raises the decoded ClientError for non-2xx statuses.
    """
    if 200 <= status < 300:
        if decoder is None or not body:
            return None
        return decoder(body)
    error = decode_error(body, status)
    logger.debug("GitHub returned %s: %s", status, error.message)
    raise error
