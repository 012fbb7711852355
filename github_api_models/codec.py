"""Field codec: scalar rules shared by every resource model.

Timestamps follow one ISO-8601 profile (``2011-01-26T19:01:12Z``, optionally
with fractional seconds or a numeric offset). Nullable fields are declared
explicitly with ``Nullable[...]`` so that ``null`` and a missing key mean the
same thing. Integer, boolean and float fields are strict. Base64 content is kept as text on the record and only decoded
on request.
"""

import base64
import binascii
import re
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, Field, PlainSerializer, PlainValidator, Strict
from pydantic_core import PydanticCustomError

from .errors import ContentDecodeError

T = TypeVar("T")

SUPPORTED_ENCODINGS = frozenset({"base64"})

_TIMESTAMP_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: object) -> datetime:
    """Parse a GitHub timestamp into an aware datetime.

    Raises ValueError for anything outside the supported profile.
    """
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    match = _TIMESTAMP_RE.match(value)
    if match is None:
        raise ValueError(f"{value!r} is not an ISO-8601 timestamp")
    offset = match["offset"]
    if offset == "Z":
        offset = "+00:00"
    # fromisoformat only takes 3 or 6 fraction digits before 3.11
    fraction = (match["fraction"] or "").ljust(6, "0")[:6]
    text = match["base"] + (f".{fraction}" if match["fraction"] else "") + offset
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"{value!r} is not a valid timestamp: {e}") from e


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the profile GitHub accepts in request bodies."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    if value.microsecond:
        return value.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _validate_timestamp(value: object) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise PydanticCustomError("timestamp_parsing", "timestamp must carry a timezone")
        return value
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise PydanticCustomError("timestamp_parsing", "{reason}", {"reason": str(e)}) from e


Timestamp = Annotated[
    datetime,
    PlainValidator(_validate_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]

# Both JSON null and an absent key decode to None.
Nullable = Annotated[T | None, Field(default=None)]

# JSON scalars are taken as sent: "1" is not an integer and 1 is not a boolean.
Int = Annotated[int, Strict()]
Bool = Annotated[bool, Strict()]
Float = Annotated[float, Strict()]


def freeze_json(value: Any) -> Any:
    """Read-only view of parsed JSON: objects become mapping proxies, arrays tuples."""
    if isinstance(value, dict):
        return MappingProxyType({k: freeze_json(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_json(v) for v in value)
    return value


def thaw_json(value: Any) -> Any:
    if isinstance(value, (dict, MappingProxyType)):
        return {k: thaw_json(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw_json(v) for v in value]
    return value


# Free-form JSON held on a frozen record.
FrozenJson = Annotated[Any, AfterValidator(freeze_json), PlainSerializer(thaw_json)]


def decode_content(content: str, encoding: str) -> bytes:
    """Decode file content according to its ``encoding`` tag.

    GitHub wraps base64 at 60 columns, so whitespace is stripped first.
    """
    if encoding not in SUPPORTED_ENCODINGS:
        raise ContentDecodeError(encoding, "unsupported encoding")
    try:
        return base64.b64decode("".join(content.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ContentDecodeError(encoding, str(e)) from e


def encode_content(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
