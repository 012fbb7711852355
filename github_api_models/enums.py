"""Enum registry: string-tagged variant sets with a per-enum unknown-value policy.

An enum registered with ``fallback=True`` is open: tags GitHub adds later
decode to ``Other(raw)`` instead of failing. A closed enum rejects unknown
tags with ``UnknownVariant``. Fields whose values only ever mean yes/no are
modeled as ``bool`` and never appear here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError

from .errors import UnknownVariant

_POLICIES: dict[type[Enum], bool] = {}


@dataclass(frozen=True)
class Other:
    """A tag this client does not know about yet."""

    raw: str

    def __str__(self) -> str:
        return self.raw


def enum_policy(*, fallback: bool):
    """Class decorator recording whether an enum tolerates unknown tags."""

    def register(cls: type[Enum]) -> type[Enum]:
        _POLICIES[cls] = fallback
        return cls

    return register


def is_open(cls: type[Enum]) -> bool:
    try:
        return _POLICIES[cls]
    except KeyError:
        raise TypeError(f"{cls.__name__} is not a registered enum") from None


def registered() -> dict[type[Enum], bool]:
    """Snapshot of every registered enum and its fallback policy."""
    return dict(_POLICIES)


def decode_tag(cls: type[Enum], raw: object) -> Enum | Other:
    """Map a raw JSON value onto ``cls``.

    Non-string values always fail. Unknown strings become ``Other`` for open
    enums and raise ``UnknownVariant`` for closed ones.
    """
    if isinstance(raw, cls):
        return raw
    if isinstance(raw, Other) and is_open(cls):
        return raw
    if not isinstance(raw, str):
        raise TypeError(f"{cls.__name__} tag must be a string, got {type(raw).__name__}")
    try:
        return cls(raw)
    except ValueError:
        if is_open(cls):
            return Other(raw)
        raise UnknownVariant(cls.__name__, raw) from None


def encode_tag(value: Enum | Other) -> str:
    if isinstance(value, Other):
        return value.raw
    return value.value


def tag(cls: type[Enum]) -> Any:
    """Build the field type for ``cls`` honoring its registered policy."""

    def validate(raw: object) -> Enum | Other:
        try:
            return decode_tag(cls, raw)
        except UnknownVariant as e:
            raise PydanticCustomError(
                "unknown_variant",
                "unknown {type_name} variant '{raw_value}'",
                {"type_name": e.type_name, "raw_value": e.raw_value},
            ) from e
        except TypeError as e:
            raise PydanticCustomError("enum_type", "{reason}", {"reason": str(e)}) from e

    field_type = cls | Other if is_open(cls) else cls
    return Annotated[
        field_type,
        PlainValidator(validate),
        PlainSerializer(encode_tag, return_type=str, when_used="json"),
    ]
