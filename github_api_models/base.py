"""Base classes for resource records and request bodies."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from .decode import Payload, decode, encode


class Resource(BaseModel):
    """Immutable record mirroring one GitHub response object.

    Keys GitHub adds later are ignored rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @classmethod
    def decode(cls, payload: Payload):
        return decode(cls, payload)


class Options(BaseModel):
    """Request body sent to GitHub. Unset optional fields are left out."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @classmethod
    def decode(cls, payload: Payload):
        return decode(cls, payload)

    def encode(self) -> dict[str, Any]:
        return encode(self)

    def to_json(self) -> bytes:
        return json.dumps(self.encode()).encode()
