"""Typed models for GitHub REST API responses.

Decodes response bodies into immutable records, search results into a
generic envelope, and failure bodies into a typed error taxonomy.
"""

from .decode import decode, decode_response, decoder_for, encode
from .envelope import Envelope, decode_envelope
from .enums import Other
from .error_payload import decode_error
from .errors import (
    ClientError,
    ContentDecodeError,
    DecodeError,
    FieldError,
    GenericError,
    ModelError,
    UnknownVariant,
    UnparseableError,
    ValidationFailed,
)
from .models import ApiResponse

__all__ = [
    "ApiResponse",
    "ClientError",
    "ContentDecodeError",
    "DecodeError",
    "Envelope",
    "FieldError",
    "GenericError",
    "ModelError",
    "Other",
    "UnknownVariant",
    "UnparseableError",
    "ValidationFailed",
    "decode",
    "decode_envelope",
    "decode_error",
    "decode_response",
    "decoder_for",
    "encode",
]
