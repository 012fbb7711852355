"""Error model: typed decode of GitHub failure bodies.

Two shapes share one entry point:

    {"message": "Not Found"}
    {"message": "Validation Failed", "errors": [{"resource": "Issue", "field": "title", "code": "missing"}]}

Anything else becomes an UnparseableError carrying the raw body. Decoding an
error body never raises.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .codec import Nullable
from .errors import ClientError, FieldError, GenericError, UnparseableError, ValidationFailed

logger = logging.getLogger(__name__)


class _FieldErrorShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    resource: str
    code: str
    field: Nullable[str]
    message: Nullable[str]
    documentation_url: Nullable[str]


class _ErrorShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    documentation_url: Nullable[str]
    errors: Nullable[Any]


def _text(body: bytes | str | dict | list | None) -> str:
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    if isinstance(body, str):
        return body
    return json.dumps(body)


def _field_errors(entries: list) -> tuple[FieldError, ...]:
    return tuple(
        FieldError(**_FieldErrorShape.model_validate(entry).model_dump()) for entry in entries
    )


def decode_error(body: bytes | str | dict | list | None, status: int) -> ClientError:
    """Decode a failure body into the matching ClientError subclass."""
    raw = _text(body)
    if isinstance(body, (dict, list)):
        data = body
    else:
        try:
            data = json.loads(raw)
        except ValueError:
            return UnparseableError(status, raw)

    if not isinstance(data, dict):
        return UnparseableError(status, raw)
    try:
        shape = _ErrorShape.model_validate(data)
    except ValidationError:
        return UnparseableError(status, raw)

    if isinstance(shape.errors, list) and shape.errors:
        try:
            field_errors = _field_errors(shape.errors)
        except ValidationError as e:
            # message still matches the flat shape
            logger.debug("Ignoring malformed field errors in %s response: %s", status, e)
        else:
            return ValidationFailed(status, shape.message, field_errors, shape.documentation_url)
    return GenericError(status, shape.message, shape.documentation_url)
