"""Error taxonomy for decoding GitHub API payloads."""

from dataclasses import dataclass


class ModelError(Exception):
    """Base class for everything raised or returned by this package."""


class DecodeError(ModelError):
    """A success payload did not match the shape of its resource model."""

    def __init__(self, field: str, expected_kind: str, reason: str):
        self.field = field
        self.expected_kind = expected_kind
        self.reason = reason
        super().__init__(f"{field or '<root>'}: expected {expected_kind}: {reason}")

    def nested(self, prefix: str) -> "DecodeError":
        """Return a copy of this error with ``prefix`` prepended to its field path."""
        return DecodeError(_join(prefix, self.field), self.expected_kind, self.reason)


class UnknownVariant(DecodeError):
    """An enum tag outside a closed variant set."""

    def __init__(self, type_name: str, raw_value: str, field: str = ""):
        self.type_name = type_name
        self.raw_value = raw_value
        super().__init__(field, type_name, f"unknown variant {raw_value!r}")

    def nested(self, prefix: str) -> "UnknownVariant":
        return UnknownVariant(self.type_name, self.raw_value, _join(prefix, self.field))


class ContentDecodeError(ModelError):
    """File content could not be turned into bytes."""

    def __init__(self, encoding: str, reason: str):
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"cannot decode {encoding!r} content: {reason}")


@dataclass(frozen=True)
class FieldError:
    """One entry of a validation failure."""

    resource: str
    code: str
    field: str | None = None
    message: str | None = None
    documentation_url: str | None = None


class ClientError(ModelError):
    """GitHub reported a failure."""

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"GitHub API error {status}: {message}")


class GenericError(ClientError):
    """Failure without field-level detail."""

    def __init__(self, status: int, message: str, documentation_url: str | None = None):
        super().__init__(status, message)
        self.documentation_url = documentation_url


class ValidationFailed(ClientError):
    """Failure carrying one or more field errors."""

    def __init__(
        self,
        status: int,
        message: str,
        field_errors: tuple[FieldError, ...],
        documentation_url: str | None = None,
    ):
        super().__init__(status, message)
        self.field_errors = tuple(field_errors)
        self.documentation_url = documentation_url

    def by_field(self) -> dict[str | None, list[FieldError]]:
        """Group field errors by the field they refer to."""
        grouped: dict[str | None, list[FieldError]] = {}
        for err in self.field_errors:
            grouped.setdefault(err.field, []).append(err)
        return grouped


class UnparseableError(ClientError):
    """Failure whose body matched neither known error shape."""

    def __init__(self, status: int, raw_body: str):
        super().__init__(status, raw_body or f"HTTP {status}")
        self.raw_body = raw_body


def _join(prefix: str, field: str) -> str:
    if not field:
        return prefix
    if not prefix:
        return field
    if field.startswith("["):
        return f"{prefix}{field}"
    return f"{prefix}.{field}"
