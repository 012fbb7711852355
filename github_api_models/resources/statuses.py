"""Commit statuses."""

from enum import Enum

from ..base import Options, Resource
from ..codec import Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .users import User


@enum_policy(fallback=False)
class StatusState(str, Enum):
    """Commit status state. Callers branch on all four, so unknown tags are an error."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"


class Status(Resource):
    created_at: Timestamp
    updated_at: Timestamp
    state: tag(StatusState)
    target_url: Nullable[str]
    description: Nullable[str]
    id: Int
    url: str
    context: str
    creator: User


class StatusOptions(Options):
    state: tag(StatusState) = StatusState.PENDING
    target_url: str | None = None
    description: str | None = None
    context: str | None = None
