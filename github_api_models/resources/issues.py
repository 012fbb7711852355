"""Issues."""

from enum import Enum

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .labels import Label, Milestone
from .users import User


@enum_policy(fallback=False)
class IssueState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Issue(Resource):
    id: Int
    url: str
    labels_url: str
    comments_url: str
    events_url: str
    html_url: str
    number: Int
    state: tag(IssueState)
    title: str
    body: Nullable[str]
    user: User
    labels: tuple[Label, ...]
    assignee: Nullable[User]
    assignees: tuple[User, ...]
    milestone: Nullable[Milestone]
    locked: Bool
    comments: Int
    closed_at: Nullable[Timestamp]
    created_at: Timestamp
    updated_at: Timestamp


class IssueOptions(Options):
    title: str
    body: str | None = None
    assignee: str | None = None
    milestone: Int | None = None
    labels: tuple[str, ...] = ()
