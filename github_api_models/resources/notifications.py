"""Notification threads and subscriptions."""

from enum import Enum

from pydantic import Field

from ..base import Resource
from ..codec import Bool, Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .users import User


@enum_policy(fallback=True)
class NotificationReason(str, Enum):
    """Why a thread reached the user. GitHub keeps adding reasons."""

    ASSIGN = "assign"
    AUTHOR = "author"
    COMMENT = "comment"
    INVITATION = "invitation"
    MANUAL = "manual"
    MENTION = "mention"
    REVIEW_REQUESTED = "review_requested"
    SECURITY_ALERT = "security_alert"
    STATE_CHANGE = "state_change"
    SUBSCRIBED = "subscribed"
    TEAM_MENTION = "team_mention"
    CI_ACTIVITY = "ci_activity"


class Subject(Resource):
    title: str
    url: Nullable[str]
    latest_comment_url: Nullable[str]
    kind: str = Field(alias="type")


class ThreadRepository(Resource):
    """The repository a thread belongs to, trimmed to its identity."""

    id: Int
    node_id: str
    name: str
    full_name: str
    owner: User
    html_url: str


class Thread(Resource):
    id: str
    unread: Bool
    updated_at: Timestamp
    last_read_at: Nullable[Timestamp]
    reason: tag(NotificationReason)
    subject: Subject
    repository: ThreadRepository
    url: str
    subscription_url: str


class ThreadSubscription(Resource):
    subscribed: Bool
    ignored: Bool
    reason: Nullable[str]
    created_at: Timestamp
    url: str
    thread_url: str


class RepoSubscription(Resource):
    """Watching state of a repository."""

    subscribed: Bool
    ignored: Bool
    reason: Nullable[str]
    created_at: Timestamp
    url: str
    repository_url: str
