"""Labels and milestones."""

from enum import Enum

from ..base import Options, Resource
from ..codec import Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .users import User


class Label(Resource):
    url: str
    name: str
    color: str


class LabelOptions(Options):
    name: str
    color: str


@enum_policy(fallback=False)
class MilestoneState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Milestone(Resource):
    url: str
    html_url: str
    labels_url: str
    id: Int
    node_id: str
    number: Int
    title: str
    description: Nullable[str]
    creator: User
    open_issues: Int
    closed_issues: Int
    state: tag(MilestoneState)
    created_at: Timestamp
    updated_at: Timestamp
    due_on: Nullable[Timestamp]
    closed_at: Nullable[Timestamp]
