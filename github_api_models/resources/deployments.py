"""Deployments and deployment statuses."""

from enum import Enum

from pydantic import Field

from ..base import Options, Resource
from ..codec import Bool, FrozenJson, Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .users import User


class Deployment(Resource):
    url: str
    id: Int
    sha: str
    commit_ref: str = Field(alias="ref")
    task: str
    # free-form JSON chosen by whoever created the deployment
    payload: FrozenJson
    environment: str
    description: Nullable[str]
    creator: User
    created_at: Timestamp
    updated_at: Timestamp
    statuses_url: str
    repository_url: str


class DeploymentOptions(Options):
    commit_ref: str = Field(alias="ref")
    task: str | None = None
    auto_merge: Bool | None = None
    required_contexts: tuple[str, ...] | None = None
    payload: str | None = None
    environment: str | None = None
    description: str | None = None


@enum_policy(fallback=True)
class DeploymentState(str, Enum):
    """``in_progress`` and ``queued`` were added after the first five."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"
    INACTIVE = "inactive"
    IN_PROGRESS = "in_progress"
    QUEUED = "queued"


class DeploymentStatus(Resource):
    url: str
    created_at: Timestamp
    updated_at: Timestamp
    state: tag(DeploymentState)
    target_url: Nullable[str]
    description: Nullable[str]
    id: Int
    deployment_url: str
    repository_url: str
    creator: User


class DeploymentStatusOptions(Options):
    state: tag(DeploymentState)
    target_url: str | None = None
    description: str | None = None
