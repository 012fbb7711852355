"""Organizations, teams, team memberships and membership invitations."""

from enum import Enum

from ..base import Options, Resource
from ..codec import Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .users import User


class Org(Resource):
    login: str
    id: Int
    url: str
    repos_url: str
    events_url: str
    hooks_url: str
    issues_url: str
    members_url: str
    public_members_url: str
    avatar_url: str
    description: Nullable[str]


@enum_policy(fallback=False)
class TeamPrivacy(str, Enum):
    SECRET = "secret"
    CLOSED = "closed"


@enum_policy(fallback=True)
class TeamPermission(str, Enum):
    """Repository permission granted to a team. GitHub added triage and maintain in 2019."""

    PULL = "pull"
    TRIAGE = "triage"
    PUSH = "push"
    MAINTAIN = "maintain"
    ADMIN = "admin"


class Team(Resource):
    id: Int
    url: str
    name: str
    slug: str
    description: Nullable[str]
    privacy: tag(TeamPrivacy)
    members_url: str
    repositories_url: str
    permission: tag(TeamPermission)


class TeamOptions(Options):
    name: str
    description: str | None = None
    privacy: tag(TeamPrivacy) | None = None
    permission: tag(TeamPermission) | None = None


@enum_policy(fallback=False)
class TeamMemberRole(str, Enum):
    MEMBER = "member"
    MAINTAINER = "maintainer"


@enum_policy(fallback=True)
class TeamMemberState(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"


class TeamMember(Resource):
    """A user's membership in a team."""

    url: str
    role: tag(TeamMemberRole)
    state: tag(TeamMemberState)


class TeamMemberOptions(Options):
    role: tag(TeamMemberRole)


@enum_policy(fallback=True)
class InvitedRole(str, Enum):
    DIRECT_MEMBER = "direct_member"
    ADMIN = "admin"
    BILLING_MANAGER = "billing_manager"
    HIRING_MANAGER = "hiring_manager"
    REINSTATE = "reinstate"


class Invitation(Resource):
    id: Int
    login: Nullable[str]
    email: Nullable[str]
    role: tag(InvitedRole)
    created_at: Timestamp
    inviter: User
    team_count: Nullable[Int]
