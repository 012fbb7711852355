"""Repository collaborators."""

from enum import Enum

from ..base import Options
from ..enums import enum_policy, tag


@enum_policy(fallback=False)
class CollaboratorPermission(str, Enum):
    ADMIN = "admin"
    PUSH = "push"
    PULL = "pull"


class CollaboratorOptions(Options):
    """Body for adding a collaborator. GitHub grants push when none is given."""

    permission: tag(CollaboratorPermission) = CollaboratorPermission.PUSH
