"""GitHub App installations."""

from enum import Enum

from ..base import Resource
from ..codec import Int, Nullable, Timestamp
from ..enums import enum_policy, tag


@enum_policy(fallback=False)
class RepositorySelection(str, Enum):
    ALL = "all"
    SELECTED = "selected"


class Installation(Resource):
    id: Int
    access_tokens_url: str
    repositories_url: str
    html_url: str
    app_id: Int
    target_id: Int
    target_type: str
    events: tuple[str, ...]
    single_file_name: Nullable[str]
    repository_selection: tag(RepositorySelection)


class AccessToken(Resource):
    token: str
    expires_at: Timestamp
