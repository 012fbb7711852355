"""Gists."""

from pydantic import Field

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable, Timestamp
from .users import User


class GistFile(Resource):
    size: Int
    raw_url: str
    # only included when fetching a single gist
    content: Nullable[str]
    content_type: str = Field(alias="type")
    truncated: Nullable[Bool]
    language: Nullable[str]


class Gist(Resource):
    url: str
    forks_url: str
    commits_url: str
    id: str
    description: Nullable[str]
    public: Bool
    owner: Nullable[User]
    user: Nullable[User]
    files: dict[str, GistFile]
    truncated: Bool
    comments: Int
    comments_url: str
    html_url: str
    git_pull_url: str
    git_push_url: str
    created_at: Timestamp
    updated_at: Timestamp


class GistFork(Resource):
    user: User
    url: str
    id: str
    created_at: Timestamp
    updated_at: Timestamp


class GistContent(Options):
    content: str
    filename: str | None = None


class GistOptions(Options):
    files: dict[str, GistContent]
    description: str | None = None
    public: Bool | None = None
