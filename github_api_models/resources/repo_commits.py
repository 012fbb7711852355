"""Commits listed on a repository.

See ``pull_commits`` for why the nested commit types are defined twice.
"""

from ..base import Resource
from ..codec import Int, Nullable, Timestamp
from .users import User


class UserStamp(Resource):
    name: str
    email: str
    date: Timestamp


class CommitRef(Resource):
    url: str
    sha: str


class CommitDetails(Resource):
    url: str
    author: UserStamp
    committer: Nullable[UserStamp]
    message: str
    tree: CommitRef
    comment_count: Int


class RepoCommit(Resource):
    url: str
    sha: str
    html_url: str
    comments_url: str
    commit: CommitDetails
    author: Nullable[User]
    committer: Nullable[User]
    parents: tuple[CommitRef, ...]
