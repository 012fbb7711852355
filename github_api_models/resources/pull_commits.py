"""Commits listed on a pull request.

``CommitDetails``, ``CommitRef`` and ``UserStamp`` are defined here and again
in ``repo_commits``. The two endpoints drift independently, so the types are
not shared.
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


class PullCommit(Resource):
    url: str
    sha: str
    html_url: str
    comments_url: str
    commit: CommitDetails
    # null when the commit email is not linked to a GitHub account
    author: Nullable[User]
    committer: Nullable[User]
    parents: tuple[CommitRef, ...]
