"""Issue comments, pull request review comments and review requests."""

from ..base import Options, Resource
from ..codec import Int, Nullable, Timestamp
from .organizations import Team
from .users import User


class Comment(Resource):
    id: Int
    url: str
    html_url: str
    body: str
    user: User
    created_at: Timestamp
    updated_at: Timestamp


class CommentOptions(Options):
    body: str


class ReviewComment(Resource):
    id: Int
    url: str
    diff_hunk: str
    path: str
    # null once the line is outdated
    position: Nullable[Int]
    original_position: Int
    commit_id: str
    original_commit_id: str
    user: User
    body: str
    created_at: Timestamp
    updated_at: Timestamp
    html_url: str
    pull_request_url: str


class ReviewCommentOptions(Options):
    body: str
    commit_id: str
    path: str
    position: Int


class ReviewRequest(Resource):
    users: tuple[User, ...]
    teams: tuple[Team, ...]


class ReviewRequestOptions(Options):
    reviewers: tuple[str, ...] = ()
    team_reviewers: tuple[str, ...] = ()
