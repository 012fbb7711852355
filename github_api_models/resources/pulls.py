"""Pull requests and their changed files."""

from enum import Enum

from pydantic import Field

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .labels import Label
from .users import User


@enum_policy(fallback=False)
class PullState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class PullRepo(Resource):
    """The repository a head or base ref lives in, by identity only."""

    id: Int
    name: str
    full_name: str
    private: Bool
    html_url: str


class PullRef(Resource):
    label: str
    commit_ref: str = Field(alias="ref")
    sha: str
    user: User
    # null when the fork behind the head ref was deleted
    repo: Nullable[PullRepo]

    def repo_tuple(self) -> tuple[str, str] | None:
        """(owner, name) of the repository this ref points into."""
        if self.repo is None:
            return None
        owner, _, name = self.repo.full_name.partition("/")
        return owner, name


class Pull(Resource):
    id: Int
    url: str
    html_url: str
    diff_url: str
    patch_url: str
    issue_url: str
    commits_url: str
    review_comments_url: str
    review_comment_url: str
    comments_url: str
    statuses_url: str
    number: Int
    state: tag(PullState)
    title: str
    body: Nullable[str]
    created_at: Timestamp
    updated_at: Timestamp
    closed_at: Nullable[Timestamp]
    merged_at: Nullable[Timestamp]
    head: PullRef
    base: PullRef
    user: User
    assignee: Nullable[User]
    assignees: tuple[User, ...]
    merge_commit_sha: Nullable[str]
    # the detail endpoint adds these, the list endpoint omits them
    mergeable: Nullable[Bool]
    merged_by: Nullable[User]
    comments: Nullable[Int]
    commits: Nullable[Int]
    additions: Nullable[Int]
    deletions: Nullable[Int]
    changed_files: Nullable[Int]
    labels: tuple[Label, ...]


@enum_policy(fallback=True)
class FileDiffStatus(str, Enum):
    """How a file changed. ``changed`` and ``unchanged`` arrived after the first five."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class FileDiff(Resource):
    # null for submodule changes
    sha: Nullable[str]
    filename: str
    status: tag(FileDiffStatus)
    additions: Int
    deletions: Int
    changes: Int
    blob_url: str
    raw_url: str
    contents_url: str
    # absent for binary files and very large diffs
    patch: Nullable[str]
    previous_filename: Nullable[str]


class PullOptions(Options):
    title: str
    head: str
    base: str
    body: str | None = None


class PullEditOptions(Options):
    title: str | None = None
    body: str | None = None
    state: tag(PullState) | None = None
