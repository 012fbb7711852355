"""Search results.

Repository, issue and pull request search share one envelope (see
``envelope.decode_envelope``); only the item records below differ.
"""

from enum import Enum
from urllib.parse import urlparse

from ..base import Resource
from ..codec import Bool, Float, Int, Nullable, Timestamp
from ..decode import Payload
from ..envelope import Envelope, decode_envelope
from ..enums import enum_policy, tag
from .labels import Label
from .users import User


class SearchLicense(Resource):
    key: str
    name: str
    spdx_id: Nullable[str]
    url: Nullable[str]


class ReposItem(Resource):
    id: Int
    name: str
    full_name: str
    owner: User
    private: Bool
    html_url: str
    description: Nullable[str]
    fork: Bool
    url: str
    forks_url: str
    keys_url: str
    collaborators_url: str
    teams_url: str
    hooks_url: str
    issue_events_url: str
    events_url: str
    assignees_url: str
    branches_url: str
    tags_url: str
    blobs_url: str
    git_tags_url: str
    git_refs_url: str
    trees_url: str
    statuses_url: str
    languages_url: str
    stargazers_url: str
    contributors_url: str
    subscribers_url: str
    subscription_url: str
    commits_url: str
    git_commits_url: str
    comments_url: str
    issue_comment_url: str
    contents_url: str
    compare_url: str
    merges_url: str
    archive_url: str
    downloads_url: str
    issues_url: str
    pulls_url: str
    milestones_url: str
    notifications_url: str
    labels_url: str
    releases_url: str
    deployments_url: str
    created_at: Timestamp
    updated_at: Timestamp
    pushed_at: Nullable[Timestamp]
    git_url: str
    ssh_url: str
    clone_url: str
    svn_url: str
    homepage: Nullable[str]
    size: Int
    stargazers_count: Int
    watchers_count: Int
    language: Nullable[str]
    has_issues: Bool
    has_projects: Bool
    has_downloads: Bool
    has_wiki: Bool
    has_pages: Bool
    forks_count: Int
    mirror_url: Nullable[str]
    archived: Bool
    open_issues_count: Int
    license: Nullable[SearchLicense]
    forks: Int
    open_issues: Int
    watchers: Int
    default_branch: str
    score: Float


@enum_policy(fallback=False)
class ItemState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class PullRequestInfo(Resource):
    url: str
    html_url: str
    diff_url: str
    patch_url: str


class IssuesItem(Resource):
    url: str
    repository_url: str
    labels_url: str
    comments_url: str
    events_url: str
    html_url: str
    id: Int
    number: Int
    title: str
    user: User
    labels: tuple[Label, ...]
    state: tag(ItemState)
    locked: Bool
    assignee: Nullable[User]
    assignees: tuple[User, ...]
    comments: Int
    created_at: Timestamp
    updated_at: Timestamp
    closed_at: Nullable[Timestamp]
    # set when the issue is a pull request
    pull_request: Nullable[PullRequestInfo]
    body: Nullable[str]
    score: Float

    def repo_tuple(self) -> tuple[str, str]:
        """(owner, repo) this issue belongs to, taken from ``repository_url``."""
        parts = urlparse(self.repository_url).path.rstrip("/").split("/")
        return parts[-2], parts[-1]


class PullsItem(IssuesItem):
    """An issue search hit restricted to pull requests (``is:pr``)."""

    pull_request: PullRequestInfo


def decode_repo_search(payload: Payload) -> Envelope[ReposItem]:
    return decode_envelope(payload, ReposItem.decode)


def decode_issue_search(payload: Payload) -> Envelope[IssuesItem]:
    return decode_envelope(payload, IssuesItem.decode)


def decode_pull_search(payload: Payload) -> Envelope[PullsItem]:
    return decode_envelope(payload, PullsItem.decode)
