"""Repositories."""

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable, Timestamp
from .users import User


class Permissions(Resource):
    admin: Bool
    push: Bool
    pull: Bool


class Repo(Resource):
    id: Int
    owner: User
    name: str
    full_name: str
    description: Nullable[str]
    private: Bool
    fork: Bool
    url: str
    html_url: str
    archive_url: str
    assignees_url: str
    blobs_url: str
    branches_url: str
    clone_url: str
    collaborators_url: str
    comments_url: str
    commits_url: str
    compare_url: str
    contents_url: str
    contributors_url: str
    deployments_url: str
    downloads_url: str
    events_url: str
    forks_url: str
    git_commits_url: str
    git_refs_url: str
    git_tags_url: str
    git_url: str
    hooks_url: str
    issue_comment_url: str
    issue_events_url: str
    issues_url: str
    keys_url: str
    labels_url: str
    languages_url: str
    merges_url: str
    milestones_url: str
    mirror_url: Nullable[str]
    notifications_url: str
    pulls_url: str
    releases_url: str
    ssh_url: str
    stargazers_url: str
    statuses_url: str
    subscribers_url: str
    subscription_url: str
    svn_url: str
    tags_url: str
    teams_url: str
    trees_url: str
    homepage: Nullable[str]
    language: Nullable[str]
    forks_count: Int
    stargazers_count: Int
    watchers_count: Int
    size: Int
    default_branch: str
    open_issues_count: Int
    has_issues: Bool
    has_wiki: Bool
    has_pages: Bool
    has_downloads: Bool
    pushed_at: Nullable[Timestamp]
    created_at: Timestamp
    updated_at: Timestamp
    # only present when the caller is authenticated
    permissions: Nullable[Permissions]


class RepoOptions(Options):
    name: str
    description: str | None = None
    homepage: str | None = None
    private: Bool | None = None
    has_issues: Bool | None = None
    has_wiki: Bool | None = None
    has_downloads: Bool | None = None
    team_id: Int | None = None
    auto_init: Bool | None = None
    gitignore_template: str | None = None
    license_template: str | None = None


class RepoEditOptions(Options):
    name: str
    description: str | None = None
    homepage: str | None = None
    private: Bool | None = None
    has_issues: Bool | None = None
    has_projects: Bool | None = None
    has_wiki: Bool | None = None
    default_branch: str | None = None
    allow_squash_merge: Bool | None = None
    allow_merge_commit: Bool | None = None
    allow_rebase_merge: Bool | None = None
