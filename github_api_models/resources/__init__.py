"""Resource models, one module per API resource family.

``DECODERS`` maps a short resource name to a decoder for that payload; the
CLI uses it to pick a decoder by name.
"""

from ..decode import decoder_for
from .apps import AccessToken, Installation
from .branches import Branch, ProtectionState
from .checks import CheckRun
from .comments import Comment, ReviewComment, ReviewRequest
from .content import Contents, DirectoryItem, File, NewFileResponse
from .deployments import Deployment, DeploymentStatus
from .gists import Gist, GistFork
from .git import Blob, TreeData, decode_reference_response
from .hooks import Hook
from .issues import Issue
from .keys import Key
from .labels import Label, Milestone
from .notifications import RepoSubscription, Thread, ThreadSubscription
from .organizations import Invitation, Org, Team, TeamMember
from .pull_commits import PullCommit
from .pulls import FileDiff, Pull
from .rate_limit import RateLimitStatus
from .releases import Asset, Release
from .repo_commits import RepoCommit
from .repositories import Repo
from .search import decode_issue_search, decode_pull_search, decode_repo_search
from .statuses import Status
from .traffic import Clones, PopularPath, Referrer, Views
from .users import AuthenticatedUser, User


def _many(model):
    return decoder_for(tuple[model, ...])


DECODERS = {
    "access-token": AccessToken.decode,
    "asset": Asset.decode,
    "assets": _many(Asset),
    "authenticated-user": AuthenticatedUser.decode,
    "blob": Blob.decode,
    "branch": Branch.decode,
    "branches": _many(Branch),
    "branch-protection": ProtectionState.decode,
    "check-run": CheckRun.decode,
    "clones": Clones.decode,
    "comment": Comment.decode,
    "comments": _many(Comment),
    "collaborators": _many(User),
    "contents": decoder_for(Contents),
    "deployment": Deployment.decode,
    "deployments": _many(Deployment),
    "deployment-status": DeploymentStatus.decode,
    "deployment-statuses": _many(DeploymentStatus),
    "directory": _many(DirectoryItem),
    "file": File.decode,
    "file-write": NewFileResponse.decode,
    "gist": Gist.decode,
    "gists": _many(Gist),
    "gist-forks": _many(GistFork),
    "hook": Hook.decode,
    "hooks": _many(Hook),
    "installation": Installation.decode,
    "invitations": _many(Invitation),
    "issue": Issue.decode,
    "issues": _many(Issue),
    "key": Key.decode,
    "keys": _many(Key),
    "label": Label.decode,
    "labels": _many(Label),
    "milestone": Milestone.decode,
    "notifications": _many(Thread),
    "org": Org.decode,
    "orgs": _many(Org),
    "popular-paths": _many(PopularPath),
    "pull": Pull.decode,
    "pulls": _many(Pull),
    "pull-commits": _many(PullCommit),
    "pull-files": _many(FileDiff),
    "rate-limit": RateLimitStatus.decode,
    "reference": decode_reference_response,
    "referrers": _many(Referrer),
    "release": Release.decode,
    "releases": _many(Release),
    "repo": Repo.decode,
    "repos": _many(Repo),
    "repo-commits": _many(RepoCommit),
    "repo-subscription": RepoSubscription.decode,
    "review-comments": _many(ReviewComment),
    "review-requests": ReviewRequest.decode,
    "search-issues": decode_issue_search,
    "search-pulls": decode_pull_search,
    "search-repos": decode_repo_search,
    "statuses": _many(Status),
    "team": Team.decode,
    "team-membership": TeamMember.decode,
    "teams": _many(Team),
    "thread-subscription": ThreadSubscription.decode,
    "tree": TreeData.decode,
    "user": User.decode,
    "users": _many(User),
    "views": Views.decode,
}
