"""Branches and branch protection.

GitHub reads and writes protection in different shapes: the response wraps
``enforce_admins`` in an object and adds URLs, the request takes plain
values. The ``*State`` records are the response side, ``Protection`` and
its parts are the request body.
"""

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable


class BranchCommit(Resource):
    sha: str
    url: str


class Branch(Resource):
    name: str
    commit: BranchCommit
    protected: Bool
    protection_url: Nullable[str]


class EnforceAdmins(Resource):
    url: str
    enabled: Bool


class StatusChecksState(Resource):
    url: Nullable[str]
    strict: Bool
    contexts: tuple[str, ...]


class ReviewsState(Resource):
    url: Nullable[str]
    dismiss_stale_reviews: Bool
    require_code_owner_reviews: Bool
    required_approving_review_count: Nullable[Int]


class ProtectionState(Resource):
    url: Nullable[str]
    required_status_checks: Nullable[StatusChecksState]
    enforce_admins: Nullable[EnforceAdmins]
    required_pull_request_reviews: Nullable[ReviewsState]


class StatusChecks(Options):
    strict: Bool
    contexts: tuple[str, ...]


class Restrictions(Options):
    users: tuple[str, ...]
    teams: tuple[str, ...]


class RequiredPullRequestReviews(Options):
    dismissal_restrictions: Restrictions | None = None
    dismiss_stale_reviews: Bool
    require_code_owner_reviews: Bool
    required_approving_review_count: Int


class Protection(Options):
    """Body for updating branch protection.

    GitHub requires all four keys, with null meaning "disabled", so unset
    parts are sent as null instead of being dropped.
    """

    required_status_checks: StatusChecks | None
    enforce_admins: Bool
    required_pull_request_reviews: RequiredPullRequestReviews | None
    restrictions: Restrictions | None

    def encode(self) -> dict:
        body = self.model_dump(mode="json", by_alias=True)
        reviews = body["required_pull_request_reviews"]
        if reviews is not None and reviews["dismissal_restrictions"] is None:
            del reviews["dismissal_restrictions"]
        return body


class Rename(Options):
    new_name: str
