"""Rate limit status."""

from datetime import datetime, timezone

from ..base import Resource
from ..codec import Int, Nullable


class RateLimitResource(Resource):
    limit: Int
    remaining: Int
    # epoch seconds
    reset: Int

    @property
    def reset_at(self) -> datetime:
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)


class RateLimitResources(Resource):
    core: RateLimitResource
    search: RateLimitResource
    graphql: Nullable[RateLimitResource]


class RateLimitStatus(Resource):
    resources: RateLimitResources
