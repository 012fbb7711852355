"""Users."""

from ..base import Resource
from ..codec import Bool, Int, Nullable, Timestamp


class User(Resource):
    login: str
    id: Int
    avatar_url: str
    gravatar_id: Nullable[str]
    url: str
    html_url: str
    followers_url: str
    following_url: str
    gists_url: str
    starred_url: str
    subscriptions_url: str
    organizations_url: str
    repos_url: str
    events_url: str
    received_events_url: str
    site_admin: Bool


class AuthenticatedUser(User):
    """The user behind the token, with profile fields ``User`` lacks."""

    name: Nullable[str]
    company: Nullable[str]
    blog: Nullable[str]
    location: Nullable[str]
    email: Nullable[str]
    hireable: Nullable[Bool]
    bio: Nullable[str]
    public_repos: Int
    public_gists: Int
    followers: Int
    following: Int
    created_at: Timestamp
    updated_at: Timestamp
