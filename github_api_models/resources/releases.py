"""Releases and release assets."""

from enum import Enum

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable, Timestamp
from ..enums import enum_policy, tag
from .users import User


@enum_policy(fallback=True)
class AssetState(str, Enum):
    UPLOADED = "uploaded"
    OPEN = "open"


class Asset(Resource):
    url: str
    browser_download_url: str
    id: Int
    name: str
    label: Nullable[str]
    state: tag(AssetState)
    content_type: str
    size: Int
    download_count: Int
    created_at: Timestamp
    updated_at: Timestamp
    uploader: Nullable[User]


class Release(Resource):
    url: str
    html_url: str
    assets_url: str
    upload_url: str
    tarball_url: Nullable[str]
    zipball_url: Nullable[str]
    id: Int
    tag_name: str
    target_commitish: str
    name: Nullable[str]
    body: Nullable[str]
    draft: Bool
    prerelease: Bool
    created_at: Timestamp
    # drafts are unpublished
    published_at: Nullable[Timestamp]
    author: User
    assets: tuple[Asset, ...]


class ReleaseOptions(Options):
    tag_name: str
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: Bool | None = None
    prerelease: Bool | None = None
