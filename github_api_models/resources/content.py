"""Repository contents.

A file's ``content`` stays base64 text after decoding the record; call
``File.decoded_contents()`` to get the bytes.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from ..base import Options, Resource
from ..codec import Int, Nullable, Timestamp, decode_content, encode_content
from ..enums import enum_policy, tag


class Links(Resource):
    git: Nullable[str]
    self_: str = Field(alias="self")
    html: Nullable[str]


class File(Resource):
    type: Literal["file"]
    encoding: str
    size: Int
    name: str
    path: str
    content: str
    sha: str
    url: str
    git_url: Nullable[str]
    html_url: Nullable[str]
    download_url: Nullable[str]
    links: Links = Field(alias="_links")

    def decoded_contents(self) -> bytes:
        """Raises ContentDecodeError for encodings other than base64."""
        return decode_content(self.content, self.encoding)


class Symlink(Resource):
    type: Literal["symlink"]
    target: str
    size: Int
    name: str
    path: str
    sha: str
    url: str
    git_url: Nullable[str]
    html_url: Nullable[str]
    download_url: Nullable[str]
    links: Links = Field(alias="_links")


class Submodule(Resource):
    type: Literal["submodule"]
    submodule_git_url: str
    size: Int
    name: str
    path: str
    sha: str
    url: str
    git_url: Nullable[str]
    html_url: Nullable[str]
    download_url: Nullable[str]
    links: Links = Field(alias="_links")


# Single-path lookups answer with one of these, told apart by "type".
Contents = Annotated[File | Symlink | Submodule, Field(discriminator="type")]


@enum_policy(fallback=False)
class ContentType(str, Enum):
    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    SUBMODULE = "submodule"


class DirectoryItem(Resource):
    item_type: tag(ContentType) = Field(alias="type")
    size: Int
    name: str
    path: str
    sha: str
    url: str
    git_url: Nullable[str]
    html_url: Nullable[str]
    download_url: Nullable[str]
    links: Links = Field(alias="_links")


class NewFile(Options):
    """Body for creating, updating or deleting a file."""

    message: str
    content: str | None = None
    sha: str | None = None

    @classmethod
    def from_bytes(cls, data: bytes, message: str, sha: str | None = None) -> "NewFile":
        return cls(message=message, content=encode_content(data), sha=sha)


class UserStamp(Resource):
    name: str
    email: str
    date: Timestamp


class CommitRef(Resource):
    url: str
    sha: str


class CommitDetails(Resource):
    """The commit a content write produced. Unlike listed commits it has no comment count."""

    sha: str
    url: str
    html_url: str
    author: UserStamp
    committer: UserStamp
    message: str
    tree: CommitRef
    parents: tuple[CommitRef, ...]


class NewFileResponse(Resource):
    # null after a delete
    content: Nullable[DirectoryItem]
    commit: CommitDetails
