"""Low-level git data: trees, blobs and references."""

from pydantic import Field

from ..base import Resource
from ..codec import Bool, Int, Nullable, decode_content
from ..decode import Payload, decode


class GitFile(Resource):
    path: str
    mode: str
    content_type: str = Field(alias="type")
    # trees and submodules carry no size
    size: Nullable[Int]
    sha: str
    url: Nullable[str]


class TreeData(Resource):
    sha: str
    url: str
    tree: tuple[GitFile, ...]
    truncated: Bool


class Blob(Resource):
    content: str
    encoding: str
    url: str
    sha: str
    size: Nullable[Int]

    def decoded_contents(self) -> bytes:
        return decode_content(self.content, self.encoding)


class GitObject(Resource):
    object_type: str = Field(alias="type")
    sha: str
    url: str


class Reference(Resource):
    reference: str = Field(alias="ref")
    url: str
    object: GitObject


def decode_reference_response(payload: Payload) -> Reference | tuple[Reference, ...]:
    """A ref lookup answers with one reference on an exact match, else every ref with that prefix."""
    return decode(Reference | tuple[Reference, ...], payload)
