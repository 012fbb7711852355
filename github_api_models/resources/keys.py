"""Deploy keys."""

from ..base import Options, Resource
from ..codec import Bool, Int, Timestamp


class Key(Resource):
    id: Int
    key: str
    title: str
    verified: Bool
    created_at: Timestamp
    read_only: Bool


class KeyOptions(Options):
    title: str
    key: str
    read_only: Bool
