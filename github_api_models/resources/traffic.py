"""Repository traffic."""

from ..base import Resource
from ..codec import Int, Timestamp


class Referrer(Resource):
    referrer: str
    count: Int
    uniques: Int


class PopularPath(Resource):
    path: str
    title: str
    count: Int
    uniques: Int


class DataPoint(Resource):
    timestamp: Timestamp
    count: Int
    uniques: Int


class Views(Resource):
    count: Int
    uniques: Int
    views: tuple[DataPoint, ...]


class Clones(Resource):
    count: Int
    uniques: Int
    clones: tuple[DataPoint, ...]
