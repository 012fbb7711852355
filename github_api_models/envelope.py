"""Generic search envelope.

GitHub's search endpoints all answer with the same wrapper:

    {"total_count": 40, "incomplete_results": false, "items": [...]}

Only the item shape differs, so the envelope is decoded once here and each
item is handed to a caller-supplied decoder.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict

from .codec import Bool, Int
from .decode import decode
from .errors import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """One page of search results.

    ``total_count`` is the size of the whole result set on the server and can
    differ from ``len(items)``.
    """

    total_count: int
    incomplete_results: bool
    items: tuple[T, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)


class _EnvelopeShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total_count: Int
    incomplete_results: Bool
    items: list[Any]


def decode_envelope(payload: Any, item_decoder: Callable[[Any], T]) -> Envelope[T]:
    """Decode a search envelope, delegating each item to ``item_decoder``.

    Item failures are re-raised with the field path rooted at ``items[i]``.
    """
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise DecodeError("", "JSON document", str(e)) from e
    shape = decode(_EnvelopeShape, payload)

    items = []
    for index, raw in enumerate(shape.items):
        try:
            items.append(item_decoder(raw))
        except DecodeError as e:
            raise e.nested(f"items[{index}]") from e
    return Envelope(
        total_count=shape.total_count,
        incomplete_results=shape.incomplete_results,
        items=tuple(items),
    )
