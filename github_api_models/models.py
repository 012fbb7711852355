"""Transport boundary types."""

from dataclasses import dataclass


@dataclass
class ApiResponse:
    """Raw response handed from the transport to the decoders."""

    status: int
    body: bytes
    etag: str | None = None
    link: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
