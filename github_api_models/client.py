"""Thin GitHub REST transport using httpx.

Fetches raw responses and hands ``(status, body)`` to the decoders. Retry,
throttling and caching are left to the caller.
"""

import logging
from typing import Any, Callable, TypeVar

import httpx

from .base import Options
from .decode import decode_response
from .models import ApiResponse
from .settings import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[bytes], T]


class GitHubClient:
    """Client for GitHub REST endpoints returning typed values.

    Auth is taken from GITHUB_TOKEN when no token is passed; without one the
    client makes anonymous requests.
    """

    def __init__(self, token: str | None = None, api_base: str | None = None, timeout: float | None = None):
        settings = get_settings()
        token = token or settings.github_token
        headers = {"Accept": "application/vnd.github+json"}
        if token:
            headers["Authorization"] = f"bearer {token}"
        self._api_base = (api_base or settings.api_base).rstrip("/")
        self._client = httpx.Client(headers=headers, timeout=timeout or settings.timeout)

    def _url(self, endpoint: str) -> str:
        ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return f"{self._api_base}{ep}"

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        body: dict | None = None,
    ) -> ApiResponse:
        """Make one raw API call.

        Args:
            method: HTTP method
            endpoint: API path, e.g. "repos/owner/repo/pulls"
            params: Query parameters dict
            body: JSON request body

        Returns:
            ApiResponse with status, raw body bytes, etag, and link fields.
        """
        resp = self._client.request(method, self._url(endpoint), params=params, json=body)
        logger.debug("%s %s -> %s", method, endpoint, resp.status_code)
        return ApiResponse(
            status=resp.status_code,
            body=resp.content,
            etag=resp.headers.get("etag"),
            link=resp.headers.get("link"),
        )

    def call(
        self,
        method: str,
        endpoint: str,
        decoder: Decoder | None = None,
        params: dict | None = None,
        options: Options | None = None,
    ) -> Any:
        """Make an API call and decode its response.

        Raises ClientError subclasses for non-2xx responses and DecodeError
        when a success body does not fit ``decoder``.
        """
        body = options.encode() if options is not None else None
        resp = self.request(method, endpoint, params=params, body=body)
        return decode_response(resp.status, resp.body, decoder)

    def get(self, endpoint: str, decoder: Decoder, params: dict | None = None) -> Any:
        return self.call("GET", endpoint, decoder, params=params)

    def post(self, endpoint: str, options: Options, decoder: Decoder | None = None) -> Any:
        return self.call("POST", endpoint, decoder, options=options)

    def patch(self, endpoint: str, options: Options, decoder: Decoder | None = None) -> Any:
        return self.call("PATCH", endpoint, decoder, options=options)

    def put(self, endpoint: str, options: Options | None = None, decoder: Decoder | None = None) -> Any:
        return self.call("PUT", endpoint, decoder, options=options)

    def delete(self, endpoint: str, options: Options | None = None) -> None:
        self.call("DELETE", endpoint, None, options=options)

    def close(self):
        self._client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# Singleton clients
_clients: dict[tuple, GitHubClient] = {}


def get_client(token: str | None = None, api_base: str | None = None) -> GitHubClient:
    """Get or create a GitHubClient with the given configuration."""
    key = (token, api_base)
    if key not in _clients:
        _clients[key] = GitHubClient(token=token, api_base=api_base)
    return _clients[key]
