"""Repository webhooks."""

from enum import Enum
from typing import Any

from ..base import Options, Resource
from ..codec import Bool, Int, Nullable, Timestamp
from ..enums import Other, decode_tag, encode_tag, enum_policy, tag


@enum_policy(fallback=True)
class WebHookContentType(str, Enum):
    """Content type deliveries are sent with."""

    JSON = "json"
    FORM = "form"


class HookConfig(Resource):
    url: Nullable[str]
    content_type: Nullable[tag(WebHookContentType)]
    insecure_ssl: Nullable[str]
    # GitHub masks the value as "********"
    secret: Nullable[str]


class Hook(Resource):
    id: Int
    url: str
    test_url: Nullable[str]
    ping_url: str
    name: str
    events: tuple[str, ...]
    config: HookConfig
    created_at: Timestamp
    updated_at: Timestamp
    active: Bool


def _config(
    url: str | None,
    content_type: WebHookContentType | Other | str | None,
    secret: str | None,
    extra: dict[str, Any],
) -> dict[str, Any]:
    config = dict(extra)
    if url is not None:
        config["url"] = url
    if content_type is not None:
        config["content_type"] = encode_tag(decode_tag(WebHookContentType, content_type))
    if secret is not None:
        config["secret"] = secret
    return config


class HookCreateOptions(Options):
    name: str
    config: dict[str, Any]
    events: tuple[str, ...] = ("push",)
    active: Bool = True

    @classmethod
    def web(
        cls,
        url: str,
        content_type: WebHookContentType | str = WebHookContentType.FORM,
        secret: str | None = None,
        events: tuple[str, ...] = ("push",),
        active: bool = True,
        **extra: Any,
    ) -> "HookCreateOptions":
        return cls(
            name="web",
            config=_config(url, content_type, secret, extra),
            events=events,
            active=active,
        )


class HookEditOptions(Options):
    config: dict[str, Any] | None = None
    events: tuple[str, ...] | None = None
    add_events: tuple[str, ...] | None = None
    remove_events: tuple[str, ...] | None = None
    active: Bool | None = None

    @classmethod
    def web(
        cls,
        url: str | None = None,
        content_type: WebHookContentType | str | None = None,
        secret: str | None = None,
        events: tuple[str, ...] | None = None,
        active: bool | None = None,
        **extra: Any,
    ) -> "HookEditOptions":
        config = _config(url, content_type, secret, extra)
        return cls(config=config or None, events=events, active=active)
