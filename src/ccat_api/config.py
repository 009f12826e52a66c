"""Client configuration and construction-time options for the Cheshire Cat API client."""

import json
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

import httpx

# ============================================
# Defaults
# ============================================
DEFAULT_BASE_URL = "http://localhost:1865"
DEFAULT_USER_AGENT = "ccat-api"
DEFAULT_USER_ID = "user"

MarshalFunc = Callable[[Any], Union[bytes, str]]
UnmarshalFunc = Callable[[Union[bytes, str]], Any]


def default_marshal(value: Any) -> bytes:
    """Encode a value as UTF-8 JSON."""
    return json.dumps(value).encode("utf-8")


def default_unmarshal(data: Union[bytes, str]) -> Any:
    """Decode a JSON document into plain Python data."""
    return json.loads(data)


@dataclass(frozen=True)
class ClientConfig:
    """
    Transport settings shared by the client and all of its sub-clients.

    Instances are immutable. Options return a new config rather than
    mutating the one they receive, and each sub-client derives its own
    copy with the resource segment appended to ``base_url``.

    Attributes:
        http_client: Transport handle. ``None`` means the top-level client
            creates (and owns) a default ``httpx.Client``.
        base_url: API root, without trailing slash
        user_agent: Value of the ``User-Agent`` header
        user_id: Value of the ``user_id`` header
        auth_key: Value of the ``Authorization`` header, sent only when set
        marshal_func: Encodes request payloads
        unmarshal_func: Decodes response bodies into plain Python data
    """

    http_client: Optional[httpx.Client] = None
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    user_id: str = DEFAULT_USER_ID
    auth_key: str = ""
    marshal_func: MarshalFunc = default_marshal
    unmarshal_func: UnmarshalFunc = default_unmarshal

    def with_resource(self, segment: str) -> "ClientConfig":
        """Derive a config whose base URL is suffixed with a resource segment."""
        return with_base_url(f"{self.base_url}/{segment}")(self)


Option = Callable[[ClientConfig], ClientConfig]


def default_config() -> ClientConfig:
    """Baseline configuration every option sequence is applied over."""
    return ClientConfig()


def build_config(*options: Option) -> ClientConfig:
    """
    Apply options left to right over the default configuration.

    Later options override earlier ones for the same field.

    Example:
        config = build_config(
            with_base_url("https://cat.example.com"),
            with_auth_key("secret"),
        )
    """
    config = default_config()
    for option in options:
        config = option(config)
    return config


def with_config(new_config: ClientConfig) -> Option:
    """Replace the whole configuration."""

    def apply(config: ClientConfig) -> ClientConfig:
        return new_config

    return apply


def with_http_client(http_client: Optional[httpx.Client]) -> Option:
    """Set the transport handle; ``None`` reverts to the default transport."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, http_client=http_client)

    return apply


def with_base_url(base_url: Optional[str]) -> Option:
    """Set the base URL; an empty value or ``"/"`` resets to the default."""

    def apply(config: ClientConfig) -> ClientConfig:
        if not base_url or base_url == "/":
            return replace(config, base_url=DEFAULT_BASE_URL)
        return replace(config, base_url=base_url.rstrip("/"))

    return apply


def with_user_agent(user_agent: Optional[str]) -> Option:
    """Set the user agent; an empty value resets to the default."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, user_agent=user_agent or DEFAULT_USER_AGENT)

    return apply


def with_user_id(user_id: Optional[str]) -> Option:
    """Set the user ID; an empty value resets to the default."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, user_id=user_id or DEFAULT_USER_ID)

    return apply


def with_auth_key(auth_key: Optional[str]) -> Option:
    """Set the auth key; an empty value disables the Authorization header."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, auth_key=auth_key or "")

    return apply


def with_marshal_func(marshal_func: Optional[MarshalFunc]) -> Option:
    """Set the payload encoder; ``None`` reverts to JSON."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, marshal_func=marshal_func or default_marshal)

    return apply


def with_unmarshal_func(unmarshal_func: Optional[UnmarshalFunc]) -> Option:
    """Set the response decoder; ``None`` reverts to JSON."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, unmarshal_func=unmarshal_func or default_unmarshal)

    return apply
