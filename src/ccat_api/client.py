"""Main client for the Cheshire Cat API."""

import logging
from contextlib import contextmanager
from typing import Any, Generator, Optional

import httpx

from .config import ClientConfig, Option, build_config, with_auth_key, with_base_url, with_http_client, with_user_id
from .dispatch import execute
from .embedders import EmbeddersClient
from .llms import LLMsClient
from .memory import MemoryClient
from .models import StatusResponse
from .plugins import PluginsClient
from .rabbit_hole import RabbitHoleClient
from .settings import SettingsClient
from .types import HTTPMethod

logger = logging.getLogger(__name__)


class CCatClient:
    """
    Python client for the Cheshire Cat API.

    Sub-clients are exposed as attributes and share the transport settings
    given at construction time.

    Usage:
        with CCatClient(
            with_base_url("https://cat.example.com"),
            with_auth_key("your-api-key"),
        ) as client:
            client.status()

            # Search settings
            settings = client.settings.get_settings(search="example")

            # Configure an LLM
            client.llms.upsert_llm_setting("together", {"together_api_key": "..."})

            # Ingest a document
            client.rabbit_hole.upload("manual.pdf", chunk_size=512)
    """

    def __init__(
        self,
        *options: Option,
        base_url: Optional[str] = None,
        auth_key: Optional[str] = None,
        user_id: Optional[str] = None,
    ):
        """
        Initialize the client.

        Args:
            *options: Construction options, applied in order
            base_url: Shortcut for a trailing ``with_base_url`` option
            auth_key: Shortcut for a trailing ``with_auth_key`` option
            user_id: Shortcut for a trailing ``with_user_id`` option
        """
        options = list(options)
        if base_url is not None:
            options.append(with_base_url(base_url))
        if auth_key is not None:
            options.append(with_auth_key(auth_key))
        if user_id is not None:
            options.append(with_user_id(user_id))

        config = build_config(*options)

        self._owned_http_client: Optional[httpx.Client] = None
        if config.http_client is None:
            self._owned_http_client = httpx.Client()
            config = with_http_client(self._owned_http_client)(config)

        self.config: ClientConfig = config
        logger.debug("Cheshire Cat client configured for %s", config.base_url)

        self.settings = SettingsClient(config)
        self.llms = LLMsClient(config)
        self.embedders = EmbeddersClient(config)
        self.plugins = PluginsClient(config)
        self.memory = MemoryClient(config)
        self.rabbit_hole = RabbitHoleClient(config)

    def __enter__(self) -> "CCatClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client, unless it was supplied by the caller."""
        if self._owned_http_client is not None:
            self._owned_http_client.close()

    def status(self) -> StatusResponse:
        """
        Check that the Cheshire Cat is up.

        Returns:
            Status reported by the API root

        Raises:
            APIError: The server reported an error
        """
        return execute(self.config, HTTPMethod.GET, response_type=StatusResponse)


@contextmanager
def ccat_client(*options: Option, **kwargs: Any) -> Generator[CCatClient, None, None]:
    """
    Context manager for the Cheshire Cat client.

    Accepts the same arguments as :class:`CCatClient`.

    Example:
        with ccat_client(base_url="http://localhost:1865") as client:
            print(client.status().status)
    """
    client = CCatClient(*options, **kwargs)
    with client:
        yield client
