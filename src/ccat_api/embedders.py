"""Embedder configuration sub-client."""

from typing import Any

from .dispatch import ResourceClient
from .models import EmbedderSetting, EmbedderSettingsResponse
from .types import HTTPMethod


class EmbeddersClient(ResourceClient):
    """Sub-client for the ``/embedder`` endpoints."""

    resource = "embedder"

    def get_all_embedders_settings(self) -> EmbedderSettingsResponse:
        """List the settings of every available embedder."""
        return self._request(HTTPMethod.GET, "settings", response_type=EmbedderSettingsResponse)

    def get_embedder_setting(self, language_embedder_name: str) -> EmbedderSetting:
        """Get the settings of one embedder."""
        return self._request(HTTPMethod.GET, f"settings/{language_embedder_name}", response_type=EmbedderSetting)

    def upsert_embedder_setting(self, language_embedder_name: str, value: dict[str, Any]) -> EmbedderSetting:
        """Create or replace the settings of one embedder."""
        return self._request(
            HTTPMethod.PUT,
            f"settings/{language_embedder_name}",
            payload=value,
            response_type=EmbedderSetting,
        )
