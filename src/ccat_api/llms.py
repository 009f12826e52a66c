"""LLM configuration sub-client."""

from typing import Any

from .dispatch import ResourceClient
from .models import LLMSetting, LLMSettingsResponse
from .types import HTTPMethod


class LLMsClient(ResourceClient):
    """Sub-client for the ``/llm`` endpoints."""

    resource = "llm"

    def get_all_llms_settings(self) -> LLMSettingsResponse:
        """List the settings of every available language model."""
        return self._request(HTTPMethod.GET, "settings", response_type=LLMSettingsResponse)

    def get_llm_setting(self, language_model_name: str) -> LLMSetting:
        """
        Get the settings of one language model.

        Args:
            language_model_name: Name of the LLM configuration, e.g. ``LLMOpenAIConfig``
        """
        return self._request(HTTPMethod.GET, f"settings/{language_model_name}", response_type=LLMSetting)

    def upsert_llm_setting(self, language_model_name: str, value: dict[str, Any]) -> LLMSetting:
        """
        Create or replace the settings of one language model.

        Example:
            client.llms.upsert_llm_setting("together", {"together_api_key": "..."})
        """
        return self._request(
            HTTPMethod.PUT,
            f"settings/{language_model_name}",
            payload=value,
            response_type=LLMSetting,
        )
