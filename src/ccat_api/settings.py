"""Settings sub-client."""

from typing import Any, Optional

from .dispatch import ResourceClient
from .models import CreateSettingPayload, Setting, SettingsResponse, UpdateSettingPayload
from .types import HTTPMethod


class SettingsClient(ResourceClient):
    """
    Sub-client for the ``/settings`` endpoints.

    Example:
        with CCatClient() as client:
            created = client.settings.create_setting("theme", "dark", category="ui")
            found = client.settings.get_settings(search="theme")
    """

    resource = "settings"

    def get_settings(self, search: Optional[str] = None) -> SettingsResponse:
        """
        List settings, optionally filtered by name.

        Args:
            search: Only return settings whose name contains this text

        Returns:
            Matching settings
        """
        return self._request(
            HTTPMethod.GET,
            params={"search": search},
            response_type=SettingsResponse,
        )

    def create_setting(self, name: str, value: Any, category: Optional[str] = None) -> Setting:
        """
        Create a new setting in the database.

        Args:
            name: Setting name
            value: Any JSON-serializable value
            category: Optional category

        Returns:
            The stored setting, with its assigned ``setting_id``
        """
        payload = CreateSettingPayload(name=name, value=value, category=category)
        return self._request(HTTPMethod.POST, payload=payload, response_type=Setting)

    def get_setting(self, setting_id: str) -> Setting:
        """Get a single setting by ID."""
        return self._request(HTTPMethod.GET, setting_id, response_type=Setting)

    def update_setting(
        self,
        setting_id: str,
        name: Optional[str] = None,
        value: Any = None,
        category: Optional[str] = None,
    ) -> Setting:
        """
        Update an existing setting. Arguments left as ``None`` are not sent.

        Returns:
            The updated setting
        """
        payload = UpdateSettingPayload(name=name, value=value, category=category)
        return self._request(HTTPMethod.PUT, setting_id, payload=payload, response_type=Setting)

    def delete_setting(self, setting_id: str) -> None:
        """Delete a setting by ID."""
        self._request(HTTPMethod.DELETE, setting_id)
