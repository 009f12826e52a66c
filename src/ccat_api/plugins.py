"""Plugins sub-client."""

from typing import Any, Optional

from .dispatch import FileInput, ResourceClient
from .models import (
    DeletePluginResponse,
    InstalledPlugin,
    PluginSetting,
    PluginSettingsResponse,
    PluginsResponse,
    TogglePluginResponse,
    UploadPluginResponse,
)
from .types import HTTPMethod


class PluginsClient(ResourceClient):
    """
    Sub-client for the ``/plugins`` endpoints.

    Example:
        with CCatClient() as client:
            plugins = client.plugins.get_plugins(query="weather")
            for plugin in plugins.installed:
                print(plugin.id, plugin.active)

            client.plugins.upload_plugin("my_plugin.zip")
    """

    resource = "plugins"

    def get_plugins(self, query: Optional[str] = None) -> PluginsResponse:
        """
        List installed and registry plugins.

        Args:
            query: Optional text filter

        Returns:
            Installed plugins, registry plugins and the applied filters
        """
        return self._request(HTTPMethod.GET, params={"query": query}, response_type=PluginsResponse)

    def upload_plugin(self, file: Optional[FileInput]) -> UploadPluginResponse:
        """
        Install a plugin from a zip archive.

        Args:
            file: Open binary file object or path of the archive

        Raises:
            UploadMissingFileError: No file was given
        """
        return self._upload(HTTPMethod.POST, "upload", file, response_type=UploadPluginResponse)

    def upload_plugin_from_registry(self, url: str) -> UploadPluginResponse:
        """Install a plugin from its registry URL."""
        return self._request(
            HTTPMethod.POST,
            "upload/registry",
            payload={"url": url},
            response_type=UploadPluginResponse,
        )

    def toggle_plugin(self, plugin_id: str) -> TogglePluginResponse:
        """Enable or disable a plugin."""
        return self._request(HTTPMethod.POST, f"toggle/{plugin_id}", response_type=TogglePluginResponse)

    def get_plugins_settings(self) -> PluginSettingsResponse:
        """List the settings of every installed plugin."""
        return self._request(HTTPMethod.GET, "settings", response_type=PluginSettingsResponse)

    def get_plugin_settings(self, plugin_id: str) -> PluginSetting:
        """Get the settings of one plugin."""
        return self._request(HTTPMethod.GET, f"settings/{plugin_id}", response_type=PluginSetting)

    def upsert_plugin_settings(self, plugin_id: str, value: dict[str, Any]) -> PluginSetting:
        """Create or replace the settings of a plugin."""
        return self._request(
            HTTPMethod.PUT,
            f"settings/{plugin_id}",
            payload=value,
            response_type=PluginSetting,
        )

    def get_plugin_detail(self, plugin_id: str) -> InstalledPlugin:
        """Get hooks, tools and metadata of an installed plugin."""
        return self._request(HTTPMethod.GET, plugin_id, response_type=InstalledPlugin)

    def delete_plugin(self, plugin_id: str) -> DeletePluginResponse:
        """Uninstall a plugin."""
        return self._request(HTTPMethod.DELETE, plugin_id, response_type=DeletePluginResponse)
