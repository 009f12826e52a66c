"""Unit tests for the settings sub-client."""

import json
from datetime import datetime, timezone

import respx
from httpx import Response

from ccat_api import CCatClient, Setting


def setting_json(**overrides) -> dict:
    data = {
        "name": "example_setting",
        "value": {"enabled": True},
        "category": "general",
        "setting_id": "5f9c1f2e",
        "updated_at": 1706263200,
    }
    data.update(overrides)
    return data


@respx.mock
def test_get_settings_with_search(client: CCatClient, base_url: str) -> None:
    """Test listing settings filtered by search text."""
    route = respx.get(url__startswith=f"{base_url}/settings").mock(
        return_value=Response(200, json={"settings": [setting_json()]})
    )

    response = client.settings.get_settings(search="example")

    request = route.calls.last.request
    assert request.method == "GET"
    assert str(request.url) == f"{base_url}/settings?search=example"
    assert len(response.settings) == 1
    assert "example" in response.settings[0].name


@respx.mock
def test_get_settings_without_search(client: CCatClient, base_url: str) -> None:
    """Test no query string is sent without filters."""
    route = respx.get(url__startswith=f"{base_url}/settings").mock(
        return_value=Response(200, json={"settings": []})
    )

    response = client.settings.get_settings()

    assert str(route.calls.last.request.url) == f"{base_url}/settings"
    assert response.settings == []


@respx.mock
def test_create_setting(client: CCatClient, base_url: str) -> None:
    """Test creating a setting."""
    route = respx.post(f"{base_url}/settings").mock(return_value=Response(200, json=setting_json()))

    setting = client.settings.create_setting("example_setting", {"enabled": True}, category="general")

    assert json.loads(route.calls.last.request.content) == {
        "name": "example_setting",
        "value": {"enabled": True},
        "category": "general",
    }
    assert isinstance(setting, Setting)
    assert setting.setting_id == "5f9c1f2e"
    assert setting.updated_at == datetime(2024, 1, 26, 10, 0, tzinfo=timezone.utc)


@respx.mock
def test_create_then_get_round_trip(client: CCatClient, base_url: str) -> None:
    """Test a created setting fetched by ID keeps name, value and category."""
    respx.post(f"{base_url}/settings").mock(return_value=Response(200, json=setting_json()))
    respx.get(f"{base_url}/settings/5f9c1f2e").mock(return_value=Response(200, json=setting_json()))

    created = client.settings.create_setting("example_setting", {"enabled": True}, category="general")
    fetched = client.settings.get_setting(created.setting_id)

    assert (fetched.name, fetched.value, fetched.category) == (created.name, created.value, created.category)


@respx.mock
def test_update_setting_sends_only_given_fields(client: CCatClient, base_url: str) -> None:
    route = respx.put(f"{base_url}/settings/5f9c1f2e").mock(
        return_value=Response(200, json=setting_json(value=42))
    )

    setting = client.settings.update_setting("5f9c1f2e", value=42)

    assert json.loads(route.calls.last.request.content) == {"value": 42}
    assert setting.value == 42


@respx.mock
def test_delete_setting(client: CCatClient, base_url: str) -> None:
    route = respx.delete(f"{base_url}/settings/5f9c1f2e").mock(return_value=Response(200, json={"deleted": "5f9c1f2e"}))

    assert client.settings.delete_setting("5f9c1f2e") is None
    assert route.called


@respx.mock
def test_setting_without_category(client: CCatClient, base_url: str) -> None:
    """Test a setting stored without category decodes with a null category."""
    route = respx.post(f"{base_url}/settings").mock(
        return_value=Response(200, json=setting_json(name="n", value={}, category=None, setting_id="1"))
    )
    respx.get(url__startswith=f"{base_url}/settings").mock(
        return_value=Response(200, json={"settings": [setting_json(), setting_json(category=None)]})
    )

    created = client.settings.create_setting("n", {})
    listed = client.settings.get_settings()

    assert "category" not in json.loads(route.calls.last.request.content)
    assert created.category is None
    assert created.setting_id == "1"
    assert [s.category for s in listed.settings] == ["general", None]
