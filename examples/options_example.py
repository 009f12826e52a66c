"""Example of building a client from construction options."""

import httpx

from ccat_api import (
    CCatClient,
    ccat_client,
    with_auth_key,
    with_base_url,
    with_http_client,
    with_user_agent,
    with_user_id,
)


def example_with_defaults():
    """Client with only the default values (http://localhost:1865)."""
    with ccat_client() as client:
        print(client.status())


def example_with_options():
    """Client with a caller-managed transport and custom identity."""
    with httpx.Client(timeout=10.0) as http_client:
        client = CCatClient(
            with_http_client(http_client),
            with_base_url("https://localhost:1865"),
            with_user_agent("cheshire-python-api"),
            with_user_id("my_user"),
            with_auth_key("my-secret-key"),
        )
        print(client.status())


if __name__ == "__main__":
    example_with_defaults()
    example_with_options()
