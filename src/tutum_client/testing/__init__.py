"""Testing utilities for code built on the Tutum client.

Helpers to run a TutumClient against ``httpx.MockTransport`` without
touching the network, the home directory or the environment.

Example:
    ```python
    from tutum_client.testing import create_test_client, json_routes, make_page

    client, transport = create_test_client(
        json_routes({"https://tutum.test/api/v1/stack/": make_page([{"name": "web"}])})
    )
    assert client.collect_all("stack/") == [{"name": "web"}]
    assert len(transport.requests) == 1
    ```
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx

from tutum_client.auth.credentials import CredentialResolver, Credentials, CredentialStore
from tutum_client.client import TutumClient

TEST_BASE_URL = "https://tutum.test/api/v1/"

Handler = Callable[[httpx.Request], httpx.Response]


def mock_credentials(user: str = "test-user", apikey: str = "test-apikey") -> Credentials:
    return Credentials(user=user, apikey=apikey)


def make_page(objects: list[Any], next_page: str = "", **meta: Any) -> dict[str, Any]:
    """Build a list envelope as returned by Tutum list endpoints."""
    return {"objects": objects, "meta": {"next": next_page, **meta}}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handles, in order."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def json_routes(routes: dict[str, Any], status_code: int = 200) -> Handler:
    """Serve a JSON payload per full URL; unknown URLs get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url not in routes:
            return httpx.Response(404, json={"error": f"No route for {url}"})
        return httpx.Response(status_code, content=json.dumps(routes[url]).encode())

    return handler


def create_test_client(
    handler: Handler,
    *,
    base_url: str | None = TEST_BASE_URL,
    credentials: Credentials | None = None,
    authenticated: bool = True,
    config_path: str | Path | None = None,
) -> tuple[TutumClient, RecordingTransport]:
    """Create a client wired to a recording mock transport.

    Args:
        handler: Produces the response for each request.
        base_url: Base URL of the client.
        credentials: Preloaded credentials; ``mock_credentials()`` by default.
        authenticated: When False the store starts empty and credentials are
            resolved from ``config_path`` and the environment.
        config_path: Configuration file for resolution; a path that does not
            exist keeps resolution on the environment.
    """
    transport = RecordingTransport(handler)
    if authenticated:
        store = CredentialStore(credentials or mock_credentials())
    else:
        store = CredentialStore()
    resolver = CredentialResolver(
        config_path=config_path if config_path is not None else Path("/nonexistent/.tutum"),
        load_dotenv=False,
    )
    client = TutumClient(base_url, store=store, resolver=resolver, transport=transport)
    return client, transport


__all__ = [
    "TEST_BASE_URL",
    "RecordingTransport",
    "create_test_client",
    "json_routes",
    "make_page",
    "mock_credentials",
]
