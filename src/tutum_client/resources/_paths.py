"""Path helpers shared by resource operations."""

from tutum_client.client import TutumClient
from tutum_client.transport.pagination import relative_path


def detail_path(client: TutumClient, collection: str, uuid_or_uri: str) -> str:
    """Path of a single resource, from its UUID or its ``resource_uri``.

    ``detail_path(client, "stack", "abc")`` gives ``"stack/abc/"``; a value
    starting with ``/`` such as ``"/api/v1/stack/abc/"`` is taken as a
    resource URI and made relative to the client's base URL.
    """
    if not uuid_or_uri:
        raise ValueError(f"A {collection} UUID or resource URI is required")
    if uuid_or_uri.startswith("/"):
        return relative_path(uuid_or_uri, client.base_url)
    return f"{collection}/{uuid_or_uri}/"
