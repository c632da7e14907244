"""Tutum Client - Python client for the Tutum container orchestration API.

This library provides:
- Credential resolution from ~/.tutum or TUTUM_USER/TUTUM_APIKEY
- A single authenticated call primitive with strict status handling
- Transparent pagination for list endpoints
- Typed stack and volume group operations

Example:
    ```python
    from tutum_client import TutumClient
    from tutum_client.resources import stacks

    with TutumClient() as client:
        for stack in stacks.list_stacks(client):
            print(stack.name, stack.state)
    ```
"""

from tutum_client.auth import (
    ConfigMalformedError,
    CredentialError,
    CredentialNotFoundError,
    CredentialResolver,
    Credentials,
    CredentialStore,
    default_store,
)
from tutum_client.client import DEFAULT_BASE_URL, TutumClient
from tutum_client.errors import (
    APIError,
    BodyReadError,
    CallTimeoutError,
    DecodeError,
    TransportError,
    UnauthenticatedError,
    UnexpectedStatusError,
)
from tutum_client.models import ListMeta, PaginatedResponse
from tutum_client.transport import CallDescriptor

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "BodyReadError",
    "CallDescriptor",
    "CallTimeoutError",
    "ConfigMalformedError",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "CredentialStore",
    "Credentials",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "ListMeta",
    "PaginatedResponse",
    "TransportError",
    "TutumClient",
    "UnauthenticatedError",
    "UnexpectedStatusError",
    "__version__",
    "default_store",
]
