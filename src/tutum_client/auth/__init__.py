"""Authentication components for the Tutum API client.

This module provides:
- Credential resolution (~/.tutum → TUTUM_USER/TUTUM_APIKEY)
- A write-once credential store shared by clients
- The ``ApiKey <user>:<apikey>`` authorization header

Example:
    ```python
    from tutum_client.auth import CredentialResolver, CredentialStore

    store = CredentialStore()
    credentials = store.resolve(CredentialResolver())
    headers = {"Authorization": credentials.authorization_header}
    ```
"""

from tutum_client.auth.credentials import (
    APIKEY_ENV_VAR,
    CONFIG_FILE_NAME,
    USER_ENV_VAR,
    CredentialResolver,
    Credentials,
    CredentialStore,
    default_store,
)
from tutum_client.auth.exceptions import (
    ConfigMalformedError,
    CredentialError,
    CredentialNotFoundError,
)

__all__ = [
    "APIKEY_ENV_VAR",
    "CONFIG_FILE_NAME",
    "USER_ENV_VAR",
    "ConfigMalformedError",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "CredentialStore",
    "Credentials",
    "default_store",
]
