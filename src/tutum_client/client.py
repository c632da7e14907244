"""Client for the Tutum REST API."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import httpx

from tutum_client.auth.credentials import CredentialResolver, CredentialStore, default_store
from tutum_client.transport.executor import CallDescriptor, CallExecutor
from tutum_client.transport.pagination import PaginatedCollector

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://app.tutum.co/api/v1/"
BASE_URL_ENV_VAR = "TUTUM_BASE_URL"


class TutumClient:
    """Entry point for Tutum API calls.

    Owns an ``httpx.Client`` and exposes the two primitives resource
    operations are built on: ``execute`` for a single call and
    ``collect_all`` for paginated lists.

    The base URL is resolved once, when the client is created: explicit
    argument, then ``TUTUM_BASE_URL``, then the public endpoint.

    Credentials live in a CredentialStore. By default every client shares
    the process-wide ``default_store``, so the configuration file and the
    environment are read at most once per process. Pass your own store to
    isolate a client.

    Example:
        ```python
        from tutum_client import CallDescriptor, TutumClient

        with TutumClient() as client:
            raw = client.execute(CallDescriptor("stack/"))
            stacks = client.collect_all("stack/")
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        store: CredentialStore | None = None,
        resolver: CredentialResolver | None = None,
        config_path: str | Path | None = None,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; every request path is appended to it.
            store: Credential store; defaults to the process-wide store.
            resolver: Credential resolver; a default one (reading
                ``config_path`` and loading .env) is built when omitted.
            config_path: Configuration file for the default resolver.
            timeout: Default timeout for every call. None (the default)
                means calls are never cut short.
            transport: Custom httpx transport, e.g. ``httpx.MockTransport``.
        """
        self._resolver = resolver or CredentialResolver(config_path=config_path)
        self._store = store if store is not None else default_store
        self._base_url = self._resolver.resolve(
            value=base_url,
            env_var_name=BASE_URL_ENV_VAR,
            default=DEFAULT_BASE_URL,
        )
        # Redirects are followed; the status check applies to the final response
        self._http_client = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)
        self._executor = CallExecutor(
            http_client=self._http_client,
            base_url=self._base_url,
            store=self._store,
            resolver=self._resolver,
        )
        self._collector = PaginatedCollector(self._executor)
        logger.debug(f"Tutum client created for {self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def store(self) -> CredentialStore:
        return self._store

    @property
    def is_authenticated(self) -> bool:
        """Whether credentials are already loaded; performs no resolution."""
        return self._store.is_authenticated

    def execute(self, descriptor: CallDescriptor, *, timeout: Any = httpx.USE_CLIENT_DEFAULT) -> bytes:
        """Send one authenticated call and return the raw 200 body.

        See CallExecutor.execute for the errors raised.
        """
        return self._executor.execute(descriptor, timeout=timeout)

    def collect_all(
        self,
        start_path: str,
        method: str = "GET",
        body: bytes | None = None,
        *,
        item: Callable[[Any], T] | None = None,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> list[T]:
        """Fetch every page of a list endpoint and return all objects in order.

        See PaginatedCollector.collect_all for details.
        """
        return self._collector.collect_all(start_path, method, body, item=item, timeout=timeout)

    def close(self) -> None:
        self._http_client.close()

    def __enter__(self) -> "TutumClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
