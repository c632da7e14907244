"""The authenticated call primitive every Tutum API operation goes through.

A call is described by a CallDescriptor (path relative to the base URL,
HTTP method and optional body). CallExecutor signs it with the stored
credentials, sends it, and returns the raw body of a 200 response.

```python
from tutum_client.transport.executor import CallDescriptor

body = executor.execute(CallDescriptor("stack/"))
```

Nothing is retried and nothing is decoded at this layer.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from tutum_client.auth.credentials import CredentialResolver, Credentials, CredentialStore
from tutum_client.auth.exceptions import CredentialNotFoundError
from tutum_client.errors.exceptions import BodyReadError, CallTimeoutError, TransportError, UnauthenticatedError
from tutum_client.errors.handler import SUCCESS_STATUS, raise_for_status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallDescriptor:
    """Everything needed to send one request, before authentication.

    Attributes:
        path: Path relative to the base URL, e.g. ``"stack/<uuid>/start/"``.
        method: HTTP method, upper-cased on construction.
        body: Request body sent verbatim; ``str`` is encoded as UTF-8.
    """

    path: str
    method: str = "GET"
    body: bytes | None = None

    def __post_init__(self):
        object.__setattr__(self, "method", self.method.upper())
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))


class CallExecutor:
    """Send authenticated requests against a fixed base URL.

    Args:
        http_client: The httpx client used to send requests. The executor
            does not own it and never closes it.
        base_url: Prefix every descriptor path is appended to.
        store: Holds (or will hold) the credentials.
        resolver: Consulted by ``store`` when it is still empty.

    Example:
        ```python
        with httpx.Client(timeout=None) as http_client:
            executor = CallExecutor(
                http_client=http_client,
                base_url="https://app.tutum.co/api/v1/",
                store=CredentialStore(),
                resolver=CredentialResolver(),
            )
            data = executor.execute(CallDescriptor("stack/"))
        ```
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client,
        base_url: str,
        store: CredentialStore,
        resolver: CredentialResolver,
    ) -> None:
        self._http_client = http_client
        self._base_url = base_url
        self._store = store
        self._resolver = resolver

    @property
    def base_url(self) -> str:
        return self._base_url

    def _credentials(self) -> Credentials:
        try:
            return self._store.resolve(self._resolver)
        except CredentialNotFoundError as e:
            raise UnauthenticatedError(str(e)) from e

    def execute(self, descriptor: CallDescriptor, *, timeout: Any = httpx.USE_CLIENT_DEFAULT) -> bytes:
        """Send one request and return the body of its 200 response.

        Args:
            descriptor: What to send.
            timeout: Seconds, an ``httpx.Timeout``, or None for no limit.
                Defaults to the http client's setting.

        Returns:
            The complete response body, undecoded.

        Raises:
            UnauthenticatedError: No credentials; nothing was sent.
            ConfigMalformedError: The configuration file is broken.
            TransportError: The request could not be sent or answered.
            CallTimeoutError: The timeout expired.
            UnexpectedStatusError: The status was anything but 200.
            BodyReadError: The body of a 200 response could not be read.
        """
        credentials = self._credentials()

        url = self._base_url + descriptor.path
        request = self._http_client.build_request(
            descriptor.method,
            url,
            content=descriptor.body,
            headers={
                "Authorization": credentials.authorization_header,
                "Accept": "application/json",
            },
            timeout=timeout,
        )
        logger.debug(f"Sending {request.method} {request.url}")

        try:
            response = self._http_client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise CallTimeoutError(f"Request {request.method} {request.url} timed out: {e}") from e
        except httpx.TransportError as e:
            raise TransportError(f"Request {request.method} {request.url} failed: {e}") from e

        try:
            if response.status_code != SUCCESS_STATUS:
                self._read_error_body(response)
                logger.debug(f"Request {request.method} {request.url} returned {response.status_code}")
                raise_for_status(response)

            try:
                return response.read()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise BodyReadError(
                    f"Failed reading response body of {request.method} {request.url}: {e}",
                    status_code=response.status_code,
                    response=response,
                ) from e
        finally:
            response.close()

    @staticmethod
    def _read_error_body(response: httpx.Response) -> None:
        """Load the body of a failed response so the error can quote it."""
        try:
            response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.warning(f"Could not read body of {response.status_code} response: {e}")
