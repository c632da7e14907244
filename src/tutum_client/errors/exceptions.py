"""Structured exceptions for Tutum API calls."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class APIError(Exception):
    """Base exception for API call errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class UnauthenticatedError(APIError):
    """No credentials were available; the request was never sent."""

    pass


class TransportError(APIError):
    """DNS, connection, TLS or protocol failure before a response arrived."""

    pass


class CallTimeoutError(TransportError):
    """The call did not complete within its timeout."""

    pass


class UnexpectedStatusError(APIError):
    """The API answered with anything other than 200 OK.

    This includes other 2xx codes such as 201 Created.
    """

    def __init__(self, message: str, status_code: int, **kwargs):
        super().__init__(message, status_code=status_code, **kwargs)


class ClientError(UnexpectedStatusError):
    """4xx client errors."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ServerError(UnexpectedStatusError):
    """5xx server errors."""

    pass


class BodyReadError(APIError):
    """The status was 200 but the response body could not be read."""

    pass


class DecodeError(APIError):
    """A response body did not match the expected JSON shape."""

    def __init__(self, message: str, field: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
