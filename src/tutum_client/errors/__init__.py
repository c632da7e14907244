"""Error handling for Tutum API calls."""

from tutum_client.errors.exceptions import (
    APIError,
    BodyReadError,
    CallTimeoutError,
    ClientError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthenticatedError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from tutum_client.errors.handler import SUCCESS_STATUS, raise_for_status

__all__ = [
    "APIError",
    "BodyReadError",
    "CallTimeoutError",
    "ClientError",
    "DecodeError",
    "ForbiddenError",
    "NotFoundError",
    "SUCCESS_STATUS",
    "ServerError",
    "TransportError",
    "UnauthenticatedError",
    "UnauthorizedError",
    "UnexpectedStatusError",
    "raise_for_status",
]
