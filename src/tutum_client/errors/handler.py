"""Error handling utilities for HTTP responses."""

import httpx

from tutum_client.errors.exceptions import (
    ClientError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    UnexpectedStatusError,
)

# The only status the Tutum API uses for a successful call.
SUCCESS_STATUS = 200


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching exception unless the response is 200 OK.

    Success is a single status code, not a range: 201, 202 and 204 raise
    UnexpectedStatusError like any other unexpected code.

    The response body is only used for the message when it has already
    been read.

    Args:
        response: HTTP response object

    Raises:
        UnexpectedStatusError subclass based on status code
    """
    status_code = response.status_code
    if status_code == SUCCESS_STATUS:
        return

    exception_map = {
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
    }

    # Determine exception class
    if status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = UnexpectedStatusError

    # Build error message
    message = f"Failed API call: {status_code} {response.reason_phrase}".rstrip()
    response_text = _body_excerpt(response)
    if response_text:
        message = f"{message}: {response_text}"

    raise exc_class(message, status_code=status_code, response=response)


def _body_excerpt(response: httpx.Response, limit: int = 200) -> str:
    try:
        return response.text[:limit]
    except httpx.ResponseNotRead:
        return ""
