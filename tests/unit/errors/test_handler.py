"""Tests for error handling utilities."""

import pytest
from httpx import Response

from tutum_client.errors.exceptions import (
    ClientError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from tutum_client.errors.handler import raise_for_status


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for 200."""
    response = Response(status_code=200)

    # Should not raise
    raise_for_status(response)


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [201, 202, 204])
def test_raise_for_status_other_2xx_is_failure(status_code):
    """Test that only 200 counts as success."""
    response = Response(status_code=status_code)

    with pytest.raises(UnexpectedStatusError) as exc_info:
        raise_for_status(response)

    assert type(exc_info.value) is UnexpectedStatusError
    assert exc_info.value.status_code == status_code


@pytest.mark.unit
def test_raise_for_status_401_unauthorized():
    response = Response(status_code=401, text="Unauthorized")

    with pytest.raises(UnauthorizedError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 401
    assert exc_info.value.response == response


@pytest.mark.unit
def test_raise_for_status_403_forbidden():
    with pytest.raises(ForbiddenError):
        raise_for_status(Response(status_code=403))


@pytest.mark.unit
def test_raise_for_status_404_not_found():
    response = Response(status_code=404, text="Not found")

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 404


@pytest.mark.unit
def test_raise_for_status_other_4xx():
    """Test unmapped 4xx codes raise ClientError."""
    with pytest.raises(ClientError) as exc_info:
        raise_for_status(Response(status_code=418))

    assert exc_info.value.status_code == 418


@pytest.mark.unit
def test_raise_for_status_5xx():
    with pytest.raises(ServerError) as exc_info:
        raise_for_status(Response(status_code=503))

    assert exc_info.value.status_code == 503


@pytest.mark.unit
def test_raise_for_status_3xx():
    with pytest.raises(UnexpectedStatusError) as exc_info:
        raise_for_status(Response(status_code=302))

    assert not isinstance(exc_info.value, (ClientError, ServerError))


@pytest.mark.unit
def test_message_includes_status_and_body():
    response = Response(status_code=400, text='{"error": "name is required"}')

    with pytest.raises(ClientError) as exc_info:
        raise_for_status(response)

    message = str(exc_info.value)
    assert "400 Bad Request" in message
    assert "name is required" in message


@pytest.mark.unit
def test_message_truncates_long_body():
    response = Response(status_code=500, text="x" * 1000)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value).count("x") == 200
