"""Pytest configuration and shared fixtures for tutum-client tests."""

import pytest

from tutum_client.testing import TEST_BASE_URL, mock_credentials


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Tutum environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("TUTUM_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def credentials():
    return mock_credentials()


@pytest.fixture
def base_url():
    return TEST_BASE_URL


@pytest.fixture
def missing_config(tmp_path):
    """Path of a configuration file that does not exist."""
    return tmp_path / ".tutum"


@pytest.fixture
def write_config(tmp_path):
    """Write a ~/.tutum style file into tmp_path and return its path."""

    def _write(content: str):
        path = tmp_path / ".tutum"
        path.write_text(content)
        return path

    return _write
