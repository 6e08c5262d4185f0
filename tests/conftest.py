"""Fixtures for the Welcome API test suite."""

import pytest

from welcome_api import create_app


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the outer shell out of the tests."""
    for name in ("PORT", "HOST", "LOG_LEVEL", "FLASK_CONFIG"):
        # setenv first so teardown also removes values a test's .env loaded.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def app():
    """Application configured for testing."""
    return create_app("testing")


@pytest.fixture
def client(app):
    """Test client bound to the testing application."""
    return app.test_client()
