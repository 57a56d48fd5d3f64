import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from realtime_relay.config.settings import RelaySettings
from realtime_relay.main import create_app


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def settings():
    """Settings with a server default key and one wildcard origin."""
    return RelaySettings(
        openai_api_key="server-key",
        allowed_origins="http://localhost:4200, https://realtime-voice-assistant-*.vercel.app",
    )


@pytest.fixture
def keyless_settings():
    """Settings without a server default key."""
    return RelaySettings(openai_api_key="")


@pytest.fixture
def test_client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def fake_response():
    """Factory for stand-ins of ``requests.Response``."""

    def make_response(status_code=200, body=b'{"client_secret": {"value": "ek_123"}}',
                      content_type="application/json"):
        response = MagicMock()
        response.status_code = status_code
        response.content = body
        response.text = body.decode("utf-8")
        response.headers = {"Content-Type": content_type}
        return response

    return make_response
