import json
from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from realtime_relay.config.settings import RelaySettings
from realtime_relay.main import app, create_app


def test_health_check(test_client):
    """Test the health check endpoint returns correct response"""
    response = test_client.get("/health")
    assert response.status_code == 200

    response_json = response.json()
    assert response_json["status"] == "healthy"
    assert response_json["openai_api_key_configured"] is True


def test_health_check_without_server_key(keyless_settings):
    client = TestClient(create_app(keyless_settings))
    assert client.get("/health").json()["openai_api_key_configured"] is False


def test_root_endpoint(test_client):
    """Test the root endpoint returns the correct API information"""
    response = test_client.get("/")
    assert response.status_code == 200

    response_json = response.json()
    assert response_json["name"] == "Realtime Token Relay"
    assert response_json["version"] == "1.0.0"
    assert "/api/realtime-token" in response_json["endpoints"]
    assert "/api/validate-key" in response_json["endpoints"]
    assert "/health" in response_json["endpoints"]


def test_app_startup_configuration():
    """Test the module-level app configuration"""
    assert app.title == "Realtime Token Relay"
    assert isinstance(app.state.settings, RelaySettings)

    route_paths = [route.path for route in app.routes]
    assert "/api/realtime-token" in route_paths
    assert "/api/validate-key" in route_paths
    assert "/health" in route_paths
    assert "/" in route_paths


class TestRealtimeToken:
    """Tests for POST /api/realtime-token"""

    def test_end_to_end_outbound_request(self, test_client, fake_response):
        raw = b'{"id":"sess_1","client_secret":{"value":"ek_abc","expires_at":1}}'
        with patch("requests.post", return_value=fake_response(200, raw)) as mock_post:
            response = test_client.post(
                "/api/realtime-token",
                json={
                    "threshold": 0.9,
                    "prefixPaddingMs": 50,
                    "silenceDurationMs": 800,
                    "apiKey": "sk-test",
                },
            )

        assert response.status_code == 200
        assert response.content == raw

        kwargs = mock_post.call_args.kwargs
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        body = json.loads(kwargs["data"])
        assert body["turn_detection"]["threshold"] == 0.9
        assert body["turn_detection"]["prefix_padding_ms"] == 50
        assert body["turn_detection"]["silence_duration_ms"] == 800
        assert body["turn_detection"]["create_response"] is False
        assert body["input_audio_transcription"] == {"model": "whisper-1"}
        assert body["modalities"] == ["text"]

    def test_out_of_range_values_use_defaults(self, test_client, fake_response):
        with patch("requests.post", return_value=fake_response()) as mock_post:
            response = test_client.post(
                "/api/realtime-token",
                json={"threshold": 3, "prefixPaddingMs": 9999, "silenceDurationMs": 10},
            )

        assert response.status_code == 200
        body = json.loads(mock_post.call_args.kwargs["data"])
        assert body["turn_detection"]["threshold"] == 0.5
        assert body["turn_detection"]["prefix_padding_ms"] == 300
        assert body["turn_detection"]["silence_duration_ms"] == 1000
        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer server-key"

    def test_empty_body_uses_server_key(self, test_client, fake_response):
        with patch("requests.post", return_value=fake_response()) as mock_post:
            response = test_client.post("/api/realtime-token")

        assert response.status_code == 200
        assert response.json() == {"client_secret": {"value": "ek_123"}}
        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer server-key"

    def test_no_key_anywhere(self, keyless_settings):
        client = TestClient(create_app(keyless_settings))
        with patch("requests.post") as mock_post:
            response = client.post("/api/realtime-token", json={"apiKey": "   "})

        assert response.status_code == 400
        assert response.json() == {"error": "No API key provided."}
        mock_post.assert_not_called()

    def test_upstream_error_status(self, test_client, fake_response):
        with patch("requests.post", return_value=fake_response(500, b'{"error":"server"}')):
            response = test_client.post("/api/realtime-token", json={})

        assert response.status_code == 502
        assert "500" in response.json()["error"]

    def test_upstream_unreachable(self, test_client):
        with patch("requests.post", side_effect=requests.ConnectionError("connection refused")):
            response = test_client.post("/api/realtime-token", json={})

        assert response.status_code == 502
        assert "connection refused" in response.json()["error"]

    def test_wrong_field_type_is_rejected(self, test_client):
        with patch("requests.post") as mock_post:
            response = test_client.post("/api/realtime-token", json={"threshold": "loud"})

        assert response.status_code == 422
        mock_post.assert_not_called()

    def test_get_is_not_allowed(self, test_client):
        assert test_client.get("/api/realtime-token").status_code == 405


class TestValidateKey:
    """Tests for POST /api/validate-key"""

    def test_valid_key(self, test_client, fake_response):
        with patch("requests.get", return_value=fake_response(200, b'{"data": []}')):
            response = test_client.post("/api/validate-key", json={"apiKey": "sk-good"})

        assert response.status_code == 200
        assert response.json() == {"valid": True}

    def test_invalid_key(self, test_client, fake_response):
        with patch("requests.get", return_value=fake_response(401, b"{}")):
            response = test_client.post("/api/validate-key", json={"apiKey": "sk-bad"})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "Invalid API key"}

    def test_empty_key(self, test_client):
        with patch("requests.get") as mock_get:
            response = test_client.post("/api/validate-key", json={"apiKey": ""})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "API key is empty"}
        mock_get.assert_not_called()

    def test_connection_error(self, test_client):
        with patch("requests.get", side_effect=requests.ConnectionError("refused")):
            response = test_client.post("/api/validate-key", json={"apiKey": "sk-any"})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "Connection error: refused"}


class TestCors:
    """Tests for the CORS policy"""

    @pytest.mark.parametrize("origin", [
        "http://localhost:4200",
        "https://realtime-voice-assistant-git-main.vercel.app",
    ])
    def test_preflight_from_allowed_origin(self, test_client, origin):
        response = test_client.options(
            "/api/realtime-token",
            headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == origin
        assert "DELETE" in response.headers["access-control-allow-methods"]

    def test_policy_covers_all_paths(self, test_client):
        response = test_client.get("/health", headers={"Origin": "http://localhost:4200"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:4200"

    def test_unlisted_origin(self, test_client):
        response = test_client.get("/health", headers={"Origin": "https://evil.example.com"})
        assert "access-control-allow-origin" not in response.headers


class TestSoftValidateContract:
    """validate-key answers 200 even for missing or null keys"""

    def test_null_key(self, test_client):
        with patch("requests.get") as mock_get:
            response = test_client.post("/api/validate-key", json={"apiKey": None})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "API key is empty"}
        mock_get.assert_not_called()

    def test_missing_body(self, test_client):
        with patch("requests.get") as mock_get:
            response = test_client.post("/api/validate-key")

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "API key is empty"}
        mock_get.assert_not_called()


def test_unencodable_key_is_reported_as_upstream_error(test_client):
    encode_error = UnicodeEncodeError("latin-1", "sk-ключ", 3, 7, "ordinal not in range(256)")
    with patch("requests.post", side_effect=encode_error):
        response = test_client.post("/api/realtime-token", json={"apiKey": "sk-ключ"})

    assert response.status_code == 502
    assert response.json()["error"].startswith("Failed to reach OpenAI:")
