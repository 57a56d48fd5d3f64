"""
HTTP client for the two OpenAI endpoints the relay depends on.

This module wraps ``requests`` calls to the Realtime session-creation endpoint and
the model-listing endpoint. Every call carries the caller's key as a Bearer token
and the configured (connect, read) timeout. Nothing is retried.
"""

import logging
from typing import Tuple

import requests

from realtime_relay.config.constants import (
    LOGGER_NAME,
    OPENAI_MODELS_URL,
    OPENAI_REALTIME_SESSIONS_URL,
)
from realtime_relay.errors import UpstreamError
from realtime_relay.models.openai_schemas import ProviderPayload, RealtimeSessionPayload

logger = logging.getLogger(LOGGER_NAME)


class OpenAIClient:
    """
    Thin synchronous client for OpenAI's REST API.

    Args:
        timeout: (connect, read) timeout in seconds
        sessions_url: Realtime session-creation endpoint
        models_url: Model-listing endpoint
    """

    def __init__(
        self,
        timeout: Tuple[float, float],
        sessions_url: str = OPENAI_REALTIME_SESSIONS_URL,
        models_url: str = OPENAI_MODELS_URL,
    ):
        self.timeout = timeout
        self.sessions_url = sessions_url
        self.models_url = models_url

    @staticmethod
    def _auth_headers(api_key: str) -> dict:
        return {"Authorization": f"Bearer {api_key}"}

    def create_session(self, api_key: str, payload: RealtimeSessionPayload) -> ProviderPayload:
        """
        Create an ephemeral Realtime session.

        Args:
            api_key: Key used as the Bearer token
            payload: Session document to send

        Returns:
            ProviderPayload: OpenAI's response body, unparsed

        Raises:
            UpstreamError: On transport failure or a non-2xx status
        """
        headers = self._auth_headers(api_key)
        headers["Content-Type"] = "application/json"
        body = payload.model_dump_json()

        logger.debug(f"POST {self.sessions_url} model={payload.model}")
        try:
            response = requests.post(
                self.sessions_url,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except (requests.RequestException, ValueError) as e:
            # ValueError covers keys http.client cannot encode into a header
            logger.error(f"Session request to OpenAI failed: {e}")
            raise UpstreamError(f"Failed to reach OpenAI: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"OpenAI session endpoint returned {response.status_code}")
            raise UpstreamError(
                f"OpenAI error {response.status_code}: {response.text}",
                upstream_status=response.status_code,
            )

        return ProviderPayload(
            content=response.content,
            media_type=response.headers.get("Content-Type", "application/json"),
        )

    def list_models_status(self, api_key: str) -> int:
        """
        Call the model-listing endpoint and return its HTTP status code.

        Raises:
            requests.RequestException: On transport failure
        """
        response = requests.get(
            self.models_url,
            headers=self._auth_headers(api_key),
            timeout=self.timeout,
        )
        return response.status_code
