"""
Session relay handlers.

This module holds the relay's request logic, independent of the HTTP framework:
resolving which API key to use, normalizing voice-activity-detection parameters,
building the session document, creating ephemeral sessions and validating keys.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from realtime_relay.config.constants import (
    DEFAULT_PREFIX_PADDING_MS,
    DEFAULT_SILENCE_DURATION_MS,
    DEFAULT_VAD_THRESHOLD,
    ERROR_EMPTY_API_KEY,
    ERROR_INVALID_API_KEY,
    LOGGER_NAME,
    PREFIX_PADDING_MS_RANGE,
    SILENCE_DURATION_MS_RANGE,
    VAD_THRESHOLD_RANGE,
)
from realtime_relay.config.settings import RelaySettings
from realtime_relay.errors import NoKeyAvailableError
from realtime_relay.models.openai_schemas import (
    ProviderPayload,
    RealtimeSessionPayload,
    TurnDetection,
)
from realtime_relay.models.relay_schemas import (
    EffectiveSessionConfig,
    SessionRequest,
    ValidateKeyResult,
)
from realtime_relay.services.openai_client import OpenAIClient

logger = logging.getLogger(LOGGER_NAME)


def resolve_effective_key(request_key: Optional[str], server_key: Optional[str]) -> str:
    """
    Pick the API key for a request.

    The caller's key wins when it is non-blank; otherwise the server default is used.

    Args:
        request_key: Key sent by the caller, possibly missing or blank
        server_key: Key configured on the server, possibly missing or blank

    Returns:
        The trimmed key to use

    Raises:
        NoKeyAvailableError: If both keys are missing or blank
    """
    candidate = (request_key or "").strip()
    if candidate:
        logger.debug("Using caller-supplied API key")
        return candidate

    fallback = (server_key or "").strip()
    if fallback:
        logger.debug("Using server default API key")
        return fallback

    raise NoKeyAvailableError()


def _in_range(value, bounds: Tuple[Any, Any], default):
    low, high = bounds
    if value is None or not low <= value <= high:
        return default
    return value


def normalize_vad_params(
    threshold: Optional[float] = None,
    prefix_padding_ms: Optional[int] = None,
    silence_duration_ms: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Apply defaults to VAD parameters.

    Missing values and values outside their inclusive range are both replaced by
    the default; nothing is rejected.

    Returns:
        dict with ``threshold``, ``prefix_padding_ms`` and ``silence_duration_ms``
    """
    return {
        "threshold": _in_range(threshold, VAD_THRESHOLD_RANGE, DEFAULT_VAD_THRESHOLD),
        "prefix_padding_ms": _in_range(
            prefix_padding_ms, PREFIX_PADDING_MS_RANGE, DEFAULT_PREFIX_PADDING_MS
        ),
        "silence_duration_ms": _in_range(
            silence_duration_ms, SILENCE_DURATION_MS_RANGE, DEFAULT_SILENCE_DURATION_MS
        ),
    }


def build_effective_config(
    request: SessionRequest, settings: RelaySettings
) -> EffectiveSessionConfig:
    """Resolve the key and normalize the VAD parameters of a session request."""
    api_key = resolve_effective_key(request.apiKey, settings.openai_api_key)
    vad = normalize_vad_params(
        request.threshold, request.prefixPaddingMs, request.silenceDurationMs
    )
    return EffectiveSessionConfig(api_key=api_key, **vad)


def build_session_payload(config: EffectiveSessionConfig, model: str) -> RealtimeSessionPayload:
    """Build the fixed-shape session document for OpenAI."""
    return RealtimeSessionPayload(
        model=model,
        turn_detection=TurnDetection(
            threshold=config.threshold,
            prefix_padding_ms=config.prefix_padding_ms,
            silence_duration_ms=config.silence_duration_ms,
        ),
    )


def create_ephemeral_session(
    request: SessionRequest,
    settings: RelaySettings,
    client: OpenAIClient,
) -> ProviderPayload:
    """
    Create an ephemeral Realtime session on behalf of the caller.

    Args:
        request: Caller's key and VAD parameters
        settings: Server configuration
        client: OpenAI client used for the outbound call

    Returns:
        ProviderPayload: OpenAI's session JSON, untouched

    Raises:
        NoKeyAvailableError: If no key is available
        UpstreamError: If OpenAI fails or cannot be reached
    """
    config = build_effective_config(request, settings)
    payload = build_session_payload(config, settings.realtime_model)
    logger.info(
        f"Creating realtime session: threshold={config.threshold} "
        f"prefix_padding_ms={config.prefix_padding_ms} "
        f"silence_duration_ms={config.silence_duration_ms}"
    )
    result = client.create_session(config.api_key, payload)
    logger.info("Realtime session created")
    return result


def validate_key(api_key: Optional[str], client: OpenAIClient) -> ValidateKeyResult:
    """
    Check whether OpenAI accepts an API key.

    Every failure is reported in the returned result; this function does not raise.

    Args:
        api_key: Key to check
        client: OpenAI client used for the outbound call

    Returns:
        ValidateKeyResult: ``valid`` plus an ``error`` message when invalid
    """
    key = (api_key or "").strip()
    if not key:
        return ValidateKeyResult(valid=False, error=ERROR_EMPTY_API_KEY)

    try:
        status = client.list_models_status(key)
    except Exception as e:
        logger.warning(f"Key validation could not reach OpenAI: {e}")
        return ValidateKeyResult(valid=False, error=f"Connection error: {e}")

    if status == 200:
        return ValidateKeyResult(valid=True)
    if status == 401:
        return ValidateKeyResult(valid=False, error=ERROR_INVALID_API_KEY)

    logger.warning(f"Key validation got unexpected status {status}")
    return ValidateKeyResult(valid=False, error=f"OpenAI returned status {status}")
