"""
Pydantic models for the OpenAI Realtime session-creation request.

This module provides type-safe models for the JSON document the relay sends to
the session endpoint. Provider responses are deliberately not modelled: they are
carried back to the caller as an opaque ``ProviderPayload``.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from realtime_relay.config.constants import (
    DEFAULT_INSTRUCTIONS,
    DEFAULT_MODALITIES,
    DEFAULT_REALTIME_MODEL,
    DEFAULT_TRANSCRIPTION_MODEL,
    TURN_DETECTION_SERVER_VAD,
)


class TurnDetection(BaseModel):
    """Server-side voice activity detection settings."""
    type: Literal["server_vad"] = TURN_DETECTION_SERVER_VAD
    threshold: float
    prefix_padding_ms: int
    silence_duration_ms: int
    create_response: bool = False


class InputAudioTranscription(BaseModel):
    """Transcription model applied to the caller's audio."""
    model: str = DEFAULT_TRANSCRIPTION_MODEL


class RealtimeSessionPayload(BaseModel):
    """Body of ``POST /v1/realtime/sessions``."""
    model: str = DEFAULT_REALTIME_MODEL
    turn_detection: TurnDetection
    input_audio_transcription: InputAudioTranscription = Field(
        default_factory=InputAudioTranscription
    )
    instructions: str = DEFAULT_INSTRUCTIONS
    modalities: List[str] = Field(default_factory=lambda: list(DEFAULT_MODALITIES))


class ProviderPayload(BaseModel):
    """Raw response body returned by OpenAI, passed through untouched."""

    model_config = ConfigDict(frozen=True)

    content: bytes
    media_type: str = "application/json"
