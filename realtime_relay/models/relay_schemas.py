"""
Pydantic models for the relay's HTTP surface.

Incoming bodies use the camelCase keys the browser client sends. Field types are
validated by pydantic; value ranges are not, because out-of-range VAD parameters
are replaced by defaults rather than rejected.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionRequest(BaseModel):
    """Body of ``POST /api/realtime-token``."""

    apiKey: Optional[str] = Field(None, description="Caller-supplied OpenAI API key")
    threshold: Optional[float] = Field(None, description="VAD activation threshold")
    prefixPaddingMs: Optional[int] = Field(
        None, description="Audio kept before detected speech, in milliseconds"
    )
    silenceDurationMs: Optional[int] = Field(
        None, description="Silence that ends a turn, in milliseconds"
    )


class EffectiveSessionConfig(BaseModel):
    """Resolved key and normalized VAD parameters for one session request."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., repr=False)
    threshold: float
    prefix_padding_ms: int
    silence_duration_ms: int


class ValidateKeyRequest(BaseModel):
    """Body of ``POST /api/validate-key``."""

    apiKey: Optional[str] = Field(None, description="OpenAI API key to check")


class ValidateKeyResult(BaseModel):
    """Outcome of a key check; ``error`` is only set when ``valid`` is false."""

    valid: bool
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """JSON error body for 400 and 502 responses."""

    error: str
