"""
Immutable runtime settings for the relay.

Settings are read from the environment once at startup and handed to the
request handlers through the FastAPI application state, so no handler reads
``os.environ`` directly.
"""

import os
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from realtime_relay.config.constants import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_REALTIME_MODEL,
)


class RelaySettings(BaseModel):
    """Configuration shared by every request; never mutated after startup."""

    model_config = ConfigDict(frozen=True)

    openai_api_key: str = Field("", description="Server default OpenAI API key")
    allowed_origins: str = Field(
        DEFAULT_ALLOWED_ORIGINS, description="Comma-separated CORS origin patterns"
    )
    realtime_model: str = Field(DEFAULT_REALTIME_MODEL, description="Realtime session model")
    connect_timeout: float = Field(DEFAULT_CONNECT_TIMEOUT, gt=0)
    read_timeout: float = Field(DEFAULT_READ_TIMEOUT, gt=0)

    @property
    def allowed_origin_patterns(self) -> List[str]:
        """Trimmed, non-empty origin patterns."""
        return [p.strip() for p in self.allowed_origins.split(",") if p.strip()]

    @property
    def has_server_key(self) -> bool:
        return bool(self.openai_api_key.strip())

    @property
    def timeout(self) -> tuple:
        """(connect, read) pair in the form ``requests`` expects."""
        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "RelaySettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``

        Returns:
            RelaySettings: The frozen settings instance

        Raises:
            pydantic.ValidationError: If a timeout is not a positive number
        """
        env = os.environ if environ is None else environ
        return cls(
            openai_api_key=env.get("OPENAI_API_KEY", ""),
            allowed_origins=env.get("CORS_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS),
            realtime_model=env.get("OPENAI_REALTIME_MODEL", DEFAULT_REALTIME_MODEL),
            connect_timeout=env.get("OPENAI_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            read_timeout=env.get("OPENAI_READ_TIMEOUT", DEFAULT_READ_TIMEOUT),
        )
