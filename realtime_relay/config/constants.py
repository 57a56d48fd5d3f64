"""
Constants and configuration values used throughout the application.

This module defines constants that are used across different parts of the application,
providing a centralized location for provider endpoints, session defaults and the
voice-activity-detection ranges enforced by the relay.
"""

# Logger name used throughout the application
LOGGER_NAME = "realtime_relay"

# OpenAI endpoints
OPENAI_REALTIME_SESSIONS_URL = "https://api.openai.com/v1/realtime/sessions"
OPENAI_MODELS_URL = "https://api.openai.com/v1/models"

# Default OpenAI model for Realtime sessions
DEFAULT_REALTIME_MODEL = "gpt-4o-realtime-preview"
DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_MODALITIES = ["text"]
DEFAULT_INSTRUCTIONS = (
    "You are a helpful assistant. Respond in a natural, human-like tone with "
    "occasional short pauses (use '...' sparingly). Keep answers clear and not too long."
)

# Turn detection
TURN_DETECTION_SERVER_VAD = "server_vad"

DEFAULT_VAD_THRESHOLD = 0.5
VAD_THRESHOLD_RANGE = (0.0, 1.0)

DEFAULT_PREFIX_PADDING_MS = 300
PREFIX_PADDING_MS_RANGE = (0, 2000)

DEFAULT_SILENCE_DURATION_MS = 1000
SILENCE_DURATION_MS_RANGE = (200, 5000)

# Outbound HTTP timeouts in seconds
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0

# CORS
DEFAULT_ALLOWED_ORIGINS = "http://localhost:4200"
CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

# Error messages
ERROR_NO_API_KEY = "No API key provided."
ERROR_EMPTY_API_KEY = "API key is empty"
ERROR_INVALID_API_KEY = "Invalid API key"
