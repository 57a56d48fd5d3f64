"""
Models module for the data structures exchanged by the realtime token relay.

Key components:
- relay_schemas: Pydantic models for the relay's own HTTP requests and responses
  (session request, key validation request/result, error body) and the resolved
  per-request session configuration.
- openai_schemas: Pydantic models for the session-creation document sent to OpenAI,
  plus the opaque payload type used to pass OpenAI's response through unchanged.

Usage examples:
```python
from realtime_relay.models.relay_schemas import SessionRequest

request = SessionRequest(apiKey="sk-...", threshold=0.7)
```
"""

from realtime_relay.models.openai_schemas import (
    InputAudioTranscription,
    ProviderPayload,
    RealtimeSessionPayload,
    TurnDetection,
)
from realtime_relay.models.relay_schemas import (
    EffectiveSessionConfig,
    ErrorResponse,
    SessionRequest,
    ValidateKeyRequest,
    ValidateKeyResult,
)
