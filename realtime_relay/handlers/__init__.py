"""
Handlers module for the realtime token relay.

Key components:
- session_handlers: Key resolution, VAD parameter normalization, session document
  construction, ephemeral session creation and API key validation. These functions
  know nothing about HTTP routing; the FastAPI routes in ``realtime_relay.main``
  call them with the request body, the startup settings and an OpenAI client.

Usage examples:
```python
from realtime_relay.config.settings import RelaySettings
from realtime_relay.handlers import session_handlers
from realtime_relay.models.relay_schemas import SessionRequest
from realtime_relay.services.openai_client import OpenAIClient

settings = RelaySettings.from_env()
client = OpenAIClient(timeout=settings.timeout)

payload = session_handlers.create_ephemeral_session(
    SessionRequest(threshold=0.6), settings, client
)
result = session_handlers.validate_key("sk-...", client)
```
"""

# Handlers module initialization
