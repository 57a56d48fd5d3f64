"""
Services module for external API integrations in the realtime token relay.

Key components:
- openai_client: Synchronous ``requests`` client for OpenAI's Realtime session
  endpoint and model-listing endpoint, with explicit timeouts and translation of
  failures into ``UpstreamError``.

Usage examples:
```python
from realtime_relay.services.openai_client import OpenAIClient

client = OpenAIClient(timeout=(10.0, 30.0))
status = client.list_models_status("sk-...")
```
"""

# Services module initialization
