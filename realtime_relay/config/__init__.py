"""
Configuration module for the realtime token relay.

This module provides centralized configuration management for the relay,
including constants, logging setup, environment-based settings and the CORS
policy derived from them.

Key components:
- constants: Provider endpoints, session defaults and the voice-activity-detection
  ranges enforced when normalizing caller parameters.
- logging_config: Console and rotating file logging for the relay logger.
- settings: The immutable ``RelaySettings`` object built once at startup.
- cors: Translation of comma-separated origin patterns into CORS middleware options.

Usage examples:
```python
from realtime_relay.config.settings import RelaySettings
from realtime_relay.config.cors import build_cors_options

settings = RelaySettings.from_env()
options = build_cors_options(settings.allowed_origin_patterns)
```
"""

# Config module initialization
