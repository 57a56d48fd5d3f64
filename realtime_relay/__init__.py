"""
Realtime Token Relay - browser to OpenAI Realtime API session broker

This application lets a browser client start an OpenAI Realtime session without
holding a long-lived API key. The browser asks the relay for an ephemeral session;
the relay resolves which key to use, normalizes the voice-activity-detection
settings, calls OpenAI's session endpoint and hands OpenAI's answer back verbatim.

Architecture Overview:
- FastAPI server exposing two JSON endpoints under /api
- Static CORS policy built from comma-separated origin patterns
- Synchronous outbound calls to OpenAI through ``requests`` with explicit timeouts
- No state beyond the settings read once at startup

Key Components:
- config: Constants, logging setup, immutable settings and the CORS policy
- handlers: Key resolution, VAD normalization, session creation and key validation
- models: Pydantic request/response models and the OpenAI session document
- services: HTTP client for the OpenAI endpoints
- errors: Exceptions translated into 400/502 JSON responses

Getting Started:
1. Set up environment variables:
   - OPENAI_API_KEY: Server default OpenAI API key (optional if callers send their own)
   - CORS_ALLOWED_ORIGINS: Comma-separated origin patterns (default http://localhost:4200)
   - PORT: Port to run the server on (default 8080)
   - HOST: Host to bind the server to (default 0.0.0.0)
   - LOG_LEVEL: Logging level (default INFO)

2. Start the server:
   ```bash
   python run.py
   ```
"""
