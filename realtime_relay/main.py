"""
FastAPI server for the realtime token relay.

This module initializes and configures the FastAPI application that sits between a
browser client and OpenAI's Realtime API. The browser asks the relay for an
ephemeral session token so that the long-lived API key never leaves the server
(or, when the user brings their own key, is only used server-side to mint the token).

Routes:
- POST /api/realtime-token: create an ephemeral Realtime session
- POST /api/validate-key: check whether OpenAI accepts a key
- GET /health and GET /: service status and information
"""

from pathlib import Path
from typing import Optional

import dotenv
from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from realtime_relay.config.cors import build_cors_options
from realtime_relay.config.logging_config import configure_logging
from realtime_relay.config.settings import RelaySettings
from realtime_relay.errors import RelayError
from realtime_relay.handlers import session_handlers
from realtime_relay.models.relay_schemas import (
    ErrorResponse,
    SessionRequest,
    ValidateKeyRequest,
    ValidateKeyResult,
)
from realtime_relay.services.openai_client import OpenAIClient

# Load environment variables from .env file if it exists
env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

# Configure logging
logger = configure_logging()

APP_TITLE = "Realtime Token Relay"
APP_DESCRIPTION = "Ephemeral session relay between a browser client and the OpenAI Realtime API"
APP_VERSION = "1.0.0"

router = APIRouter()


def get_settings(request: Request) -> RelaySettings:
    return request.app.state.settings


def get_openai_client(request: Request) -> OpenAIClient:
    return request.app.state.openai_client


@router.post(
    "/api/realtime-token",
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def realtime_token(
    body: Optional[SessionRequest] = Body(None),
    settings: RelaySettings = Depends(get_settings),
    client: OpenAIClient = Depends(get_openai_client),
):
    """Create an ephemeral Realtime session and return OpenAI's JSON unchanged.

    The browser reads ``client_secret.value`` from the response to open its own
    WebRTC connection to OpenAI.
    """
    payload = session_handlers.create_ephemeral_session(
        body or SessionRequest(), settings, client
    )
    return Response(content=payload.content, media_type=payload.media_type)


@router.post(
    "/api/validate-key",
    response_model=ValidateKeyResult,
    response_model_exclude_none=True,
)
def validate_key(
    body: Optional[ValidateKeyRequest] = Body(None),
    client: OpenAIClient = Depends(get_openai_client),
):
    """Check an API key against OpenAI. Always answers 200; see ``valid``."""
    return session_handlers.validate_key((body or ValidateKeyRequest()).apiKey, client)


@router.get("/health")
def health_check(settings: RelaySettings = Depends(get_settings)):
    """Health check endpoint for monitoring system status.

    Returns:
        dict: Status information and whether a server default key is configured.
    """
    return {
        "status": "healthy",
        "openai_api_key_configured": settings.has_server_key,
    }


@router.get("/")
def root():
    """Root endpoint to display basic information about the API."""
    return {
        "name": APP_TITLE,
        "description": APP_DESCRIPTION,
        "version": APP_VERSION,
        "endpoints": {
            "/api/realtime-token": "Create an ephemeral OpenAI Realtime session",
            "/api/validate-key": "Validate an OpenAI API key",
            "/health": "Health check endpoint",
        },
    }


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(settings: Optional[RelaySettings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use; read from the environment when omitted

    Returns:
        FastAPI: The configured application
    """
    settings = settings or RelaySettings.from_env()

    application = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
    )
    application.state.settings = settings
    application.state.openai_client = OpenAIClient(timeout=settings.timeout)

    # CORS applies to every path
    cors_options = build_cors_options(settings.allowed_origin_patterns)
    application.add_middleware(CORSMiddleware, **cors_options)

    application.add_exception_handler(RelayError, relay_error_handler)
    application.include_router(router)

    logger.info(f"CORS allowed origin patterns: {settings.allowed_origin_patterns}")
    logger.info(f"Server default OpenAI API key configured: {settings.has_server_key}")
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
