"""
Exceptions raised by the relay and translated into JSON error responses.
"""

from realtime_relay.config.constants import ERROR_NO_API_KEY


class RelayError(Exception):
    """Base class for failures that end a request with an HTTP error status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoKeyAvailableError(RelayError):
    """Neither the caller nor the server supplied an API key."""

    status_code = 400

    def __init__(self, message: str = ERROR_NO_API_KEY):
        super().__init__(message)


class UpstreamError(RelayError):
    """OpenAI could not be reached or answered with a non-2xx status."""

    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status
