from __future__ import annotations


class FreesoundError(RuntimeError):
    """Base class for every failure raised by the Freesound client."""


class FreesoundTransportError(FreesoundError):
    """The HTTP exchange could not complete (DNS, connect, timeout, protocol)."""


class FreesoundAuthError(FreesoundError):
    """The API key was missing or explicitly rejected by the server."""


class FreesoundApiError(FreesoundError):
    """Non-success status, or a success response that could not be used."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(FreesoundApiError):
    """The response body does not match the expected shape."""
