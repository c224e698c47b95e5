"""
Custom exceptions for Pusher client library.
"""


class PusherClientError(Exception):
    """Base exception for Pusher client errors."""
    pass


class InvalidArgumentError(PusherClientError):
    """Raised when a call violates a precondition, before any request is sent."""
    pass


class ConfigurationError(PusherClientError):
    """Raised when client configuration is invalid."""
    pass


class TransportError(PusherClientError):
    """Raised when the HTTP request itself fails."""
    pass


class APIError(PusherClientError):
    """Base for non-success responses; keeps the raw body and status code."""

    def __init__(self, body, status_code: int):
        super().__init__(body, status_code)
        self.body = body
        self.status_code = status_code

    def __str__(self):
        return f"HTTP {self.status_code}: {self.body!r}"


class AuthenticationError(APIError):
    """Raised on HTTP 401, usually clock drift or a wrong key/secret."""
    pass


class ForbiddenError(APIError):
    """Raised on HTTP 403."""
    pass


class RemoteError(APIError):
    """Raised on any other non-success status."""
    pass


class MalformedResponseError(APIError):
    """Raised when a success response does not carry valid JSON."""
    pass
