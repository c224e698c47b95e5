"""
Pusher REST API client library

A Python client for the Pusher REST API. Requests are signed with the
application's key and secret as described in
http://pusher.com/docs/rest_api#authentication

Example usage:
    from pusher_client import Credentials, PusherClient

    client = PusherClient(Credentials("app-id", "key", "secret"))
    client.trigger("my-event", ["my-channel"], {"message": "hello"})
"""

from .client import PusherClient
from .builder import RequestBuilder
from .response import ResponseInterpreter
from .signer import Signer, sign_request
from .transport import RequestsTransport
from .models import (
    ApiResult,
    Credentials,
    EventPayload,
    RequestDescriptor
)
from .exceptions import (
    PusherClientError,
    InvalidArgumentError,
    ConfigurationError,
    TransportError,
    APIError,
    AuthenticationError,
    ForbiddenError,
    RemoteError,
    MalformedResponseError
)
from .constants import (
    API_ENDPOINT,
    AUTH_VERSION,
    DEFAULT_CONFIG,
    LIMIT_CHANNELS,
    PRESENCE_PREFIX
)

__version__ = "1.0.0"
__all__ = [
    "PusherClient",
    "RequestBuilder",
    "ResponseInterpreter",
    "Signer",
    "sign_request",
    "RequestsTransport",
    "ApiResult",
    "Credentials",
    "EventPayload",
    "RequestDescriptor",
    "PusherClientError",
    "InvalidArgumentError",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "AuthenticationError",
    "ForbiddenError",
    "RemoteError",
    "MalformedResponseError",
    "API_ENDPOINT",
    "AUTH_VERSION",
    "DEFAULT_CONFIG",
    "LIMIT_CHANNELS",
    "PRESENCE_PREFIX"
]
