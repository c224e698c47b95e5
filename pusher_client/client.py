"""
Pusher REST API client.

Implements the Pusher REST API: triggering events, querying channels and
listing the users of presence channels. Every request is signed with the
application's key and secret.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

import requests

from .builder import RequestBuilder
from .config import load_config, load_env
from .constants import DEFAULT_CONFIG
from .exceptions import ConfigurationError, TransportError
from .models import Credentials, RequestDescriptor
from .response import ResponseInterpreter
from .signer import Signer
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)


class PusherClient:
    """
    Client for the Pusher REST API.

    The client keeps no state between calls besides its credentials, so one
    instance can be shared. When no transport is given, a ``RequestsTransport``
    is created and owned by the client.
    """

    def __init__(self, credentials: Credentials, transport: Optional[Transport] = None,
                 clock: Optional[Callable[[], float]] = None, **config):
        """
        Initialize Pusher client.

        Args:
            credentials: Application id, key and secret (used as given)
            transport: Callable sending a RequestDescriptor, returning (status, body)
            clock: Returns the current unix time, defaults to time.time
            **config: Configuration options (base_url, timeout)
        """
        self.credentials = credentials

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.signer = Signer(credentials.key, credentials.secret, clock)
        self.builder = RequestBuilder(credentials.app_id)
        self.interpreter = ResponseInterpreter()

        self._owns_transport = transport is None
        if transport is None:
            transport = RequestsTransport(self.config['base_url'], self.config['timeout'])
        self.transport = transport

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs) -> "PusherClient":
        """
        Create a client from the ``pusher`` section of an application config.

        Raises:
            ConfigurationError: If the section or a credential key is missing
        """
        credentials, options = load_config(config)
        return cls(credentials, **{**options, **kwargs})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs) -> "PusherClient":
        """Create a client from PUSHER_APP_ID, PUSHER_KEY and PUSHER_SECRET."""
        credentials, options = load_env(environ)
        return cls(credentials, **{**options, **kwargs})

    def _validate_config(self):
        """Validate client configuration."""
        if not self.config['base_url']:
            raise ConfigurationError("base_url cannot be empty")

        if not isinstance(self.config['timeout'], (int, float)):
            raise ConfigurationError("timeout must be a number")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def trigger(self, event: str, channels: Union[str, Sequence[str]], data: Any,
                socket_id: str = "") -> Any:
        """
        Trigger a new event.

        Args:
            event: Event name
            channels: Single channel or list of channels (at most 100)
            data: Event data, any JSON-serializable value
            socket_id: Exclude a specific socket id from the event

        Returns:
            Decoded response body

        Raises:
            InvalidArgumentError: If more than 100 channels are given
        """
        return self._send(self.builder.trigger(event, channels, data, socket_id))

    # ------------------------------------------------------------------
    # Channels
    # ------------------------------------------------------------------

    def get_channels_info(self, prefix: str = "", info: Iterable[str] = ()) -> Any:
        """Get information about multiple channels, optionally filtered by a prefix."""
        return self._send(self.builder.channels(prefix, info))

    def get_channel_info(self, name: str, info: Iterable[str] = ()) -> Any:
        """Get information about a single channel identified by its name."""
        return self._send(self.builder.channel(name, info))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_users_by_channel(self, channel: str) -> Any:
        """
        Get the ids of users subscribed to a presence channel.

        Raises:
            InvalidArgumentError: If ``channel`` is not a presence channel
        """
        return self._send(self.builder.users(channel))

    def _send(self, request: RequestDescriptor) -> Any:
        """Sign, send and interpret a request."""
        signed = self.signer.sign_descriptor(request)

        logger.debug("Sending %s %s", signed.method, signed.path)
        try:
            status_code, body = self.transport(signed)
        except TransportError:
            raise
        except (requests.RequestException, OSError) as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        return self.interpreter.interpret(status_code, body)

    def close(self):
        """Close the transport if the client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
