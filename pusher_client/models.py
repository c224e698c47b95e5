"""
Value types passed between the builder, signer, transport and interpreter.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Union

from .constants import LIMIT_CHANNELS
from .exceptions import InvalidArgumentError, PusherClientError


@dataclass(frozen=True)
class Credentials:
    """Pusher application credentials. Values are used verbatim."""
    app_id: str
    key: str
    secret: str

    def __repr__(self):
        return f"Credentials(app_id={self.app_id!r}, key={self.key!r}, secret='***')"


@dataclass
class RequestDescriptor:
    """An outgoing request, before or after signing."""
    method: str
    path: str
    query_params: Dict[str, Any] = field(default_factory=dict)
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    def signed(self, query_params: Dict[str, Any]) -> "RequestDescriptor":
        """Return a copy carrying the given (signed) query parameters."""
        return replace(self, query_params=dict(query_params), headers=dict(self.headers))


@dataclass
class EventPayload:
    """
    An event to trigger.

    ``channels`` may be a single channel name or a sequence of names.
    Duplicates are removed keeping the first occurrence.
    """
    name: str
    channels: Union[str, Sequence[str]]
    data: Any = None
    socket_id: str = ""

    def __post_init__(self):
        channels = [self.channels] if isinstance(self.channels, str) else list(self.channels)

        # The limit applies to what the caller passed, duplicates included
        if len(channels) > LIMIT_CHANNELS:
            raise InvalidArgumentError(
                "You are trying to trigger an event to more channels than it is allowed "
                f"(maximum {LIMIT_CHANNELS}, {len(channels)} given)"
            )
        if not channels:
            raise InvalidArgumentError("An event must be triggered on at least one channel")

        self.channels: List[str] = list(dict.fromkeys(channels))


@dataclass(frozen=True)
class ApiResult:
    """Outcome of a response: either a decoded ``value`` or an ``error``."""
    value: Any = None
    error: Optional[PusherClientError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the decoded value or raise the failure."""
        if self.error is not None:
            raise self.error
        return self.value
