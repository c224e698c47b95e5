"""
Builds unsigned requests for each Pusher REST operation.
"""

import json
from typing import Any, Dict, Iterable, Union

from .constants import CONTENT_TYPE_JSON, PRESENCE_PREFIX
from .exceptions import InvalidArgumentError
from .models import EventPayload, RequestDescriptor
from .signer import is_empty


def _encode_json(value: Any) -> bytes:
    return json.dumps(value, separators=(',', ':')).encode('utf-8')


def _join_info(info: Union[str, Iterable[str], None]) -> str:
    if not info:
        return ""
    if isinstance(info, str):
        return info
    return ",".join(info)


def _drop_empty(params: Dict[str, Any], keep: Iterable[str] = ()) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if key in keep or not is_empty(value)}


class RequestBuilder:
    """Turns API operations into ``RequestDescriptor`` objects for one application."""

    OPERATIONS = ('trigger', 'channels', 'channel', 'users')

    def __init__(self, app_id: str):
        self.app_id = app_id

    def build(self, operation: str, **params) -> RequestDescriptor:
        """Build the request for ``operation`` by name."""
        if operation not in self.OPERATIONS:
            raise InvalidArgumentError(f"Unknown operation {operation!r}")
        return getattr(self, operation)(**params)

    def trigger(self, name: str, channels, data: Any = None, socket_id: str = "") -> RequestDescriptor:
        """
        Build an event trigger request.

        @link http://pusher.com/docs/rest_api#method-post-event

        Raises:
            InvalidArgumentError: If no channel or more than 100 channels are given
        """
        payload = EventPayload(name, channels, data, socket_id)
        return self.trigger_payload(payload)

    def trigger_payload(self, payload: EventPayload) -> RequestDescriptor:
        body = _drop_empty({
            'name': payload.name,
            'channels': payload.channels,
            # Pusher expects event data as a string
            'data': json.dumps(payload.data, separators=(',', ':')),
            'socket_id': payload.socket_id,
        }, keep=('data',))
        return RequestDescriptor(
            method='POST',
            path=f"/apps/{self.app_id}/events",
            body=_encode_json(body),
            headers={'Content-Type': CONTENT_TYPE_JSON},
        )

    def channels(self, prefix: str = "", info=None) -> RequestDescriptor:
        """
        Build a request listing channels, optionally filtered by prefix.

        @link http://pusher.com/docs/rest_api#method-get-channels
        """
        query = _drop_empty({
            'filter_by_prefix': prefix,
            'info': _join_info(info),
        })
        return RequestDescriptor('GET', f"/apps/{self.app_id}/channels", query)

    def channel(self, name: str, info=None) -> RequestDescriptor:
        """
        Build a request for a single channel.

        @link http://pusher.com/docs/rest_api#method-get-channel
        """
        query = _drop_empty({'info': _join_info(info)})
        return RequestDescriptor('GET', f"/apps/{self.app_id}/channels/{name}", query)

    def users(self, channel: str) -> RequestDescriptor:
        """
        Build a request listing the users of a presence channel.

        @link http://pusher.com/docs/rest_api#method-get-users

        Raises:
            InvalidArgumentError: If ``channel`` is not a presence channel
        """
        if not channel.startswith(PRESENCE_PREFIX):
            raise InvalidArgumentError(
                f'You can get a list of user ids only for presence channel, "{channel}" given'
            )
        return RequestDescriptor('GET', f"/apps/{self.app_id}/channels/{channel}/users")
