"""
Default HTTP transport built on requests.

A transport is any callable taking a ``RequestDescriptor`` and returning
``(status_code, body)``. Transports report network failures by raising
``TransportError``. The client also wraps ``requests.RequestException`` and
``OSError``; any other exception is treated as a bug and propagates as is,
so transports built on another HTTP stack must translate its errors.
"""

import logging
from typing import Callable, Optional, Tuple

import requests

from .constants import DEFAULT_CONFIG
from .exceptions import TransportError
from .models import RequestDescriptor

logger = logging.getLogger(__name__)

Transport = Callable[[RequestDescriptor], Tuple[int, bytes]]


class RequestsTransport:
    """Sends descriptors with a ``requests.Session``."""

    def __init__(self, base_url: str = DEFAULT_CONFIG['base_url'],
                 timeout: float = DEFAULT_CONFIG['timeout'],
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, request: RequestDescriptor) -> str:
        return self.base_url + request.path

    def __call__(self, request: RequestDescriptor) -> Tuple[int, bytes]:
        kwargs = {
            'params': request.query_params,
            'headers': request.headers,
            'timeout': self.timeout,
        }
        if request.body:
            kwargs['data'] = request.body

        try:
            response = self.session.request(request.method, self.url(request), **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", request.method, request.path, response.status_code)
        return response.status_code, response.content

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
