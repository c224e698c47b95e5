"""
Pusher request signing.

Every REST request carries its authentication in the query string. The
signature is an HMAC-SHA256, keyed by the application secret, over the
canonical string::

    METHOD\\nPATH\\nauth_key=...&auth_timestamp=...&auth_version=1.0&body_md5=...

See http://pusher.com/docs/rest_api#authentication
"""

import hashlib
import hmac
import time
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import unquote_plus, urlencode

from .constants import AUTH_SIGNATURE_PARAM, AUTH_VERSION
from .models import RequestDescriptor


def body_md5(body: Union[bytes, str]) -> str:
    """Hex MD5 of the request body, or an empty string for no body."""
    if not body:
        return ""
    if isinstance(body, str):
        body = body.encode('utf-8')
    return hashlib.md5(body).hexdigest()


def is_empty(value: Any) -> bool:
    """
    Whether a parameter is left out of the signed string.

    Falsy values and the string "0" count as empty, matching the filtering
    Pusher's reference libraries apply.
    """
    return not value or value == "0"


def canonical_query(params: Mapping[str, Any]) -> str:
    """
    Build the query part of the canonical string.

    Empty values are left out, keys are sorted, and the pairs are
    form-encoded then decoded again, so values appear unescaped.
    """
    pairs = sorted(
        ((key, value) for key, value in params.items() if not is_empty(value)),
        key=lambda item: item[0]
    )
    return unquote_plus(urlencode(pairs))


def canonical_string(method: str, path: str, params: Mapping[str, Any]) -> str:
    """Return the exact text that is HMAC-signed."""
    return "\n".join([method.upper(), path, canonical_query(params)])


def sign_request(
    method: str,
    path: str,
    query_params: Optional[Mapping[str, Any]],
    body: Union[bytes, str],
    api_key: str,
    api_secret: str,
    timestamp: int,
) -> Dict[str, Any]:
    """
    Compute the signed query parameters for a request.

    Args:
        method: HTTP method
        path: URL path only (no host, no query)
        query_params: Query parameters of the request; they override the
            generated auth parameters when keys collide
        body: Raw request body
        api_key: Pusher application key
        api_secret: Pusher application secret
        timestamp: Unix time in seconds

    Returns:
        All query parameters to send, ``auth_signature`` included
    """
    params: Dict[str, Any] = {
        'auth_key': api_key,
        'auth_timestamp': int(timestamp),
        'auth_version': AUTH_VERSION,
        'body_md5': body_md5(body),
    }

    # Query keys are case-insensitive for the signature
    for key, value in (query_params or {}).items():
        params[key.lower()] = value

    message = canonical_string(method, path, params)
    mac = hmac.new(
        api_secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )

    params[AUTH_SIGNATURE_PARAM] = mac.hexdigest()
    return params


class Signer:
    """
    Signs requests with one set of credentials.

    The clock is injectable so signatures can be reproduced in tests.
    """

    def __init__(self, api_key: str, api_secret: str, clock: Optional[Callable[[], float]] = None):
        self.api_key = api_key
        self.api_secret = api_secret
        self.clock = clock or time.time

    def sign(self, method: str, path: str, query_params=None, body: Union[bytes, str] = b"") -> Dict[str, Any]:
        """Return the signed query parameters for the given request parts."""
        return sign_request(
            method,
            path,
            query_params,
            body,
            self.api_key,
            self.api_secret,
            int(self.clock()),
        )

    def sign_descriptor(self, request: RequestDescriptor) -> RequestDescriptor:
        """Return a copy of ``request`` whose query carries the auth parameters."""
        params = self.sign(request.method, request.path, request.query_params, request.body)
        return request.signed(params)
