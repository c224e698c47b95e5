"""
Maps HTTP responses to decoded data or typed failures.
"""

import json
from typing import Any, Union

from .exceptions import (
    AuthenticationError,
    ForbiddenError,
    MalformedResponseError,
    RemoteError
)
from .models import ApiResult


class ResponseInterpreter:
    """Classifies a status code and body. Failures are never retried."""

    def classify(self, status_code: int, body: Union[bytes, str, None]) -> ApiResult:
        """
        Return an ``ApiResult`` for the response.

        Success (2xx) bodies are decoded as JSON; an empty body decodes to
        ``None``. Failures keep the body exactly as received.
        """
        if 200 <= status_code < 300:
            if not body:
                return ApiResult(value=None)
            try:
                return ApiResult(value=json.loads(body))
            except (ValueError, UnicodeDecodeError):
                return ApiResult(error=MalformedResponseError(body, status_code))

        if status_code == 401:
            return ApiResult(error=AuthenticationError(body, 401))
        if status_code == 403:
            return ApiResult(error=ForbiddenError(body, 403))
        return ApiResult(error=RemoteError(body, status_code))

    def interpret(self, status_code: int, body: Union[bytes, str, None]) -> Any:
        """
        Return the decoded success value.

        Raises:
            AuthenticationError: On 401
            ForbiddenError: On 403
            RemoteError: On any other non-success status
            MalformedResponseError: On a success status with invalid JSON
        """
        return self.classify(status_code, body).unwrap()
