"""
Error hierarchy for the Mindscape palace client.

Every failure reaching a caller is one of these types, so the kind of
failure (configuration, transport, server, decoding) can be told apart.
"""

from typing import Optional

from config.constants import (
    ERROR_BODY_SNIPPET_LENGTH,
    ERROR_MESSAGES,
    RETRYABLE_STATUS_CODES,
    ErrorCode,
)


class MindscapeError(Exception):
    """Base exception for all Mindscape client errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    @property
    def user_message(self) -> str:
        """Short human-readable message for the UI layer."""
        try:
            return ERROR_MESSAGES[ErrorCode(self.error_code)]
        except (ValueError, KeyError):
            return self.message


class InvalidEndpointError(MindscapeError):
    """Base URL is misconfigured. Raised at construction time."""

    def __init__(self, base_url: str, reason: str):
        super().__init__(
            f"Invalid endpoint {base_url!r}: {reason}",
            error_code=ErrorCode.INVALID_ENDPOINT.value
        )
        self.base_url = base_url


class TransportError(MindscapeError):
    """
    Connection could not be completed.

    Covers connection refused/reset, DNS failures and timeouts.
    Never retried by the client.
    """

    def __init__(self, cause: BaseException, url: Optional[str] = None):
        target = f" ({url})" if url else ""
        super().__init__(
            f"Transport failure{target}: {cause.__class__.__name__}: {cause}",
            error_code=ErrorCode.NETWORK_ERROR.value
        )
        self.cause = cause
        self.url = url


class ServerError(MindscapeError):
    """Non-2xx response, either non-retryable or after exhausting retries."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        snippet = ""
        if body:
            snippet = body[:ERROR_BODY_SNIPPET_LENGTH]
            if len(body) > ERROR_BODY_SNIPPET_LENGTH:
                snippet += "..."
            snippet = f": {snippet}"
        code = ErrorCode.SERVER_BUSY if status_code in RETRYABLE_STATUS_CODES else ErrorCode.SERVER_ERROR
        super().__init__(f"Server returned {status_code}{snippet}", error_code=code.value)
        self.status_code = status_code
        self.body = body

    @property
    def retryable(self) -> bool:
        """True for the transient server-busy statuses (503, 504)."""
        return self.status_code in RETRYABLE_STATUS_CODES


class DecodingError(MindscapeError):
    """Response body was not valid JSON or did not match the expected shape."""

    def __init__(self, detail: str):
        super().__init__(
            f"Could not decode response: {detail}",
            error_code=ErrorCode.DECODING_ERROR.value
        )
        self.detail = detail
