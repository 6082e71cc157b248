from enum import Enum


# Service endpoints

PROCESS_CONTENT_ENDPOINT = "/api/process-content"
CHAT_CONCEPT_ENDPOINT = "/chat/concept"

# Multipart upload

UPLOAD_FIELD_NAME = "file"
UPLOAD_CONTENT_TYPE = "application/pdf"

# 503 Service Unavailable, 504 Gateway Timeout
RETRYABLE_STATUS_CODES = frozenset({503, 504})

# Longest response text kept in error messages
ERROR_BODY_SNIPPET_LENGTH = 500


class ChatRole(str, Enum):
    """Roles understood by the chat endpoint"""

    USER = "user"
    MODEL = "model"


# Error codes

class ErrorCode(str, Enum):
    """Standardised error codes"""

    INVALID_ENDPOINT = "INVALID_ENDPOINT"
    NETWORK_ERROR = "NETWORK_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    SERVER_BUSY = "SERVER_BUSY"
    DECODING_ERROR = "DECODING_ERROR"


# User-facing messages

ERROR_MESSAGES = {
    ErrorCode.INVALID_ENDPOINT: "The service address is misconfigured",
    ErrorCode.NETWORK_ERROR: "Could not reach the server. Check your connection and try again",
    ErrorCode.SERVER_ERROR: "The server could not process the document",
    ErrorCode.SERVER_BUSY: "The server is busy. Please try again in a few minutes",
    ErrorCode.DECODING_ERROR: "The server returned an unexpected response",
}
