"""
Mindscape - client for the memory palace content-processing service.

Components:
- models: Palace, Concept and environment data model
- errors: typed failures (transport, server, decoding, configuration)
- retry: backoff policy for server-busy responses
- http/: upload and chat clients
"""

from mindscape.errors import (
    DecodingError,
    InvalidEndpointError,
    MindscapeError,
    ServerError,
    TransportError,
)
from mindscape.models import (
    ChatReply,
    Concept,
    EnvironmentConfig,
    EnvironmentObject,
    EnvironmentTheme,
    ObjectType,
    Palace,
)
from mindscape.retry import RetryPolicy

__all__ = [
    # Data model
    "ChatReply",
    "Concept",
    "EnvironmentConfig",
    "EnvironmentObject",
    "EnvironmentTheme",
    "ObjectType",
    "Palace",
    # Errors
    "DecodingError",
    "InvalidEndpointError",
    "MindscapeError",
    "ServerError",
    "TransportError",
    # Retry
    "RetryPolicy",
]
