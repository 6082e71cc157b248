"""
HTTP subpackage - clients for the Mindscape content-processing service.

Usage:
    from mindscape.http import PalaceClient

    client = PalaceClient()
    palace = await client.upload(pdf_bytes, "notes.pdf")
"""

from mindscape.http.chat_client import ChatClient, ChatMessage, ChatSession
from mindscape.http.multipart import MultipartBody, encode_document
from mindscape.http.palace_client import PalaceClient, validate_base_url
from mindscape.http.transport import (
    HttpTransport,
    HttpxTransport,
    TransportRequest,
    TransportResponse,
)

__all__ = [
    "ChatClient",
    "ChatMessage",
    "ChatSession",
    "HttpTransport",
    "HttpxTransport",
    "MultipartBody",
    "PalaceClient",
    "TransportRequest",
    "TransportResponse",
    "encode_document",
    "validate_base_url",
]
