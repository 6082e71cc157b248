"""
Multipart/form-data encoding for document uploads.

The body is encoded by httpx with a caller-visible boundary, so the same
document always produces the same bytes apart from the boundary token.
"""

import secrets
from dataclasses import dataclass
from typing import Optional

import httpx

from config.constants import UPLOAD_CONTENT_TYPE, UPLOAD_FIELD_NAME


@dataclass(frozen=True)
class MultipartBody:
    """Encoded multipart payload ready to send."""
    boundary: str
    content_type: str
    body: bytes

    @property
    def headers(self) -> dict:
        return {"Content-Type": self.content_type}


def new_boundary() -> str:
    """Random 32 hex character boundary token."""
    return secrets.token_hex(16)


def encode_document(
    content: bytes,
    filename: str,
    boundary: Optional[str] = None,
    field_name: str = UPLOAD_FIELD_NAME,
    content_type: str = UPLOAD_CONTENT_TYPE
) -> MultipartBody:
    """
    Encode a single file part as multipart/form-data.

    Args:
        content: Raw document bytes
        filename: Name reported in the Content-Disposition header
        boundary: Boundary token (a fresh random one when omitted)
        field_name: Form field name of the file part
        content_type: Content-Type of the file part

    Returns:
        MultipartBody with the boundary, header value and encoded bytes
    """
    boundary = boundary or new_boundary()
    header_value = f"multipart/form-data; boundary={boundary}"

    # httpx reuses the boundary found in an explicit Content-Type header
    request = httpx.Request(
        "POST",
        "http://multipart.invalid/",
        headers={"Content-Type": header_value},
        files={field_name: (filename, content, content_type)},
    )
    return MultipartBody(
        boundary=boundary,
        content_type=header_value,
        body=request.read(),
    )
