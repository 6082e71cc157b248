"""
HTTP transport capability used by the palace and chat clients.

The clients only need "send this request, give me status and body";
keeping that behind HttpTransport lets tests swap in fakes.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

import httpx

from mindscape.errors import DecodingError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportRequest:
    """Fully built HTTP request."""
    method: str
    url: str
    body: bytes = b""
    headers: dict = field(default_factory=dict)
    timeout: Optional[float] = None


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of an HTTP response."""
    status_code: int
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpTransport(ABC):
    """Sends one request and returns its response."""

    @abstractmethod
    async def send(self, request: TransportRequest) -> TransportResponse:
        """
        Send a request.

        Raises:
            TransportError: the exchange could not be completed (includes timeouts)
            DecodingError: the body does not match its Content-Encoding
        """


class HttpxTransport(HttpTransport):
    """
    HttpTransport backed by httpx.

    A new AsyncClient is opened per request and closed when the exchange
    ends, including on cancellation.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            transport: Optional low-level httpx transport (e.g. httpx.MockTransport)
        """
        self._transport = transport

    async def send(self, request: TransportRequest) -> TransportResponse:
        timeout = httpx.Timeout(request.timeout) if request.timeout is not None else httpx.Timeout(None)
        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.request(
                    request.method,
                    request.url,
                    content=request.body,
                    headers=request.headers,
                )
                return TransportResponse(status_code=response.status_code, body=response.content)
        except httpx.DecodingError as e:
            # Content-Encoding did not match the body
            logger.debug(f"{request.method} {request.url} body could not be decoded: {e!r}")
            raise DecodingError(f"undecodable response body: {e}") from e
        except httpx.RequestError as e:
            logger.debug(f"{request.method} {request.url} failed: {e!r}")
            raise TransportError(e, url=request.url) from e
