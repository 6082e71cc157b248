"""
Palace Client - async HTTP client for the Mindscape content-processing service.

Handles the document upload endpoint:
- POST /api/process-content: upload a PDF, receive the palace as JSON
"""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional

import httpx

from config.constants import PROCESS_CONTENT_ENDPOINT
from config.settings import settings
from mindscape.errors import DecodingError, InvalidEndpointError, ServerError
from mindscape.http.multipart import encode_document
from mindscape.http.transport import HttpTransport, HttpxTransport, TransportRequest
from mindscape.models import Palace
from mindscape.retry import RetryPolicy

logger = logging.getLogger(__name__)


def validate_base_url(base_url: str) -> str:
    """
    Check that base_url is an absolute http(s) URL and strip its trailing slash.

    Raises:
        InvalidEndpointError: URL is empty, relative or uses another scheme
    """
    if not base_url or not base_url.strip():
        raise InvalidEndpointError(base_url, "empty base URL")
    try:
        url = httpx.URL(base_url.strip())
    except httpx.InvalidURL as e:
        raise InvalidEndpointError(base_url, str(e)) from e
    if url.scheme not in ("http", "https"):
        raise InvalidEndpointError(base_url, "scheme must be http or https")
    if not url.host:
        raise InvalidEndpointError(base_url, "missing host")
    return str(url).rstrip("/")


class PalaceClient:
    """Async client that turns a document into a Palace."""

    UPLOAD_ENDPOINT = PROCESS_CONTENT_ENDPOINT

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        retry_policy: Optional[RetryPolicy] = None,
        transport: Optional[HttpTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """
        Initialise the client. Missing arguments fall back to settings.

        Args:
            base_url: Service base URL
            timeout: Request/response timeout in seconds
            retry_policy: Backoff policy for 503/504 responses
            transport: HTTP transport (httpx by default)
            sleep: Coroutine used for backoff waits

        Raises:
            InvalidEndpointError: base_url is misconfigured
        """
        self.base_url = validate_base_url(
            base_url if base_url is not None else settings.api.MINDSCAPE_BASE_URL
        )
        self.timeout = timeout if timeout is not None else settings.api.MINDSCAPE_UPLOAD_TIMEOUT
        self.retry_policy = retry_policy or RetryPolicy.from_settings()
        self.transport = transport or HttpxTransport()
        self._sleep = sleep

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}{self.UPLOAD_ENDPOINT}"

    async def upload(self, content: bytes, filename: str) -> Palace:
        """
        Upload a PDF and decode the resulting palace.

        Endpoint: POST {base_url}/api/process-content
        Content-Type: multipart/form-data

        Args:
            content: Raw PDF bytes (size is not checked client-side)
            filename: File name sent in the form part

        Returns:
            Decoded Palace

        Raises:
            TransportError: connection failed or timed out (not retried)
            ServerError: non-2xx status, or 503/504 after every retry
            DecodingError: 2xx body is not a valid palace (not retried)
        """
        url = self.upload_url
        policy = self.retry_policy

        logger.info(f"Uploading {filename} ({len(content)} bytes) to {url}")

        for attempt in range(policy.max_attempts):
            if attempt > 0:
                logger.info(f"Retry attempt {attempt}/{policy.max_retries} for {filename}")

            # Fresh boundary per attempt
            multipart = encode_document(content, filename)
            response = await self.transport.send(
                TransportRequest(
                    method="POST",
                    url=url,
                    body=multipart.body,
                    headers=multipart.headers,
                    timeout=self.timeout,
                )
            )

            logger.info(f"Response status {response.status_code} for {filename}")

            if response.is_success:
                logger.debug(f"Response body: {response.text}")
                try:
                    palace = Palace.from_json(response.body)
                except DecodingError as e:
                    logger.error(f"Could not decode palace for {filename}: {e.detail}")
                    raise
                logger.info(f"Palace '{palace.title}' decoded with {len(palace.concepts)} concepts")
                return palace

            if policy.should_retry(response.status_code, retries_done=attempt):
                delay = policy.calculate_delay(attempt)
                logger.warning(
                    f"Server returned {response.status_code}. "
                    f"Retrying in {delay}s ({attempt + 1}/{policy.max_retries})..."
                )
                await self._sleep(delay)
                continue

            # non-retryable status, or the last attempt was still busy
            break

        logger.error(f"Upload of {filename} failed with status {response.status_code}")
        logger.debug(f"Error body: {response.text}")
        raise ServerError(response.status_code, response.text or None)

    async def upload_file(self, path: Path) -> Palace:
        """
        Read a local PDF and upload it.

        Raises:
            FileNotFoundError: path does not exist (before any network activity)
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return await self.upload(path.read_bytes(), path.name)
