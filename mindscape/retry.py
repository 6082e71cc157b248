"""
Retry policy for document uploads.

Only the server-busy statuses are retried. Transport failures and
decoding failures are never retried.
"""

from dataclasses import dataclass

from config.constants import RETRYABLE_STATUS_CODES
from config.settings import settings


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded exponential backoff.

    With the defaults a call makes at most 1 + 3 attempts, sleeping
    1s, 2s and 4s between them.
    """
    max_retries: int = 3
    backoff_base: float = 2.0
    retryable_status_codes: frozenset = RETRYABLE_STATUS_CODES

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.backoff_base <= 0:
            raise ValueError("backoff_base must be > 0")

    @classmethod
    def from_settings(cls, retry_settings=None) -> "RetryPolicy":
        """Build the policy from UploadRetrySettings (global settings by default)."""
        retry_settings = retry_settings or settings.upload_retry
        return cls(
            max_retries=retry_settings.UPLOAD_MAX_RETRIES,
            backoff_base=retry_settings.UPLOAD_BACKOFF_BASE,
        )

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def should_retry(self, status_code: int, retries_done: int) -> bool:
        """
        Decide whether a response status warrants another attempt.

        Args:
            status_code: HTTP status of the last response
            retries_done: Retries already performed (0 after the first attempt)
        """
        return status_code in self.retryable_status_codes and retries_done < self.max_retries

    def calculate_delay(self, retries_done: int) -> float:
        """
        Calculate exponential backoff delay.

        Formula: backoff_base ^ retries_done seconds

        Args:
            retries_done: Retries already performed (0, 1, 2, ...)

        Returns:
            Delay in seconds (1, 2, 4, ...)
        """
        return self.backoff_base ** retries_done
