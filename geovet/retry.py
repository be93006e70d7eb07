"""Retry policy for remote provider requests.

Providers never raise across their public boundary, so instead of wrapping a
raising function (as a ``with_retries`` decorator would) the policy drives an
operation that reports each attempt as an :class:`AttemptOutcome`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def linear_backoff(step_seconds: float = 1.0) -> Callable[[int], float]:
    """Backoff growing linearly with the retry number (1 × step, 2 × step, ...)."""

    def backoff(attempt: int) -> float:
        return attempt * step_seconds

    return backoff


def is_retryable_status(status_code: int) -> bool:
    """Server errors are retryable; 429 and other client errors are not."""
    return 500 <= status_code < 600


@dataclass(slots=True, frozen=True)
class AttemptOutcome(Generic[T]):
    """Result of one attempt.

    Attributes:
        value: Successful value (None on failure)
        error: Error message (None on success)
        retryable: Whether a failed attempt may be retried
    """

    value: Optional[T] = None
    error: Optional[str] = None
    retryable: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> AttemptOutcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, retryable: bool = False) -> AttemptOutcome[T]:
        return cls(error=error, retryable=retryable)


class RetryPolicy:
    """Bounded retry loop with pluggable backoff.

    Attributes:
        max_retries: Additional attempts after the first one
        backoff: Maps the retry number (1-based) to a delay in seconds
        sleep: Sleep function, injectable for tests

    Example:
        >>> policy = RetryPolicy(max_retries=2, sleep=lambda _: None)
        >>> outcome = policy.run(lambda attempt: AttemptOutcome.failure("boom", retryable=True))
        >>> outcome.error
        'boom'
    """

    def __init__(
        self,
        max_retries: int = 2,
        backoff: Optional[Callable[[int], float]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self.max_retries = max_retries
        self.backoff = backoff or linear_backoff(1.0)
        self.sleep = sleep

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, attempt: int) -> float:
        """Delay before the given attempt (0-based); the first attempt never waits."""
        if attempt <= 0:
            return 0.0
        return max(0.0, self.backoff(attempt))

    def run(self, operation: Callable[[int], AttemptOutcome[T]]) -> AttemptOutcome[T]:
        """Run ``operation`` until it succeeds, fails permanently, or attempts run out.

        Args:
            operation: Called with the 0-based attempt index

        Returns:
            The first successful or non-retryable outcome, else the last one
        """
        outcome: AttemptOutcome[T] = AttemptOutcome.failure("No attempts made")
        for attempt in range(self.max_attempts):
            delay = self.delay_for(attempt)
            if delay > 0:
                logger.debug(f"Retry {attempt}/{self.max_retries} after {delay:.1f}s: {outcome.error}")
                self.sleep(delay)

            outcome = operation(attempt)
            if outcome.ok or not outcome.retryable:
                return outcome

        logger.warning(f"Giving up after {self.max_attempts} attempts: {outcome.error}")
        return outcome
