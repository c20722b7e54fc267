"""Rate limiter — token buckets for executor calls, one per client and language."""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from codecraft.config import get_settings


@dataclass
class _Bucket:
    tokens: float
    updated_at: float


class TokenBucketRateLimiter:
    """In-memory token bucket limiter for ``/execute``.

    Each (client, language) pair gets ``max_tokens`` executions per
    ``refill_seconds``, refilled continuously, so running SQL does not use up
    the Python allowance. A missing bucket is a full one: buckets that have
    refilled completely are evicted, and memory only holds recently active
    clients.

    For production with multiple instances, swap to Redis-backed implementation.
    """

    def __init__(
        self,
        max_tokens: Optional[int] = None,
        refill_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        settings = get_settings()
        self.max_tokens = max_tokens or settings.RATE_LIMIT_MAX_EXECUTIONS
        self.refill_seconds = refill_seconds or settings.RATE_LIMIT_WINDOW_SECONDS
        self._clock = clock
        self._buckets: dict[tuple[str, str], _Bucket] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def _rate(self) -> float:
        return self.max_tokens / self.refill_seconds

    def _level(self, bucket: _Bucket, now: float) -> float:
        return min(self.max_tokens, bucket.tokens + (now - bucket.updated_at) * self._rate)

    def _evict_full(self, now: float) -> None:
        # Any bucket untouched for a whole window is full again
        if now - self._last_sweep < self.refill_seconds:
            return
        self._buckets = {
            key: bucket
            for key, bucket in self._buckets.items()
            if self._level(bucket, now) < self.max_tokens
        }
        self._last_sweep = now

    def allow_request(self, client: str, language: str) -> bool:
        """Consume one execution for ``client`` in ``language``.

        Returns:
            True if the execution may run, False if rate limited
        """
        now = self._clock()
        self._evict_full(now)

        key = (client, language)
        bucket = self._buckets.get(key)
        tokens = self._level(bucket, now) if bucket else self.max_tokens
        if tokens < 1:
            return False

        self._buckets[key] = _Bucket(tokens=tokens - 1, updated_at=now)
        return True

    def remaining_tokens(self, client: str, language: str) -> int:
        """Whole executions left, without consuming one."""
        bucket = self._buckets.get((client, language))
        if bucket is None:
            return self.max_tokens
        return int(self._level(bucket, self._clock()))

    def retry_after(self, client: str, language: str) -> float:
        """Seconds until the next execution is allowed."""
        bucket = self._buckets.get((client, language))
        if bucket is None:
            return 0.0
        missing = 1 - self._level(bucket, self._clock())
        return max(0.0, missing / self._rate)


# Module-level singleton
rate_limiter = TokenBucketRateLimiter()
