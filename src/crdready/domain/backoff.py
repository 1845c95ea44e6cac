"""Attempt budget and wait schedule for establishment polling."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_INITIAL_INTERVAL_SECONDS = 0.5
DEFAULT_BACKOFF_FACTOR = 2.0


@dataclass(frozen=True, slots=True)
class BackoffConfig:
    """Attempt budget and geometric wait schedule between status fetches.

    Every wait in the schedule is a finite, non-negative number of seconds.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_interval: float = DEFAULT_INITIAL_INTERVAL_SECONDS
    factor: float = DEFAULT_BACKOFF_FACTOR

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not math.isfinite(self.initial_interval) or self.initial_interval < 0:
            raise ValueError("initial_interval must be a finite, non-negative number")
        if not math.isfinite(self.factor) or self.factor < 1:
            raise ValueError("factor must be a finite number of at least 1")
        if not all(math.isfinite(wait) for wait in self.intervals()):
            raise ValueError("backoff schedule overflows; lower factor or max_attempts")

    def intervals(self) -> list[float]:
        """Return the waits slept between consecutive attempts."""

        waits: list[float] = []
        interval = self.initial_interval
        for _ in range(self.max_attempts - 1):
            waits.append(interval)
            interval *= self.factor
        return waits


__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_INITIAL_INTERVAL_SECONDS",
    "DEFAULT_MAX_ATTEMPTS",
    "BackoffConfig",
]
