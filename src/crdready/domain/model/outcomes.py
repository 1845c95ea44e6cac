"""Per-definition results of an establishment poll."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Established:
    name: str
    attempts: int


@dataclass(frozen=True, slots=True)
class PermanentlyRejected:
    name: str
    reason: str
    message: str
    attempts: int


@dataclass(frozen=True, slots=True)
class TimedOut:
    name: str
    attempts: int


type PollOutcome = Established | PermanentlyRejected | TimedOut
