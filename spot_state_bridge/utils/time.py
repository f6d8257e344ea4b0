"""Time helpers for moving robot-clock instants onto the local clock."""

from __future__ import annotations

from dataclasses import dataclass

from google.protobuf.duration_pb2 import Duration
from google.protobuf.timestamp_pb2 import Timestamp

NANOS_PER_SECOND = 1_000_000_000

# Last instant a protobuf Timestamp can hold (9999-12-31T23:59:59.999999999Z).
MAX_TIMESTAMP_SECONDS = 253_402_300_799
MAX_TIMESTAMP_NANOS = MAX_TIMESTAMP_SECONDS * NANOS_PER_SECOND + NANOS_PER_SECOND - 1


@dataclass(frozen=True, slots=True)
class Stamp:
    """An instant on the consumer clock, split like ``builtin_interfaces/Time``."""

    sec: int = 0
    nanosec: int = 0

    @classmethod
    def from_nanoseconds(cls, total: int) -> "Stamp":
        sec, nanosec = divmod(total, NANOS_PER_SECOND)
        return cls(sec=sec, nanosec=nanosec)

    def to_nanoseconds(self) -> int:
        return self.sec * NANOS_PER_SECOND + self.nanosec


@dataclass(frozen=True, slots=True)
class Elapsed:
    """A non-instant span of time (battery runtime, fault duration)."""

    sec: int = 0
    nanosec: int = 0

    @classmethod
    def from_duration(cls, duration: Duration) -> "Elapsed":
        return cls(sec=duration.seconds, nanosec=duration.nanos)


def duration_to_nanoseconds(duration: Duration) -> int:
    return duration.seconds * NANOS_PER_SECOND + duration.nanos


def timestamp_to_nanoseconds(timestamp: Timestamp) -> int:
    return timestamp.seconds * NANOS_PER_SECOND + timestamp.nanos


def apply_clock_skew(timestamp: Timestamp, clock_skew: Duration) -> Stamp:
    """Return ``timestamp + clock_skew`` as a local :class:`Stamp`.

    The sum is done in integer nanoseconds so no precision is lost. Results
    that would fall before the epoch or past the last protobuf instant are
    saturated to those bounds instead of wrapping.
    """

    total = timestamp_to_nanoseconds(timestamp) + duration_to_nanoseconds(clock_skew)
    total = min(max(total, 0), MAX_TIMESTAMP_NANOS)
    return Stamp.from_nanoseconds(total)


def seconds_to_duration(seconds: float) -> Duration:
    """Build a protobuf Duration, mainly for tests and command-line tools."""

    duration = Duration()
    duration.FromNanoseconds(round(seconds * NANOS_PER_SECOND))
    return duration
