"""Small utilities shared across modules."""

from .time import Elapsed, Stamp, apply_clock_skew, seconds_to_duration

__all__ = ["Elapsed", "Stamp", "apply_clock_skew", "seconds_to_duration"]
