import math
import numbers
from datetime import timedelta

from flowramp.core.errors import OutOfRangeError


Duration = timedelta | int | float


def as_seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, bool) or not isinstance(duration, numbers.Real):
        raise TypeError(f"Expected timedelta or seconds as int/float, got {type(duration)}")
    return float(duration)


def check_chance(name: str, value: float) -> float:
    """Validate a probability, NaN and inf fail the range check too"""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected {name} as int/float, got {type(value)}")
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise OutOfRangeError(name, value, "Must be between 0 and 1")
    return value


def check_duration(name: str, duration: Duration) -> float:
    try:
        seconds = as_seconds(duration)
    except OverflowError:
        raise OutOfRangeError(name, duration, "Too large to represent as float seconds")
    if not math.isfinite(seconds) or seconds <= 0:
        raise OutOfRangeError(name, duration, "Must be greater than zero")
    return seconds


class Ramp:
    def __init__(self, duration: float):
        """
        0->1 over duration seconds of elapsed time, then holds at 1
        """
        self.duration = check_duration("duration", duration)

    def __call__(self, elapsed: float) -> float:
        if elapsed <= 0: return 0.0  # clock stepped back
        if elapsed >= self.duration: return 1.0
        return elapsed / self.duration

    def interpolate(self, elapsed: float, low: float, high: float) -> float:
        progress = self(elapsed)
        if progress >= 1.0:
            # saturated, never extrapolate past high
            return high
        return low + progress * (high - low)
