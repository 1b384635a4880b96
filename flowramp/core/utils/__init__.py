from .ramp import Duration, Ramp, as_seconds, check_chance, check_duration

__all__ = [
    "Duration",
    "Ramp",
    "as_seconds",
    "check_chance",
    "check_duration",
]
