from .core import (
    RampError,
    OutOfRangeError,
    InvalidConfigurationError,
    RampConfig,
    ProbabilityRamp,
    RandomSource,
    Clock,
    Ramp,
)

__version__ = "0.1.0"

__all__ = [
    "RampError",
    "OutOfRangeError",
    "InvalidConfigurationError",
    "RampConfig",
    "ProbabilityRamp",
    "RandomSource",
    "Clock",
    "Ramp",
]
