from .errors import (
    RampError,
    OutOfRangeError,
    InvalidConfigurationError,
)
from .datamodels import RampConfig, check_ramp_args
from .probability_ramp import ProbabilityRamp, RandomSource, Clock
from .utils import (
    Duration,
    Ramp,
    as_seconds,
    check_chance,
    check_duration,
)
__all__ = [
    "RampError",
    "OutOfRangeError",
    "InvalidConfigurationError",
    "RampConfig",
    "check_ramp_args",
    "ProbabilityRamp",
    "RandomSource",
    "Clock",
    "Duration",
    "Ramp",
    "as_seconds",
    "check_chance",
    "check_duration",
]
