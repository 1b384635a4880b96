from .configs import RampConfig, check_ramp_args

__all__ = [
    "RampConfig",
    "check_ramp_args",
]
