class RampError(ValueError):
    """Base class for ramp construction errors"""


class OutOfRangeError(RampError):
    """
        Argument outside its allowed range:
        a chance not in [0, 1] (NaN and inf included) or a non-positive duration
    """

    def __init__(self, name: str, value, msg: str):
        self.name: str = name
        self.value = value
        super().__init__(f"{name}={value!r}: {msg}")


class InvalidConfigurationError(RampError):
    """Arguments are individually valid but inconsistent with each other"""
