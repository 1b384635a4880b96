from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator, model_validator

from flowramp.core.errors import InvalidConfigurationError
from flowramp.core.utils.ramp import Duration, check_chance, check_duration


TimedeltaAdapter = TypeAdapter(timedelta)


def check_ramp_args(
    minimum_chance: float,
    maximum_chance: float,
    max_duration: Duration,
) -> tuple[float, float, float]:
    """
        Validate ramp arguments in order: minimum, maximum, ordering, duration.
        Returns (minimum_chance, maximum_chance, max_duration seconds)
    """
    minimum_chance = check_chance("minimum_chance", minimum_chance)
    maximum_chance = check_chance("maximum_chance", maximum_chance)
    if minimum_chance > maximum_chance:
        raise InvalidConfigurationError(
            f"Minimum chance cannot be greater than maximum chance: {minimum_chance=} > {maximum_chance=}"
        )
    seconds = check_duration("max_duration", max_duration)
    return minimum_chance, maximum_chance, seconds


class RampConfig(BaseModel):
    """
        max_duration is held as float seconds, timedelta and ISO-8601 strings
        (e.g. "PT5M") are converted on validation
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum_chance: float
    maximum_chance: float
    max_duration: float

    @field_validator("max_duration", mode="before")
    @classmethod
    def duration_to_seconds(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = TimedeltaAdapter.validate_python(value)
        if isinstance(value, timedelta):
            return value.total_seconds()
        return value

    @model_validator(mode="after")
    def validate_ramp(self):
        check_ramp_args(self.minimum_chance, self.maximum_chance, self.max_duration)
        return self
