import random
import threading
import time
import warnings
from logging import Logger
from typing import Any, Callable, Mapping, Protocol

from flowramp.core.datamodels.configs import RampConfig, check_ramp_args
from flowramp.core.utils.ramp import Duration, Ramp


Clock = Callable[[], float]


class RandomSource(Protocol):
    """Uniform draws in [0, 1), e.g. random.Random or numpy.random.Generator"""
    def random(self) -> float:
        ...


class ProbabilityRamp:
    """
    Chance of success that ramps linearly from minimum_chance to maximum_chance
    over max_duration, then holds at maximum_chance.
    use like:
        ramp = ProbabilityRamp(0.1, 1.0, timedelta(minutes=5))
        if ramp.check():
            ...
    clock and rng are injectable for deterministic use. By default the clock is
    time.monotonic and each ramp owns a private random.Random.
    All reads and resets hold one re-entrant lock.
    """

    def __init__(
        self,
        minimum_chance: float,
        maximum_chance: float,
        max_duration: Duration,
        *,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        logger: Logger | None = None,
    ):
        minimum_chance, maximum_chance, seconds = check_ramp_args(minimum_chance, maximum_chance, max_duration)

        self._config: RampConfig = RampConfig(
            minimum_chance=minimum_chance,
            maximum_chance=maximum_chance,
            max_duration=seconds,
        )
        self._ramp: Ramp = Ramp(seconds)
        self._clock: Clock = clock if clock is not None else time.monotonic
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._logger: Logger | None = logger
        self._lock = threading.RLock()
        self._start_time: float = self._clock()

        if self._logger is not None:
            self._logger.debug(f"Created {self!r}")

    @classmethod
    def from_config(cls, config: RampConfig | Mapping[str, Any], **kwargs: Any) -> "ProbabilityRamp":
        """kwargs are passed through to the constructor (clock, rng, logger)"""
        if not isinstance(config, RampConfig):
            config = RampConfig.model_validate(config)
        return cls(config.minimum_chance, config.maximum_chance, config.max_duration, **kwargs)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(minimum_chance={self.minimum_chance}, "
            f"maximum_chance={self.maximum_chance}, max_duration={self.max_duration})"
        )

    @property
    def config(self) -> RampConfig:
        return self._config

    @property
    def minimum_chance(self) -> float:
        return self._config.minimum_chance

    @property
    def maximum_chance(self) -> float:
        return self._config.maximum_chance

    @property
    def max_duration(self) -> float:
        """Seconds"""
        return self._config.max_duration

    def elapsed(self) -> float:
        """Seconds since construction or the last reset"""
        with self._lock:
            return max(0.0, self._clock() - self._start_time)

    def is_saturated(self) -> bool:
        with self._lock:
            return self._ramp(self.elapsed()) >= 1.0

    def current_chance(self) -> float:
        with self._lock:
            return self._ramp.interpolate(self.elapsed(), self.minimum_chance, self.maximum_chance)

    def check(self) -> bool:
        """Draw once from the random source and pass if the draw is below the current chance"""
        with self._lock:
            chance = self.current_chance()
            draw = self._rng.random()

        if not 0.0 <= draw < 1.0:
            warnings.warn(f"Random source returned {draw!r}, expected a value in [0, 1)", RuntimeWarning)
        if chance <= 0.0:
            return False
        return bool(draw < chance)

    def reset(self) -> None:
        with self._lock:
            self._start_time = self._clock()
        if self._logger is not None:
            self._logger.debug(f"Reset {self!r}")
