"""Run-scoped configuration for a calibration run."""

import math
from dataclasses import dataclass
from pathlib import Path

from gravcal.errors import (
    ConfigurationError,
    InvalidIterationCountError,
    InvalidThresholdError,
    MissingInputError,
)

__all__ = [
    "DEFAULT_EPOCH_SECONDS",
    "DEFAULT_GRAVITY",
    "DEFAULT_ITERATIONS",
    "DEFAULT_SAMPLE_RATE_HZ",
    "CalibrationConfig",
]

# --- Defaults -----------------------------------------------------------------

DEFAULT_ITERATIONS = 1000
DEFAULT_SAMPLE_RATE_HZ = 30.0
DEFAULT_GRAVITY = 9.81  # m/s²
DEFAULT_EPOCH_SECONDS = 10.0


def _is_positive_real(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class CalibrationConfig:
    """Immutable settings for one calibration run.

    Fields are validated on construction, in declaration order, so the first
    problem reported is the same one the command line reports first: a
    missing source, then the threshold, then the iteration count.

    Attributes:
        source: Path of the CSV capture to calibrate from.
        threshold: Maximum per-axis standard deviation (m/s²) for an epoch
            to count as low-noise. Must be ``> 0``.
        iterations: Number of accumulation steps per epoch. Must be ``> 0``.
        sample_rate_hz: Sample rate of the capture, used to size epochs.
        gravity: Nominal gravitational constant (m/s²).
        epoch_seconds: Duration of one epoch in seconds.

    Raises:
        MissingInputError: If *source* is empty.
        InvalidThresholdError: If *threshold* is not a positive real number.
        InvalidIterationCountError: If *iterations* is not a positive integer.
        ConfigurationError: If the sample rate, gravity, or epoch duration is
            not positive, or they yield an epoch shorter than one sample.

    Example:
        >>> config = CalibrationConfig(source="capture.csv", threshold=0.05)
        >>> config.epoch_size
        300
    """

    source: Path
    threshold: float
    iterations: int = DEFAULT_ITERATIONS
    sample_rate_hz: float = DEFAULT_SAMPLE_RATE_HZ
    gravity: float = DEFAULT_GRAVITY
    epoch_seconds: float = DEFAULT_EPOCH_SECONDS

    def __post_init__(self) -> None:
        if self.source is None or not str(self.source):
            raise MissingInputError("No input file was provided.")
        object.__setattr__(self, "source", Path(self.source))

        if not _is_positive_real(self.threshold):
            raise InvalidThresholdError(
                f"Threshold must be a positive number, got {self.threshold!r}."
            )
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise InvalidIterationCountError(
                f"Iteration count must be an integer, got {self.iterations!r}."
            )
        if self.iterations <= 0:
            raise InvalidIterationCountError(
                f"Iteration count must be greater than zero, got {self.iterations}."
            )

        for name in ("sample_rate_hz", "gravity", "epoch_seconds"):
            value = getattr(self, name)
            if not _is_positive_real(value):
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}.")
        if self.epoch_size < 1:
            raise ConfigurationError(
                f"An epoch of {self.epoch_seconds}s at {self.sample_rate_hz} Hz "
                "holds no samples."
            )

    @property
    def epoch_size(self) -> int:
        """Number of samples in one full epoch."""
        return round(self.sample_rate_hz * self.epoch_seconds)
