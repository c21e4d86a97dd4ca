"""Estimate per-axis offset and gain corrections from low-noise epochs.

Each retained epoch contributes a weight derived from how far its measured
gravity magnitude (the norm of its mean acceleration vector) deviates from
the nominal constant ``g``::

    weight = 1 - g / |norm - g|,   clamped to at most 100

The estimator starts from offsets ``d = 0`` and gains ``a = 1`` on every
axis, subtracts ``weight`` from all six accumulators once per iteration for
every epoch, and finally divides each accumulator by
``iterations + number_of_epochs``.

The accumulation runs epoch by epoch and step by step, in input order, so
repeated runs over the same epochs are bit-identical.
"""

import logging
from collections.abc import Sequence

from gravcal.config import DEFAULT_GRAVITY, CalibrationConfig
from gravcal.correction.types import AXES, Correction
from gravcal.epochs.statistics import epoch_norm
from gravcal.epochs.types import Epoch
from gravcal.errors import DomainError, EmptyEpochSetError

__all__ = ["MAX_WEIGHT", "CorrectionEstimator", "epoch_weight"]

logger = logging.getLogger(__name__)

MAX_WEIGHT = 100.0


def epoch_weight(norm: float, gravity: float = DEFAULT_GRAVITY) -> float:
    """Return the accumulation weight for an epoch of mean magnitude *norm*.

    Args:
        norm: Euclidean norm of the epoch's mean acceleration vector.
        gravity: Nominal gravitational constant.

    Returns:
        ``1 - gravity / |norm - gravity|``, clamped to ``MAX_WEIGHT``.

    Raises:
        DomainError: If *norm* equals *gravity* exactly.
    """
    deviation = abs(norm - gravity)
    if deviation == 0.0:
        raise DomainError(
            f"Epoch gravity magnitude {norm!r} equals g={gravity!r}; weight is undefined."
        )
    weight = 1.0 - gravity / deviation
    if weight >= MAX_WEIGHT:
        weight = MAX_WEIGHT
    return weight


class CorrectionEstimator:
    """Accumulates per-axis offset and gain corrections over retained epochs.

    Configuration is fixed at construction; ``estimate`` keeps its
    accumulators local, so one estimator can be reused across epoch sets.

    Args:
        threshold: Noise threshold of the run. Stored with the estimator's
            configuration but not consulted by the accumulation.
        iterations: Accumulation steps per epoch. Must be ``> 0``.
        gravity: Nominal gravitational constant (m/s²).

    Raises:
        ValueError: If *iterations* is not positive.

    Example:
        >>> estimator = CorrectionEstimator(threshold=0.05, iterations=10)
        >>> corrections = estimator.estimate(retained_epochs)
        >>> [c.axis for c in corrections]
        ['X', 'Y', 'Z']
    """

    def __init__(
        self,
        threshold: float,
        iterations: int,
        gravity: float = DEFAULT_GRAVITY,
    ) -> None:
        if iterations <= 0:
            raise ValueError(f"iterations must be greater than zero, got {iterations}.")
        self.threshold = threshold
        self.iterations = iterations
        self.gravity = gravity

    @classmethod
    def from_config(cls, config: CalibrationConfig) -> "CorrectionEstimator":
        """Build an estimator from a run configuration."""
        return cls(
            threshold=config.threshold,
            iterations=config.iterations,
            gravity=config.gravity,
        )

    def estimate(self, epochs: Sequence[Epoch]) -> tuple[Correction, Correction, Correction]:
        """Return the X, Y, Z corrections for *epochs*.

        Args:
            epochs: Retained low-noise epochs, in temporal order.

        Returns:
            Three ``Correction`` values, for axes X, Y and Z in that order.

        Raises:
            EmptyEpochSetError: If *epochs* is empty.
            DomainError: If an epoch's gravity magnitude equals ``gravity``.
        """
        if not epochs:
            raise EmptyEpochSetError("No epochs to iterate.")

        d_x = d_y = d_z = 0.0
        a_x = a_y = a_z = 1.0

        for epoch in epochs:
            weight = epoch_weight(epoch_norm(epoch), self.gravity)
            # Same decrement on every axis and every step; no convergence test.
            for _ in range(self.iterations):
                d_x -= weight
                a_x -= weight
                d_y -= weight
                a_y -= weight
                d_z -= weight
                a_z -= weight

        divisor = float(self.iterations) + float(len(epochs))
        logger.debug("Accumulated %d epochs, dividing by %g", len(epochs), divisor)
        offsets = (d_x / divisor, d_y / divisor, d_z / divisor)
        gains = (a_x / divisor, a_y / divisor, a_z / divisor)
        x, y, z = (
            Correction(axis=axis, offset=offset, gain=gain)
            for axis, offset, gain in zip(AXES, offsets, gains)
        )
        return x, y, z
