"""Epoch types: index-range views into a sample store and their summaries."""

from dataclasses import dataclass

import numpy as np

from gravcal.samples.types import Sample, SampleStore

__all__ = ["Epoch", "EpochSummary"]


@dataclass(frozen=True)
class Epoch:
    """A contiguous, non-empty window of samples in temporal order.

    An epoch does not copy its samples; it records the half-open row range
    ``[start, stop)`` of the store it was cut from and reads through to it.

    Attributes:
        store: The backing sample store.
        start: Index of the first sample (inclusive).
        stop: Index one past the last sample (exclusive).

    Raises:
        ValueError: If the range is empty or falls outside the store.
    """

    store: SampleStore
    start: int
    stop: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.stop <= len(self.store):
            raise ValueError(
                f"Epoch range [{self.start}, {self.stop}) is empty or outside "
                f"a store of {len(self.store)} samples."
            )

    @property
    def size(self) -> int:
        """Number of samples in the epoch."""
        return self.stop - self.start

    @property
    def values(self) -> np.ndarray:
        """Read-only ``(size, 3)`` view of the epoch's x, y, z columns."""
        return self.store.values(self.start, self.stop)

    @property
    def samples(self) -> tuple[Sample, ...]:
        """The epoch's samples as ``Sample`` values."""
        return tuple(self.store[i] for i in range(self.start, self.stop))


@dataclass(frozen=True)
class EpochSummary:
    """Per-axis statistics of one epoch.

    Attributes:
        mean: Arithmetic mean of x, y, z in m/s².
        standard_deviation: Population standard deviation of x, y, z in m/s².
        norm: Euclidean length of ``mean``, i.e. the measured gravity
            magnitude when the sensor is at rest.
    """

    mean: tuple[float, float, float]
    standard_deviation: tuple[float, float, float]
    norm: float
