"""Accelerometer sample types and the read-only backing store."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

__all__ = ["Sample", "SampleStore"]


@dataclass(frozen=True)
class Sample:
    """A single tri-axial accelerometer reading.

    Attributes:
        accel_x: Acceleration along X-axis in m/s².
        accel_y: Acceleration along Y-axis in m/s².
        accel_z: Acceleration along Z-axis in m/s².

    Example:
        >>> sample = Sample(0.02, -0.01, 9.79)
        >>> sample.accel_z  # roughly 9.8 m/s² when flat
        9.79
    """

    accel_x: float
    accel_y: float
    accel_z: float


class SampleStore:
    """Ordered, read-only sequence of samples owned by one calibration run.

    The samples live in a single ``(n, 3)`` float64 array whose write flag is
    cleared on construction. Epochs refer back into the store by index range
    instead of copying rows, so the store must outlive every epoch cut from
    it.

    Args:
        values: Array-like of shape ``(n, 3)`` holding x, y, z columns.
            An empty array-like produces an empty store.

    Raises:
        ValueError: If *values* is not two-dimensional with three columns.
    """

    def __init__(self, values: Iterable[Iterable[float]] | np.ndarray) -> None:
        array = np.array(values, dtype=np.float64)
        if array.size == 0:
            array = array.reshape(0, 3)
        if array.ndim != 2 or array.shape[1] != 3:
            raise ValueError(f"Expected an (n, 3) array of samples, got shape {array.shape}.")
        array.flags.writeable = False
        self._values = array

    @classmethod
    def from_samples(cls, samples: Iterable[Sample]) -> "SampleStore":
        """Build a store from ``Sample`` values, preserving their order."""
        return cls([(s.accel_x, s.accel_y, s.accel_z) for s in samples])

    def __len__(self) -> int:
        return self._values.shape[0]

    def __getitem__(self, index: int) -> Sample:
        x, y, z = self._values[index]
        return Sample(float(x), float(y), float(z))

    def __iter__(self) -> Iterator[Sample]:
        for x, y, z in self._values:
            yield Sample(float(x), float(y), float(z))

    def values(self, start: int = 0, stop: int | None = None) -> np.ndarray:
        """Return a read-only view of rows ``[start, stop)``."""
        return self._values[start:stop]
