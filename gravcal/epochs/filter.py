"""Keep only low-noise epochs suitable for gravity-based calibration."""

import logging
from collections.abc import Iterable

from gravcal.epochs.statistics import epoch_standard_deviation
from gravcal.epochs.types import Epoch
from gravcal.errors import EmptyEpochSetError

__all__ = ["filter_epochs", "is_quiet"]

logger = logging.getLogger(__name__)


def is_quiet(epoch: Epoch, threshold: float) -> bool:
    """Return True if every axis deviates strictly less than *threshold*."""
    sd_x, sd_y, sd_z = epoch_standard_deviation(epoch)
    return sd_x < threshold and sd_y < threshold and sd_z < threshold


def filter_epochs(epochs: Iterable[Epoch], threshold: float) -> list[Epoch]:
    """Return the epochs whose per-axis standard deviation is below *threshold*.

    Order is preserved. An epoch whose deviation equals *threshold* on any
    axis is rejected. Rejecting every epoch is a valid outcome and returns
    an empty list; receiving no epochs at all is an error.

    Args:
        epochs: Epochs in temporal order, e.g. from ``segment_epochs``.
        threshold: Maximum acceptable per-axis standard deviation.

    Returns:
        The retained epochs.

    Raises:
        EmptyEpochSetError: If *epochs* is empty.
    """
    total = 0
    retained: list[Epoch] = []
    for epoch in epochs:
        total += 1
        if is_quiet(epoch, threshold):
            retained.append(epoch)

    if total == 0:
        raise EmptyEpochSetError("No epochs to pre-process.")

    logger.info("Retained %d of %d epochs below threshold %g", len(retained), total, threshold)
    return retained
