"""Per-epoch statistics used by the filter and the correction estimator.

All functions are pure: they read the epoch's sample slice and return new
values. Standard deviations are population deviations (divisor ``n``).
"""

import logging

import numpy as np

from gravcal.epochs.types import Epoch, EpochSummary

__all__ = [
    "epoch_mean",
    "epoch_norm",
    "epoch_standard_deviation",
    "summarize_epoch",
]

logger = logging.getLogger(__name__)

Vector3 = tuple[float, float, float]


def _as_vector(array: np.ndarray) -> Vector3:
    x, y, z = (float(v) for v in array)
    return x, y, z


def epoch_mean(epoch: Epoch) -> Vector3:
    """Return the per-axis arithmetic mean of *epoch*."""
    return _as_vector(epoch.values.mean(axis=0))


def epoch_standard_deviation(epoch: Epoch, mean: Vector3 | None = None) -> Vector3:
    """Return the per-axis population standard deviation of *epoch*.

    Args:
        epoch: Epoch to measure.
        mean: Precomputed ``epoch_mean(epoch)``; computed when omitted.
    """
    if mean is None:
        mean = epoch_mean(epoch)
    deviations = epoch.values - np.asarray(mean)
    return _as_vector(np.sqrt((deviations**2).sum(axis=0) / epoch.size))


def epoch_norm(epoch: Epoch) -> float:
    """Return the Euclidean norm of the epoch's mean acceleration vector."""
    logger.debug("Epoch [%d, %d) has %d samples", epoch.start, epoch.stop, epoch.size)
    return float(np.linalg.norm(epoch_mean(epoch)))


def summarize_epoch(epoch: Epoch) -> EpochSummary:
    """Compute mean, standard deviation, and mean norm of *epoch* in one pass."""
    mean = epoch_mean(epoch)
    return EpochSummary(
        mean=mean,
        standard_deviation=epoch_standard_deviation(epoch, mean),
        norm=float(np.linalg.norm(mean)),
    )
