"""Per-axis offset and gain estimation."""

from gravcal.correction.estimator import MAX_WEIGHT, CorrectionEstimator, epoch_weight
from gravcal.correction.types import AXES, Correction

__all__ = [
    "AXES",
    "MAX_WEIGHT",
    "Correction",
    "CorrectionEstimator",
    "epoch_weight",
]
