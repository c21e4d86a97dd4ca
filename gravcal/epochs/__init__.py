"""Epoch segmentation, statistics, and noise filtering."""

from gravcal.epochs.filter import filter_epochs, is_quiet
from gravcal.epochs.segmenter import epoch_size_for, segment_epochs
from gravcal.epochs.statistics import (
    epoch_mean,
    epoch_norm,
    epoch_standard_deviation,
    summarize_epoch,
)
from gravcal.epochs.types import Epoch, EpochSummary

__all__ = [
    "Epoch",
    "EpochSummary",
    "epoch_mean",
    "epoch_norm",
    "epoch_size_for",
    "epoch_standard_deviation",
    "filter_epochs",
    "is_quiet",
    "segment_epochs",
    "summarize_epoch",
]
