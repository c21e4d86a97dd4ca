"""Gravity-based accelerometer calibration from recorded captures."""

from gravcal.config import CalibrationConfig
from gravcal.correction import Correction, CorrectionEstimator, epoch_weight
from gravcal.epochs import (
    Epoch,
    EpochSummary,
    epoch_mean,
    epoch_norm,
    epoch_size_for,
    epoch_standard_deviation,
    filter_epochs,
    segment_epochs,
    summarize_epoch,
)
from gravcal.errors import (
    CalibrationError,
    ConfigurationError,
    DomainError,
    EmptyEpochSetError,
    EmptyInputError,
    IngestionError,
    InvalidIterationCountError,
    InvalidThresholdError,
    MissingInputError,
)
from gravcal.pipeline import CalibrationResult, calibrate, run_calibration
from gravcal.samples import Sample, SampleStore, read_samples

__all__ = [
    "CalibrationConfig",
    "CalibrationError",
    "CalibrationResult",
    "ConfigurationError",
    "Correction",
    "CorrectionEstimator",
    "DomainError",
    "EmptyEpochSetError",
    "EmptyInputError",
    "Epoch",
    "EpochSummary",
    "IngestionError",
    "InvalidIterationCountError",
    "InvalidThresholdError",
    "MissingInputError",
    "Sample",
    "SampleStore",
    "calibrate",
    "epoch_mean",
    "epoch_norm",
    "epoch_size_for",
    "epoch_standard_deviation",
    "epoch_weight",
    "filter_epochs",
    "read_samples",
    "run_calibration",
    "segment_epochs",
    "summarize_epoch",
]
