"""End-to-end calibration run: ingest, segment, filter, estimate.

Stages run strictly in sequence and the first failure aborts the run::

    read_samples -> segment_epochs -> filter_epochs -> CorrectionEstimator

Filtering away every epoch is not itself an error, but the estimator then
has nothing to work from and raises ``EmptyEpochSetError``.
"""

import logging
from dataclasses import dataclass

from gravcal.config import CalibrationConfig
from gravcal.correction import Correction, CorrectionEstimator
from gravcal.epochs import filter_epochs, segment_epochs
from gravcal.errors import EmptyEpochSetError
from gravcal.samples import SampleStore, read_samples

__all__ = ["CalibrationResult", "calibrate", "run_calibration"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalibrationResult:
    """Outcome of one calibration run.

    Attributes:
        corrections: X, Y, Z corrections in that order.
        sample_count: Number of samples ingested.
        epoch_count: Number of epochs the samples were split into.
        retained_epoch_count: Number of epochs that passed the noise filter.
    """

    corrections: tuple[Correction, Correction, Correction]
    sample_count: int
    epoch_count: int
    retained_epoch_count: int


def calibrate(store: SampleStore, config: CalibrationConfig) -> CalibrationResult:
    """Run segmentation, filtering, and estimation over an in-memory store.

    Raises:
        EmptyEpochSetError: If *store* is empty, or no epoch passes the filter.
        DomainError: If a retained epoch's gravity magnitude equals ``g``.
    """
    epochs = list(segment_epochs(store, config.epoch_size))
    logger.info(
        "Split %d samples into %d epochs of up to %d", len(store), len(epochs), config.epoch_size
    )

    retained = filter_epochs(epochs, config.threshold)
    if not retained:
        logger.warning("No epoch has every axis below threshold %g", config.threshold)
        raise EmptyEpochSetError(
            f"No retained epochs to estimate from: all {len(epochs)} epochs "
            f"exceed threshold {config.threshold}."
        )

    corrections = CorrectionEstimator.from_config(config).estimate(retained)
    return CalibrationResult(
        corrections=corrections,
        sample_count=len(store),
        epoch_count=len(epochs),
        retained_epoch_count=len(retained),
    )


def run_calibration(config: CalibrationConfig) -> CalibrationResult:
    """Calibrate from the CSV capture named by ``config.source``.

    Raises:
        IngestionError: If the capture cannot be read.
        EmptyEpochSetError: If there are no epochs, or none is retained.
        DomainError: If a retained epoch's gravity magnitude equals ``g``.
    """
    return calibrate(read_samples(config.source), config)
