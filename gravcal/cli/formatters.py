"""Text and JSON rendering of calibration results."""

import json

from gravcal.correction import Correction
from gravcal.pipeline import CalibrationResult

__all__ = ["format_correction", "format_json", "format_text"]


def format_correction(correction: Correction) -> str:
    """Render one correction as a tab-separated line."""
    return (
        f"Axis: {correction.axis}\t"
        f"Offset d: {correction.offset:f}\t"
        f"Gain factor a: {correction.gain:f}"
    )


def format_text(result: CalibrationResult) -> str:
    """Render all corrections, one line per axis."""
    return "\n".join(format_correction(c) for c in result.corrections)


def format_json(result: CalibrationResult) -> str:
    """Serialize the corrections and run counts into a JSON document."""
    return json.dumps({
        "corrections": [
            {"axis": c.axis, "offset": c.offset, "gain": c.gain}
            for c in result.corrections
        ],
        "samples": result.sample_count,
        "epochs": result.epoch_count,
        "retained_epochs": result.retained_epoch_count,
    })
