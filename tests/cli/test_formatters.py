"""Tests for result formatting."""

import json

from gravcal import CalibrationResult, Correction
from gravcal.cli.formatters import format_correction, format_json, format_text


def _result() -> CalibrationResult:
    return CalibrationResult(
        corrections=(
            Correction("X", -1.5, -0.5),
            Correction("Y", -1.5, -0.5),
            Correction("Z", -1.5, -0.5),
        ),
        sample_count=310,
        epoch_count=2,
        retained_epoch_count=1,
    )


class TestFormatCorrection:
    """Tests for format_correction."""

    def test_six_decimals(self):
        line = format_correction(Correction("Y", 0.25, 1.0))
        assert line == "Axis: Y\tOffset d: 0.250000\tGain factor a: 1.000000"


class TestFormatText:
    """Tests for format_text."""

    def test_one_line_per_axis(self):
        lines = format_text(_result()).splitlines()
        assert [line[:7] for line in lines] == ["Axis: X", "Axis: Y", "Axis: Z"]


class TestFormatJson:
    """Tests for format_json."""

    def test_document(self):
        document = json.loads(format_json(_result()))
        assert document == {
            "corrections": [
                {"axis": "X", "offset": -1.5, "gain": -0.5},
                {"axis": "Y", "offset": -1.5, "gain": -0.5},
                {"axis": "Z", "offset": -1.5, "gain": -0.5},
            ],
            "samples": 310,
            "epochs": 2,
            "retained_epochs": 1,
        }
