"""Calibration correction output type."""

from dataclasses import dataclass

__all__ = ["AXES", "Correction"]

AXES = ("X", "Y", "Z")


@dataclass(frozen=True)
class Correction:
    """Per-axis calibration correction.

    Attributes:
        axis: Axis label, one of ``"X"``, ``"Y"``, ``"Z"``.
        offset: Additive correction ``d`` in m/s².
        gain: Multiplicative correction factor ``a``.
    """

    axis: str
    offset: float
    gain: float
