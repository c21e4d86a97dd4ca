"""Helpers for building sample stores in tests."""

import numpy as np

from gravcal.samples import SampleStore


def make_store(rows) -> SampleStore:
    """Build a SampleStore from a list of (x, y, z) rows."""
    return SampleStore(np.asarray(rows, dtype=np.float64))


def resting_values(n: int, gravity: float = 9.81, noise: float = 0.01, seed: int = 0) -> np.ndarray:
    """Return *n* noisy samples of a sensor lying flat, z axis up."""
    rng = np.random.default_rng(seed)
    values = np.tile([0.0, 0.0, gravity], (n, 1))
    return values + rng.normal(0.0, noise, size=(n, 3))
