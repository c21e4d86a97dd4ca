"""Tests for noise-threshold epoch filtering."""

import numpy as np
import pytest

from gravcal import EmptyEpochSetError, EmptyInputError, Epoch, filter_epochs, segment_epochs
from gravcal.epochs import is_quiet
from tests.helpers import make_store, resting_values


def _alternating(amplitude: float, n: int = 10) -> np.ndarray:
    """Rows whose x axis alternates ±amplitude around 0: sd exactly *amplitude*."""
    rows = np.zeros((n, 3))
    rows[:, 2] = 9.81
    rows[::2, 0] = amplitude
    rows[1::2, 0] = -amplitude
    return rows


class TestFilterEpochs:
    """Tests for filter_epochs."""

    def test_keeps_quiet_epochs_in_order(self):
        rows = np.concatenate([_alternating(0.01), _alternating(1.0), _alternating(0.02)])
        epochs = list(segment_epochs(make_store(rows), 10))
        retained = filter_epochs(epochs, 0.05)
        assert retained == [epochs[0], epochs[2]]

    def test_boundary_is_excluded(self):
        epoch = Epoch(make_store(_alternating(1.0)), 0, 10)
        assert filter_epochs([epoch], 1.0) == []
        assert filter_epochs([epoch], 1.0 + 1e-9) == [epoch]

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_any_noisy_axis_rejects(self, axis):
        rows = np.zeros((10, 3))
        rows[::2, axis] = 0.5
        epoch = Epoch(make_store(rows), 0, 10)
        assert not is_quiet(epoch, 0.1)
        assert filter_epochs([epoch], 0.1) == []

    def test_all_rejected_is_not_an_error(self):
        epochs = list(segment_epochs(make_store(_alternating(1.0, n=30)), 10))
        assert filter_epochs(epochs, 0.5) == []

    def test_empty_input_raises(self):
        with pytest.raises(EmptyEpochSetError):
            filter_epochs([], 1.0)

    def test_empty_generator_raises(self):
        with pytest.raises(EmptyInputError):
            filter_epochs(segment_epochs(make_store(np.empty((0, 3))), 300), 1.0)

    def test_accepts_generator(self):
        store = make_store(resting_values(310))
        assert len(filter_epochs(segment_epochs(store, 300), 0.05)) == 2

    def test_monotonic_in_threshold(self):
        rng = np.random.default_rng(7)
        noise = np.repeat(rng.uniform(0.001, 0.5, size=20), 10)[:, None]
        rows = rng.normal(0.0, 1.0, size=(200, 3)) * noise
        epochs = list(segment_epochs(make_store(rows), 10))
        counts = [len(filter_epochs(epochs, t)) for t in np.linspace(0.01, 1.0, 25)]
        assert counts == sorted(counts)

    def test_logs_counts(self, caplog):
        epochs = list(segment_epochs(make_store(_alternating(0.01, n=20)), 10))
        with caplog.at_level("INFO", logger="gravcal.epochs.filter"):
            filter_epochs(epochs, 0.05)
        assert "Retained 2 of 2 epochs" in caplog.text
