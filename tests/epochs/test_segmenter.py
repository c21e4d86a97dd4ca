"""Tests for epoch segmentation."""

import numpy as np
import pytest

from gravcal import Epoch, SampleStore, epoch_size_for, segment_epochs
from tests.helpers import make_store


def _store(n: int) -> SampleStore:
    return make_store(np.arange(n * 3, dtype=np.float64).reshape(n, 3))


class TestEpochSizeFor:
    """Tests for deriving the epoch length from the sample rate."""

    def test_thirty_hertz(self):
        assert epoch_size_for(30.0) == 300

    def test_custom_duration(self):
        assert epoch_size_for(100.0, epoch_seconds=2.5) == 250

    def test_too_short(self):
        with pytest.raises(ValueError):
            epoch_size_for(1.0, epoch_seconds=0.2)


class TestSegmentEpochs:
    """Tests for segment_epochs."""

    def test_exact_multiple(self):
        epochs = list(segment_epochs(_store(600), 300))
        assert [e.size for e in epochs] == [300, 300]

    def test_remainder_epoch(self):
        epochs = list(segment_epochs(_store(310), 300))
        assert [e.size for e in epochs] == [300, 10]
        assert (epochs[1].start, epochs[1].stop) == (300, 310)

    def test_fewer_samples_than_epoch(self):
        epochs = list(segment_epochs(_store(7), 300))
        assert len(epochs) == 1
        assert epochs[0].size == 7

    def test_empty_store_yields_no_epochs(self):
        assert list(segment_epochs(_store(0), 300)) == []

    @pytest.mark.parametrize("n, size", [(1, 1), (10, 3), (301, 300), (97, 10), (5, 5)])
    def test_concatenation_reproduces_input(self, n, size):
        store = _store(n)
        epochs = list(segment_epochs(store, size))
        joined = np.concatenate([e.values for e in epochs])
        np.testing.assert_array_equal(joined, store.values())
        assert all(e.size == size for e in epochs[:-1])
        assert 1 <= epochs[-1].size <= size

    def test_is_lazy(self):
        epochs = segment_epochs(_store(900), 300)
        assert next(epochs).start == 0
        assert next(epochs).start == 300

    @pytest.mark.parametrize("size", [0, -3])
    def test_rejects_non_positive_size(self, size):
        with pytest.raises(ValueError):
            list(segment_epochs(_store(10), size))

    def test_epochs_share_the_store(self):
        store = _store(20)
        epochs = list(segment_epochs(store, 10))
        assert all(e.store is store for e in epochs)
        assert np.shares_memory(epochs[1].values, store.values())


class TestEpoch:
    """Tests for the Epoch view type."""

    def test_samples(self):
        store = make_store([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        epoch = Epoch(store, 1, 3)
        assert [s.accel_y for s in epoch.samples] == [5.0, 8.0]

    @pytest.mark.parametrize("start, stop", [(2, 2), (3, 1), (-1, 2), (0, 4)])
    def test_rejects_invalid_range(self, start, stop):
        store = make_store([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        with pytest.raises(ValueError):
            Epoch(store, start, stop)

    def test_values_are_read_only(self):
        epoch = Epoch(make_store([[1, 2, 3]]), 0, 1)
        with pytest.raises(ValueError):
            epoch.values[0, 0] = 0.0
