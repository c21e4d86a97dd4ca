"""Split a sample store into fixed-size, non-overlapping epochs."""

from collections.abc import Iterator

from gravcal.epochs.types import Epoch
from gravcal.samples.types import SampleStore

__all__ = ["epoch_size_for", "segment_epochs"]


def epoch_size_for(sample_rate_hz: float, epoch_seconds: float = 10.0) -> int:
    """Return the number of samples in an epoch of *epoch_seconds*.

    Example:
        >>> epoch_size_for(30.0)
        300

    Raises:
        ValueError: If the epoch would hold fewer than one sample.
    """
    size = round(sample_rate_hz * epoch_seconds)
    if size < 1:
        raise ValueError(
            f"An epoch of {epoch_seconds}s at {sample_rate_hz} Hz holds no samples."
        )
    return size


def segment_epochs(store: SampleStore, epoch_size: int) -> Iterator[Epoch]:
    """Slice *store* into consecutive epochs of *epoch_size* samples.

    Every epoch but the last has exactly *epoch_size* samples; the last one
    holds whatever remains (between 1 and *epoch_size*). Concatenating the
    epochs in order reproduces the store. An empty store yields nothing.

    Args:
        store: Samples in temporal order.
        epoch_size: Samples per full epoch.

    Yields:
        Epoch views into *store*, in order.

    Raises:
        ValueError: If *epoch_size* is less than 1.
    """
    if epoch_size < 1:
        raise ValueError(f"Epoch size must be at least 1, got {epoch_size}.")

    n = len(store)
    for start in range(0, n, epoch_size):
        yield Epoch(store, start, min(start + epoch_size, n))
