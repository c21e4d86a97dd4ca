"""Accelerometer samples and CSV ingestion."""

from gravcal.samples.reader import read_samples
from gravcal.samples.types import Sample, SampleStore

__all__ = [
    "Sample",
    "SampleStore",
    "read_samples",
]
