"""CSV ingestion of accelerometer captures.

File format:
    Header-less, comma-separated rows. The first three fields of each row
    are the x, y, z accelerations in m/s²; any further fields are ignored.
    Rows are taken in file order, which is assumed to be temporal order at
    a fixed sample rate.

Every parsing problem surfaces as ``IngestionError`` before the numeric
pipeline runs, so a capture is either accepted whole or rejected.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from gravcal.errors import IngestionError
from gravcal.samples.types import SampleStore

__all__ = ["read_samples"]

logger = logging.getLogger(__name__)

_COLUMNS = ("accel_x", "accel_y", "accel_z")


def _load_frame(path: Path) -> pd.DataFrame:
    """Read the raw CSV text into a frame of strings."""
    try:
        return pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=range(len(_COLUMNS)), dtype=str)
    except pd.errors.ParserError as e:
        raise IngestionError(f"Unable to parse file as CSV at path {path}: {e}") from e
    except OSError as e:
        raise IngestionError(f"Unable to read input file at path {path}") from e
    except UnicodeDecodeError as e:
        raise IngestionError(f"Unable to decode input file at path {path}") from e


def _to_values(frame: pd.DataFrame, path: Path) -> np.ndarray:
    """Convert the first three columns to floats, rejecting bad rows.

    Args:
        frame: Raw string frame as returned by ``_load_frame``.
        path: Source path, used only in error messages.

    Returns:
        Array of shape ``(n, 3)``.

    Raises:
        IngestionError: If a row is short or a field is non-numeric.
    """
    if frame.empty:
        return np.empty((0, len(_COLUMNS)), dtype=np.float64)
    if frame.shape[1] < len(_COLUMNS):
        raise IngestionError(
            f"Expected at least {len(_COLUMNS)} columns in {path}, found {frame.shape[1]}."
        )

    columns = frame.iloc[:, : len(_COLUMNS)]
    missing = columns.isna().any(axis=1)
    if missing.any():
        row = int(missing.idxmax()) + 1
        raise IngestionError(f"Row {row} of {path} has fewer than {len(_COLUMNS)} fields.")

    numeric = columns.apply(lambda col: pd.to_numeric(col.str.strip(), errors="coerce"))
    invalid = numeric.isna().any(axis=1)
    if invalid.any():
        row = int(invalid.idxmax()) + 1
        fields = ",".join(columns.loc[invalid.idxmax()].tolist())
        raise IngestionError(f"Row {row} of {path} is not numeric: {fields!r}")

    return numeric.to_numpy(dtype=np.float64)


def read_samples(source: str | Path) -> SampleStore:
    """Read a CSV capture into a ``SampleStore``.

    Args:
        source: Path of the CSV file.

    Returns:
        Store holding one sample per row, in file order. An empty file
        yields an empty store.

    Raises:
        IngestionError: If the file cannot be read or parsed, a row has fewer
            than three fields, or any of the first three fields is not a
            number.
    """
    path = Path(source)
    values = _to_values(_load_frame(path), path)
    store = SampleStore(values)
    logger.info("Read %d samples from %s", len(store), path)
    return store
