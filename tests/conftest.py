"""Pytest fixtures shared across the test suite."""

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes rows or raw text to a CSV file in tmp_path."""

    def _write(content, name: str = "capture.csv") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            np.savetxt(path, np.asarray(content, dtype=np.float64), delimiter=",")
        return path

    return _write
