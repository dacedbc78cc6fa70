# minimal_esn/reporting.py
from typing import List, TextIO, Optional
import sys
import numpy as np

from minimal_esn.exceptions import DimensionMismatchError


def _as_columns(values: np.ndarray) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    return arr.reshape(-1, 1) if arr.ndim < 2 else arr


def format_predictions(inputs: np.ndarray, predictions: np.ndarray) -> List[str]:
    inputs = _as_columns(inputs)
    predictions = _as_columns(predictions)
    if len(inputs) != len(predictions):
        raise DimensionMismatchError(
            f"Got {len(inputs)} inputs but {len(predictions)} predictions")
    lines = ["Test predictions:"]
    for t, (u, y) in enumerate(zip(inputs, predictions)):
        lines.append(f"t={t:3d}, input={u[0]:.3f}, predict={y[0]:.3f}")
    return lines


def print_predictions(inputs: np.ndarray, predictions: np.ndarray, stream: Optional[TextIO] = None):
    stream = stream if stream is not None else sys.stdout
    for line in format_predictions(inputs, predictions):
        print(line, file=stream)
