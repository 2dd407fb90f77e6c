"""Input validation with clear error messages for rectangle constructors."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

BOUNDS_COLUMNS = ("minx", "miny", "maxx", "maxy")


def validate_ordinates(values: Any) -> np.ndarray:
    """Validate that values hold exactly four numeric ordinates.

    Returns a flat float64 array ``[x1, y1, x2, y2]``. Non-finite values
    are allowed through untouched.
    """
    if isinstance(values, (str, bytes)):
        raise TypeError(
            f"Expected four numeric ordinates, got {type(values).__name__}."
        )
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError):
        raise TypeError(
            f"Expected four numeric ordinates, got {values!r}. "
            "Pass a sequence like [x1, y1, x2, y2]."
        ) from None
    arr = arr.ravel()
    if arr.shape != (4,):
        raise ValueError(
            f"Expected exactly 4 ordinates [x1, y1, x2, y2], got {arr.size}."
        )
    return arr


def validate_pair(value: Any, name: str = "point") -> tuple[float, float]:
    """Validate an (x, y) pair, accepting Point or any two-item sequence."""
    try:
        x, y = value
    except (TypeError, ValueError):
        raise TypeError(
            f"{name} must be a Point or an (x, y) pair, "
            f"got {type(value).__name__}."
        ) from None
    try:
        return float(x), float(y)
    except (TypeError, ValueError):
        raise TypeError(
            f"{name} ordinates must be numeric, got ({x!r}, {y!r})."
        ) from None


def validate_bounds_frame(data: Any) -> pd.DataFrame:
    """Validate that data is a DataFrame with numeric bounds columns.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}. "
            f"Build one with columns {list(BOUNDS_COLUMNS)}."
        )
    missing = [c for c in BOUNDS_COLUMNS if c not in data.columns]
    if missing:
        raise ValueError(
            f"Bounds frame is missing columns: {missing}. "
            f"Available: {list(data.columns)[:5]}"
            + (f" (and {len(data.columns) - 5} more)" if len(data.columns) > 5 else "")
        )
    bounds = data.loc[:, list(BOUNDS_COLUMNS)]
    numeric_df = bounds.select_dtypes(include=[np.number])
    if numeric_df.shape[1] != bounds.shape[1]:
        non_numeric = [c for c in bounds.columns if c not in numeric_df.columns]
        raise TypeError(
            f"Bounds columns must be numeric. Non-numeric columns: {non_numeric}"
        )
    return data
