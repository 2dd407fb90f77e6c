"""Bulk conversion between rectangles and pandas DataFrames."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from ..core.rectangle import Rectangle
from ..core.validation import BOUNDS_COLUMNS, validate_bounds_frame

logger = logging.getLogger(__name__)


def to_frame(
    rects: Iterable[Rectangle],
    index: Sequence | None = None,
) -> pd.DataFrame:
    """Build a bounds DataFrame with float64 columns minx, miny, maxx, maxy.

    Parameters
    ----------
    rects : iterable of Rectangle
    index : sequence, optional
        Row labels, one per rectangle (e.g. record IDs for an index).
    """
    rows = [r.as_tuple() for r in rects]
    values = np.array(rows, dtype=np.float64).reshape(len(rows), 4)
    if index is not None and len(index) != len(rows):
        raise ValueError(
            f"index has {len(index)} labels but {len(rows)} rectangles were given."
        )
    logger.debug("Converted %d rectangles to a bounds frame", len(rows))
    return pd.DataFrame(values, index=index, columns=list(BOUNDS_COLUMNS))


def from_frame(df: pd.DataFrame) -> list[Rectangle]:
    """Read one rectangle per row. Ordinates are stored as given."""
    df = validate_bounds_frame(df)
    values = df.loc[:, list(BOUNDS_COLUMNS)].to_numpy(dtype=np.float64)
    rects = [Rectangle(*row) for row in values.tolist()]
    logger.debug("Read %d rectangles from a bounds frame", len(rects))
    return rects


def total_bounds(rects: Iterable[Rectangle] | pd.DataFrame) -> Rectangle:
    """Smallest rectangle enclosing every input rectangle.

    Accepts a list of rectangles or a bounds DataFrame.
    """
    if isinstance(rects, pd.DataFrame):
        df = validate_bounds_frame(rects)
        if df.empty:
            raise ValueError("Cannot compute total bounds of an empty frame.")
        return Rectangle(
            df["minx"].min(skipna=False),
            df["miny"].min(skipna=False),
            df["maxx"].max(skipna=False),
            df["maxy"].max(skipna=False),
        )
    result = None
    for rect in rects:
        result = rect.copy() if result is None else result.expand_to_include(rect)
    if result is None:
        raise ValueError("Cannot compute total bounds of no rectangles.")
    return result
