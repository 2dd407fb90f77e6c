"""WKT formatting: ordinates and closed rings as Well-Known Text."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


def format_ordinate(value: float, precision: int | None = None) -> str:
    """Format an ordinate as the shortest positional decimal.

    Integral values drop the fractional part (``2`` rather than ``2.0``)
    and exponents are never used. ``precision`` caps the number of
    fractional digits.
    """
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}.")
    return np.format_float_positional(
        float(value), precision=precision, unique=True, trim="-",
    )


def polygon_wkt(
    ring: Iterable[Sequence[float]],
    precision: int | None = None,
) -> str:
    """Render a closed ring of (x, y) pairs as ``POLYGON ((x y,...))``.

    Parameters
    ----------
    ring : iterable of (x, y)
        Vertices in order. The first and last vertex must coincide.
    precision : int, optional
        Maximum fractional digits per ordinate.
    """
    coords = np.asarray([tuple(p) for p in ring], dtype=np.float64)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError("Ring vertices must be (x, y) pairs.")
    if coords.shape[0] < 4:
        raise ValueError(
            f"A closed ring needs at least 4 vertices, got {coords.shape[0]}."
        )
    if not np.array_equal(coords[0], coords[-1], equal_nan=True):
        raise ValueError(
            f"Ring is not closed: first vertex {tuple(coords[0])} "
            f"!= last vertex {tuple(coords[-1])}."
        )
    body = ",".join(
        f"{format_ordinate(x, precision)} {format_ordinate(y, precision)}"
        for x, y in coords
    )
    return f"POLYGON (({body}))"
