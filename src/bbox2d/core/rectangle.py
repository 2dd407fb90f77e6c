"""Rectangle: axis-aligned minimum bounding rectangle and its algebra."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Any, Iterator

import numpy as np

from .point import Point
from .validation import validate_ordinates, validate_pair
from ..export.wkt import polygon_wkt


def _min(a: float, b: float) -> float:
    """Smaller ordinate; NaN in either position gives NaN."""
    return float(np.minimum(a, b))


def _max(a: float, b: float) -> float:
    """Larger ordinate; NaN in either position gives NaN."""
    return float(np.maximum(a, b))


def _axis_gap(amin: float, amax: float, bmin: float, bmax: float) -> float:
    """Separation between two intervals on one axis, 0 when they overlap."""
    gap = _max(amin, bmin) - _min(amax, bmax)
    if gap > 0.0 or math.isnan(gap):
        return gap
    return 0.0


@total_ordering
class Rectangle:
    """Axis-aligned bounding rectangle defined by (minx, miny, maxx, maxy).

    The raw constructor stores the four ordinates as given, without
    reordering them; use :meth:`from_bounds`, :meth:`from_corners` or
    :meth:`from_array` to build a normalized rectangle from arbitrary
    corners. Rectangles compare by exact ordinate equality and order
    lexicographically by ``(minx, miny, maxx, maxy)``.

    The ``expand_*`` methods mutate the receiver and return it so calls
    can be chained. Every other operation returns a new value.
    """

    __slots__ = ("minx", "miny", "maxx", "maxy")

    __hash__ = None  # mutable

    def __init__(
        self,
        minx: float = 0.0,
        miny: float = 0.0,
        maxx: float = 0.0,
        maxy: float = 0.0,
    ) -> None:
        self.minx = float(minx)
        self.miny = float(miny)
        self.maxx = float(maxx)
        self.maxy = float(maxy)

    # --- construction ---

    @classmethod
    def default(cls) -> Rectangle:
        """Degenerate rectangle at the origin."""
        return cls()

    @classmethod
    def from_bounds(cls, x1: float, y1: float, x2: float, y2: float) -> Rectangle:
        """Create a rectangle from two opposite corners given in any order."""
        return cls(_min(x1, x2), _min(y1, y2), _max(x1, x2), _max(y1, y2))

    @classmethod
    def from_corners(cls, p1: Point | tuple, p2: Point | tuple) -> Rectangle:
        x1, y1 = validate_pair(p1, "p1")
        x2, y2 = validate_pair(p2, "p2")
        return cls.from_bounds(x1, y1, x2, y2)

    @classmethod
    def from_point(cls, p: Point | tuple) -> Rectangle:
        x, y = validate_pair(p)
        return cls(x, y, x, y)

    @classmethod
    def from_array(cls, values: Any) -> Rectangle:
        """Create a rectangle from ``[x1, y1, x2, y2]``, normalizing corners.

        Accepts lists, tuples, numpy arrays, or another Rectangle.
        """
        x1, y1, x2, y2 = validate_ordinates(values).tolist()
        return cls.from_bounds(x1, y1, x2, y2)

    @classmethod
    def from_dict(cls, d: dict) -> Rectangle:
        """Inverse of :meth:`to_dict`. Corners are taken as stored."""
        ll = Point.from_dict(d["ll"])
        ur = Point.from_dict(d["ur"])
        return cls(ll.x, ll.y, ur.x, ur.y)

    def copy(self) -> Rectangle:
        return Rectangle(self.minx, self.miny, self.maxx, self.maxy)

    # --- accessors ---

    @property
    def width(self) -> float:
        return self.maxx - self.minx

    @property
    def height(self) -> float:
        return self.maxy - self.miny

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_point(self) -> bool:
        """True when the rectangle has zero width and zero height."""
        return self.width == 0.0 and self.height == 0.0

    @property
    def centre(self) -> Point:
        return Point((self.minx + self.maxx) / 2.0, (self.miny + self.maxy) / 2.0)

    center = centre

    @property
    def lower_left(self) -> Point:
        return Point(self.minx, self.miny)

    @property
    def upper_right(self) -> Point:
        return Point(self.maxx, self.maxy)

    def llur(self) -> tuple[Point, Point]:
        """Lower-left and upper-right corners."""
        return (self.lower_left, self.upper_right)

    def bbox(self) -> Rectangle:
        """Bounding box of this rectangle, which is the rectangle itself."""
        return self

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.minx, self.miny, self.maxx, self.maxy)

    def as_array(self) -> np.ndarray:
        """Ordinates as a float64 array ``[minx, miny, maxx, maxy]``."""
        return np.array(self.as_tuple(), dtype=np.float64)

    def as_poly_array(self) -> list[Point]:
        """Boundary as a closed ring of five points starting at lower-left."""
        ll = Point(self.minx, self.miny)
        return [
            ll,
            Point(self.minx, self.maxy),
            Point(self.maxx, self.maxy),
            Point(self.maxx, self.miny),
            ll,
        ]

    def to_dict(self) -> dict:
        return {"ll": self.lower_left.to_dict(), "ur": self.upper_right.to_dict()}

    def wkt(self, precision: int | None = None) -> str:
        """Well-Known Text polygon, e.g. ``POLYGON ((0 0,0 2,2 2,2 0,0 0))``."""
        return polygon_wkt(self.as_poly_array(), precision=precision)

    # --- equality ---

    def equals(self, other: Rectangle) -> bool:
        return self == other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (
            self.minx == other.minx
            and self.miny == other.miny
            and self.maxx == other.maxx
            and self.maxy == other.maxy
        )

    def __lt__(self, other: Rectangle) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    # --- containment ---

    def contains(self, other: Rectangle) -> bool:
        """True if other lies within this rectangle; boundaries may touch."""
        return (
            other.minx >= self.minx
            and other.miny >= self.miny
            and other.maxx <= self.maxx
            and other.maxy <= self.maxy
        )

    def completely_contains(self, other: Rectangle) -> bool:
        """True if other lies strictly inside, without touching boundaries."""
        return (
            other.minx > self.minx
            and other.miny > self.miny
            and other.maxx < self.maxx
            and other.maxy < self.maxy
        )

    def contains_xy(self, x: float, y: float) -> bool:
        return self.minx <= x <= self.maxx and self.miny <= y <= self.maxy

    def contains_point(self, p: Point | tuple) -> bool:
        return self.contains_xy(*validate_pair(p))

    def completely_contains_xy(self, x: float, y: float) -> bool:
        return self.minx < x < self.maxx and self.miny < y < self.maxy

    # --- intersection ---

    def intersects(self, other: Rectangle) -> bool:
        """True if the rectangles overlap or touch at an edge or corner."""
        return not (
            other.maxx < self.minx
            or other.minx > self.maxx
            or other.maxy < self.miny
            or other.miny > self.maxy
        )

    def intersects_xy(self, x: float, y: float) -> bool:
        return self.contains_xy(x, y)

    def intersects_point(self, p: Point | tuple) -> bool:
        return self.contains_point(p)

    def intersects_bounds(self, p1: Point | tuple, p2: Point | tuple) -> bool:
        """True if this intersects the rectangle spanned by corners p1 and p2."""
        return self.intersects(Rectangle.from_corners(p1, p2))

    def disjoint(self, other: Rectangle) -> bool:
        return not self.intersects(other)

    def intersection(self, other: Rectangle) -> Rectangle | None:
        """Overlap of the two rectangles, or None when they are disjoint.

        Rectangles that only touch produce a degenerate overlap (a segment
        or a point), which is still a rectangle and not None.
        """
        if not self.intersects(other):
            return None
        return Rectangle(
            _max(self.minx, other.minx),
            _max(self.miny, other.miny),
            _min(self.maxx, other.maxx),
            _min(self.maxy, other.maxy),
        )

    def union(self, other: Rectangle) -> Rectangle:
        """Smallest rectangle enclosing both rectangles."""
        return Rectangle(
            _min(self.minx, other.minx),
            _min(self.miny, other.miny),
            _max(self.maxx, other.maxx),
            _max(self.maxy, other.maxy),
        )

    def __and__(self, other: Rectangle) -> Rectangle | None:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.intersection(other)

    def __or__(self, other: Rectangle) -> Rectangle:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.union(other)

    __add__ = __or__

    # --- mutation ---

    def expand_to_include(self, other: Rectangle) -> Rectangle:
        """Grow in place to cover other. Returns self."""
        self.minx = _min(self.minx, other.minx)
        self.miny = _min(self.miny, other.miny)
        self.maxx = _max(self.maxx, other.maxx)
        self.maxy = _max(self.maxy, other.maxy)
        return self

    def expand_to_include_xy(self, x: float, y: float) -> Rectangle:
        """Grow in place so (x, y) lies within or on the bounds. Returns self."""
        self.minx = _min(self.minx, x)
        self.miny = _min(self.miny, y)
        self.maxx = _max(self.maxx, x)
        self.maxy = _max(self.maxy, y)
        return self

    def expand_to_include_point(self, p: Point | tuple) -> Rectangle:
        return self.expand_to_include_xy(*validate_pair(p))

    def expand_by_delta(self, dx: float, dy: float) -> Rectangle:
        """Pad each side in place by dx horizontally and dy vertically.

        Negative deltas shrink the rectangle. Shrinking past the centre
        leaves inverted bounds (minx > maxx or miny > maxy) as they are.
        """
        self.minx -= dx
        self.maxx += dx
        self.miny -= dy
        self.maxy += dy
        return self

    # --- translation ---

    def translate(self, dx: float, dy: float) -> Rectangle:
        return Rectangle(
            self.minx + dx, self.miny + dy, self.maxx + dx, self.maxy + dy,
        )

    # --- distance ---

    def distance_dxdy(self, other: Rectangle) -> tuple[float, float]:
        """Per-axis gap to other; an axis on which they overlap gives 0."""
        dx = _axis_gap(self.minx, self.maxx, other.minx, other.maxx)
        dy = _axis_gap(self.miny, self.maxy, other.miny, other.maxy)
        return (dx, dy)

    def distance_square(self, other: Rectangle) -> float:
        dx, dy = self.distance_dxdy(other)
        return dx * dx + dy * dy

    def distance(self, other: Rectangle) -> float:
        """Euclidean distance between the nearest edges, 0 if they touch."""
        return math.hypot(*self.distance_dxdy(other))

    def distance_square_to_point(self, p: Point | tuple) -> float:
        return self.distance_square(Rectangle.from_point(p))

    def distance_to_point(self, p: Point | tuple) -> float:
        return self.distance(Rectangle.from_point(p))

    # --- sequence protocol ---

    def __getitem__(self, index: int) -> float:
        return self.as_tuple()[index]

    def __len__(self) -> int:
        return 4

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        return f"Rectangle({self.minx!r}, {self.miny!r}, {self.maxx!r}, {self.maxy!r})"

    def __str__(self) -> str:
        return self.wkt()
