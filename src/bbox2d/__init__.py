"""bbox2d: axis-aligned bounding rectangles with a full geometric algebra."""

from ._version import __version__
from .core.point import Point
from .core.rectangle import Rectangle
from .export.frame import to_frame, from_frame, total_bounds
from .export.wkt import format_ordinate, polygon_wkt

__all__ = [
    "__version__",
    "Point",
    "Rectangle",
    "to_frame",
    "from_frame",
    "total_bounds",
    "format_ordinate",
    "polygon_wkt",
]
