"""Core geometry algorithms for arcpath.

This module contains the algorithms for:

- Vector and polyline operations (offsets, areas, intersections)
- Circle and arc primitives (centers, intersections, parametric coordinates)
- Affine transforms
- The Path type and its editing operations
- Boolean operations between closed paths
- Offsetting and thickening of paths

Key functions:
- intersect_lines: Intersection of two infinite lines
- offset_polyline: Shift a polyline sideways, rejoining its corners
- get_circle_center: Center of the arc through two points
- intersect_line_and_circle: Crossings of a line with a circle
- offset_path: Offset a path segment by segment
- thicken_and_close: Turn an open path into a closed ribbon

Key classes:
- Path: Ordered boundary of line and arc segments
- AffineTransform: 2D affine map parsed from SVG transform lists
- BooleanEngine: Intersection, difference and union of two closed paths
- LoopWalker: Loop enumeration over two crossing orderings
"""

from arcpath.core.boolean import BooleanEngine, LoopWalker, Ordering, WalkState
from arcpath.core.circle import (
    get_circle_center,
    intersect_line_and_arc,
    intersect_line_and_circle,
    intersect_two_circles,
)
from arcpath.core.offset import offset_path, thicken_and_close
from arcpath.core.path import LengthInfo, Path
from arcpath.core.transform import AffineTransform
from arcpath.core.vector import (
    intersect_lines,
    intersect_polylines,
    offset_polyline,
    place_along,
    point_in_polygon,
    signed_area,
)

__all__ = [
    # Transform
    "AffineTransform",
    # Boolean engine
    "BooleanEngine",
    "LengthInfo",
    "LoopWalker",
    "Ordering",
    # Paths
    "Path",
    "WalkState",
    # Circle functions
    "get_circle_center",
    "intersect_line_and_arc",
    "intersect_line_and_circle",
    # Vector functions
    "intersect_lines",
    "intersect_polylines",
    "intersect_two_circles",
    "offset_path",
    "offset_polyline",
    "place_along",
    "point_in_polygon",
    "signed_area",
    "thicken_and_close",
]
