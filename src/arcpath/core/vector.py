"""Planar vector primitives.

This module provides the point arithmetic every other part of arcpath is
built on:
- Vector arithmetic (sum, difference, scaling, dot and cross products)
- Angles and rotations
- Projections, reflections and side-of-line tests
- Line-line and polyline-polyline intersection
- Placement of points along a segment
- Polyline offsetting and polygon measures

Points are plain ``(x, y)`` tuples. All functions are pure and stateless.
Tolerances come from a ``GeometryConfig`` that defaults to the shared
``DEFAULT_TOLERANCE``.
"""

import math
from collections.abc import Sequence

from arcpath.config import DEFAULT_TOLERANCE, GeometryConfig
from arcpath.domain import Point, Point3
from arcpath.exceptions import ImpossibleGeometryError, PreconditionViolationError

TWO_PI = 2 * math.pi


def plus(p1: Point, p2: Point) -> Point:
    """Component-wise sum."""
    return (p1[0] + p2[0], p1[1] + p2[1])


def minus(p1: Point, p2: Point) -> Point:
    """Component-wise difference ``p1 - p2``."""
    return (p1[0] - p2[0], p1[1] - p2[1])


def mult(p: Point, factor: float) -> Point:
    """Scale a vector."""
    return (p[0] * factor, p[1] * factor)


def dot(u: Point, v: Point) -> float:
    return u[0] * v[0] + u[1] * v[1]


def cross(u: Point, v: Point) -> float:
    """Z component of the cross product of two planar vectors.

    Positive when ``v`` points to the left of ``u``.
    """
    return u[0] * v[1] - u[1] * v[0]


def norm(p1: Point, p2: Point | None = None) -> float:
    """Length of ``p1``, or distance between ``p1`` and ``p2``."""
    if p2 is None:
        return math.hypot(p1[0], p1[1])
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def unit(v: Point) -> Point:
    """Unit vector with the direction of ``v``.

    Raises:
        ImpossibleGeometryError: If ``v`` is the zero vector
    """
    length = norm(v)
    if length == 0:
        raise ImpossibleGeometryError("zero vector has no direction")
    return (v[0] / length, v[1] / length)


def left_normal(v: Point) -> Point:
    """``v`` rotated by +90 degrees."""
    return (-v[1], v[0])


def points_equal(p1: Point, p2: Point, tol: GeometryConfig = DEFAULT_TOLERANCE) -> bool:
    """True if two points coincide within ``tol.epsilon``."""
    return norm(p1, p2) < tol.epsilon


def degs(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * 180 / math.pi


def compute_vector_angle(v: Point) -> float:
    """Angle of a vector in ``[0, 2*pi)``.

    Args:
        v: The vector

    Returns:
        Counter-clockwise angle from the positive x axis

    Raises:
        ImpossibleGeometryError: If ``v`` is the zero vector

    Examples:
        >>> compute_vector_angle((0.0, 1.0))
        1.5707963267948966
    """
    if v[0] == 0 and v[1] == 0:
        raise ImpossibleGeometryError("cannot compute the angle of a zero vector")
    angle = math.atan2(v[1], v[0]) % TWO_PI
    if angle >= TWO_PI:
        return 0.0
    return angle


def compute_angle_between(u: Point, v: Point) -> float:
    """Signed angle turning ``u`` onto ``v``, in ``(-pi, pi]``."""
    return math.atan2(cross(u, v), dot(u, v))


def rotate_point(pivot: Point, p: Point, angle: float) -> Point:
    """Rotate ``p`` about ``pivot`` by ``angle`` radians, counter-clockwise positive."""
    c = math.cos(angle)
    s = math.sin(angle)
    dx = p[0] - pivot[0]
    dy = p[1] - pivot[1]
    return (pivot[0] + dx * c - dy * s, pivot[1] + dx * s + dy * c)


def point_to_line(p: Point, l1: Point, l2: Point) -> Point:
    """Orthogonal projection of ``p`` onto the infinite line ``l1-l2``.

    Raises:
        ImpossibleGeometryError: If ``l1`` and ``l2`` coincide
    """
    d = minus(l2, l1)
    length_sq = dot(d, d)
    if length_sq == 0:
        raise ImpossibleGeometryError("cannot project onto a zero-length line")
    t = dot(minus(p, l1), d) / length_sq
    return plus(l1, mult(d, t))


def mirror_point(p: Point, l1: Point, l2: Point) -> Point:
    """Reflect ``p`` across the infinite line ``l1-l2``."""
    foot = point_to_line(p, l1, l2)
    return (2 * foot[0] - p[0], 2 * foot[1] - p[1])


def is_to_the_left(p: Point, l1: Point, l2: Point) -> bool:
    """True if ``p`` lies strictly left of the directed line ``l1 -> l2``."""
    return cross(minus(l2, l1), minus(p, l1)) > 0


def are_on_same_line(
    p1: Point, p2: Point, p3: Point, tol: GeometryConfig = DEFAULT_TOLERANCE
) -> bool:
    """True if three points are collinear.

    The cross product is compared relative to the lengths involved, so the
    test does not depend on the scale of the coordinates.
    """
    u = minus(p2, p1)
    v = minus(p3, p1)
    return abs(cross(u, v)) <= tol.collinear_epsilon * norm(u) * norm(v)


def point_inside_line_bbox(
    p: Point, l1: Point, l2: Point, tol: GeometryConfig = DEFAULT_TOLERANCE
) -> bool:
    """True if ``p`` is inside the bounding box of segment ``l1-l2``.

    The box is inflated by ``tol.epsilon``. Callers use this as a cheap
    containment test for points already known to be on the infinite line.
    """
    eps = tol.epsilon
    return (
        min(l1[0], l2[0]) - eps <= p[0] <= max(l1[0], l2[0]) + eps
        and min(l1[1], l2[1]) - eps <= p[1] <= max(l1[1], l2[1]) + eps
    )


def point_coordinate_on_line(p: Point, l1: Point, l2: Point) -> float:
    """Parametric coordinate of ``p`` along segment ``l1-l2``.

    0 is ``l1``, 1 is ``l2``; points before ``l1`` get negative values.

    Raises:
        ImpossibleGeometryError: If the segment has zero length
    """
    d = minus(l2, l1)
    length_sq = dot(d, d)
    if length_sq == 0:
        raise ImpossibleGeometryError("zero-length segment has no parametrization")
    return dot(minus(p, l1), d) / length_sq


def intersect_lines(
    p0: Point,
    p1: Point,
    l0: Point,
    l1: Point,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point | None:
    """Intersection of the infinite lines ``p0-p1`` and ``l0-l1``.

    Segment bounds are not checked; combine with ``point_inside_line_bbox``.

    Args:
        p0: First point of line 1
        p1: Second point of line 1
        l0: First point of line 2
        l1: Second point of line 2
        tol: Tolerance context, ``collinear_epsilon`` bounds the sine of the
            angle under which lines count as parallel

    Returns:
        The intersection point, or None if the lines are parallel

    Examples:
        >>> intersect_lines((0, 0), (2, 2), (0, 2), (2, 0))
        (1.0, 1.0)
    """
    d1 = minus(p1, p0)
    d2 = minus(l1, l0)
    denom = cross(d1, d2)
    if abs(denom) <= tol.collinear_epsilon * norm(d1) * norm(d2):
        return None
    t = cross(minus(l0, p0), d2) / denom
    return plus(p0, mult(d1, t))


def intersect_polylines(
    poly1: Sequence[Point],
    poly2: Sequence[Point],
    wrap: bool = False,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point | None:
    """First crossing between two polylines, scanning ``poly1`` edge by edge.

    Args:
        poly1: First polyline
        poly2: Second polyline
        wrap: Treat both polylines as closed polygons
        tol: Tolerance context

    Returns:
        The first intersection point found, or None
    """
    for a0, a1 in _edges(poly1, wrap):
        for b0, b1 in _edges(poly2, wrap):
            p = intersect_lines(a0, a1, b0, b1, tol)
            if p is None:
                continue
            if point_inside_line_bbox(p, a0, a1, tol) and point_inside_line_bbox(p, b0, b1, tol):
                return p
    return None


def _edges(points: Sequence[Point], wrap: bool) -> list[tuple[Point, Point]]:
    edges = list(zip(points[:-1], points[1:]))
    if wrap and len(points) > 2:
        edges.append((points[-1], points[0]))
    return edges


def interpolate(p1: Point, p2: Point, fraction: float) -> Point:
    """Point at ``fraction`` of the way from ``p1`` to ``p2``."""
    return (p1[0] + (p2[0] - p1[0]) * fraction, p1[1] + (p2[1] - p1[1]) * fraction)


def place_along(
    p1: Point,
    p2: Point,
    *,
    distance: float | None = None,
    from_start: float | None = None,
    from_end: float | None = None,
    fraction: float | None = None,
) -> Point:
    """Pick a point on the line through ``p1`` and ``p2``.

    Exactly one keyword selects the placement:

    - ``distance``: from ``p1`` toward ``p2``; negative values are measured
      back from ``p2``
    - ``from_start``: signed distance from ``p1`` toward ``p2``
    - ``from_end``: signed distance from ``p2`` away from ``p1``
    - ``fraction``: interpolation fraction

    Examples:
        >>> place_along((0, 0), (2, 0), from_end=1)
        (3.0, 0.0)
    """
    given = [v for v in (distance, from_start, from_end, fraction) if v is not None]
    if len(given) != 1:
        raise TypeError("place_along needs exactly one of distance, from_start, from_end, fraction")

    if fraction is None:
        length = norm(p1, p2)
        if length == 0:
            raise ImpossibleGeometryError("cannot place a point along a zero-length segment")
        if distance is not None:
            fraction = distance / length if distance >= 0 else (length + distance) / length
        elif from_start is not None:
            fraction = from_start / length
        elif from_end is not None:
            fraction = (length + from_end) / length
    return interpolate(p1, p2, fraction)


def expand_offsets(offsets: float | Sequence[float], count: int) -> list[float]:
    """One offset per edge from a scalar or a sequence of at least ``count`` values."""
    if isinstance(offsets, (int, float)):
        return [float(offsets)] * count
    values = [float(o) for o in offsets]
    if len(values) < count:
        raise PreconditionViolationError(
            "offset", f"{count} offsets needed, {len(values)} given"
        )
    return values[:count]


def offset_edge(p1: Point, p2: Point, offset: float) -> tuple[Point, Point]:
    """Shift segment ``p1-p2`` by ``offset`` toward its left."""
    n = mult(left_normal(unit(minus(p2, p1))), offset)
    return (plus(p1, n), plus(p2, n))


def offset_polyline(
    points: Sequence[Point],
    offsets: float | Sequence[float],
    wraps: bool = False,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> list[Point]:
    """Offset a polyline by intersecting the offsets of neighboring edges.

    Positive offsets move to the left of the direction of travel.

    Args:
        points: Polyline vertices
        offsets: One offset for every edge, or a single value for all of them
        wraps: Treat the polyline as a closed polygon
        tol: Tolerance context

    Returns:
        One offset vertex per input vertex

    Raises:
        PreconditionViolationError: If fewer offsets than edges are given
    """
    edges = _edges(points, wraps)
    if not edges:
        return list(points)
    shifts = expand_offsets(offsets, len(edges))
    shifted = [offset_edge(a, b, d) for (a, b), d in zip(edges, shifts)]

    def joint(prev: tuple[Point, Point], nxt: tuple[Point, Point]) -> Point:
        p = intersect_lines(prev[0], prev[1], nxt[0], nxt[1], tol)
        return p if p is not None else nxt[0]

    if wraps:
        return [joint(shifted[i - 1], shifted[i]) for i in range(len(shifted))]

    result = [shifted[0][0]]
    for i in range(1, len(shifted)):
        result.append(joint(shifted[i - 1], shifted[i]))
    result.append(shifted[-1][1])
    return result


def signed_area(points: Sequence[Point]) -> float:
    """Signed area of a polygon using the shoelace formula.

    Positive for counter-clockwise polygons, negative for clockwise ones.
    Returns 0.0 for fewer than three points.

    Examples:
        >>> signed_area([(0, 0), (1, 0), (1, 1), (0, 1)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


def polygon_area(points: Sequence[Point]) -> float:
    """Unsigned polygon area."""
    return abs(signed_area(points))


def polyline_perimeter(points: Sequence[Point], closed: bool = False) -> float:
    return sum(norm(a, b) for a, b in _edges(points, closed))


def polygon_center(points: Sequence[Point]) -> Point:
    """Centroid of a polygon, or the vertex average for degenerate ones."""
    area = signed_area(points)
    n = len(points)
    if n == 0:
        raise ImpossibleGeometryError("empty polygon has no center")
    if abs(area) < 1e-12:
        return (sum(p[0] for p in points) / n, sum(p[1] for p in points) / n)

    cx = cy = 0.0
    for i in range(n):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % n]
        f = x0 * y1 - x1 * y0
        cx += (x0 + x1) * f
        cy += (y0 + y1) * f
    return (cx / (6 * area), cy / (6 * area))


def normalize_polygon(points: Sequence[Point]) -> list[Point]:
    """Return the polygon's vertices in counter-clockwise order."""
    if signed_area(points) < 0:
        return list(reversed(points))
    return list(points)


def inflate_polyline(
    points: Sequence[Point], offset: float, tol: GeometryConfig = DEFAULT_TOLERANCE
) -> list[Point]:
    """Grow a closed polygon outward by ``offset`` whatever its winding."""
    outward = -offset if signed_area(points) > 0 else offset
    return offset_polyline(points, outward, wraps=True, tol=tol)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges. Odd number of crossings = inside, even = outside.
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def cross3(u: Point3, v: Point3) -> Point3:
    """Cross product of two 3D vectors."""
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def normalize3(v: Point3) -> Point3:
    """Unit vector with the direction of a 3D vector."""
    length = math.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2)
    if length == 0:
        raise ImpossibleGeometryError("zero vector has no direction")
    return (v[0] / length, v[1] / length, v[2] / length)
