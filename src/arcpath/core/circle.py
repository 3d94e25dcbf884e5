"""Circle and circular-arc primitives.

Arcs follow the SVG convention restricted to circles: an arc is given by its
start point, end point, radius and sweep flag, with the large-arc flag fixed
at 0. A sweep of 1 turns counter-clockwise (increasing angle).

This module provides:
- Circle center recovery from a chord, a radius and a sweep flag
- Line-circle and circle-circle intersection with discriminant snapping
- Arc parametrization (angle to parameter and back)
- Tangent directions and angular lengths
"""

import math

from arcpath.config import DEFAULT_TOLERANCE, GeometryConfig
from arcpath.core.vector import (
    TWO_PI,
    interpolate,
    left_normal,
    minus,
    mult,
    norm,
    plus,
)
from arcpath.domain import Point
from arcpath.exceptions import ImpossibleGeometryError

ArcSpec = tuple[Point, Point, float, int]


def get_circle_center(
    p1: Point,
    p2: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point:
    """Center of the circle of ``radius`` through ``p1`` and ``p2``.

    Of the two candidate centers, the one left of the chord ``p1 -> p2`` is
    returned for ``sweep == 1`` and the one to its right for ``sweep == 0``.
    Chords slightly longer than the diameter (within ``tol.circle_epsilon``)
    are treated as diameters.

    Args:
        p1: Arc start
        p2: Arc end
        radius: Circle radius
        sweep: Sweep flag (0 or 1)
        tol: Tolerance context

    Returns:
        The circle center

    Raises:
        ImpossibleGeometryError: If the chord is longer than the diameter or
            the two points coincide

    Examples:
        >>> get_circle_center((1, 0), (-1, 0), 1, 1)
        (0.0, 0.0)
    """
    chord = norm(p1, p2)
    if chord > 2 * radius + tol.circle_epsilon:
        raise ImpossibleGeometryError(
            f"radius {radius} is too small for a chord of length {chord}"
        )
    if chord == 0:
        raise ImpossibleGeometryError("arc endpoints coincide")

    half = interpolate(p1, p2, 0.5)
    h = math.sqrt(max(0.0, radius * radius - (chord / 2) ** 2))
    direction = left_normal(mult(minus(p2, p1), 1 / chord))
    return plus(half, mult(direction, h if sweep else -h))


def intersect_line_and_circle(
    p1: Point,
    p2: Point,
    center: Point,
    radius: float,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> list[Point]:
    """Intersections of the infinite line ``p1-p2`` with a circle.

    Near-tangent lines (normalized discriminant within ``tol.epsilon`` of
    zero) yield exactly one point.

    Returns:
        Zero, one or two points; with two, the first one is the root taken
        with the positive square root, so repeated queries are stable

    Raises:
        ImpossibleGeometryError: If ``p1`` and ``p2`` coincide
    """
    x1, y1 = minus(p1, center)
    x2, y2 = minus(p2, center)
    dx = x2 - x1
    dy = y2 - y1
    dr2 = dx * dx + dy * dy
    if dr2 == 0:
        raise ImpossibleGeometryError("cannot intersect a circle with a zero-length line")

    d = x1 * y2 - x2 * y1
    discriminant = radius * radius * dr2 - d * d
    if abs(discriminant / (radius * radius * dr2)) < tol.epsilon:
        return [plus(center, (d * dy / dr2, -d * dx / dr2))]
    if discriminant < 0:
        return []

    root = math.sqrt(discriminant)
    sgn = 1 if dy > 0 else -1
    return [
        plus(center, ((d * dy + sgn * dx * root) / dr2, (-d * dx + abs(dy) * root) / dr2)),
        plus(center, ((d * dy - sgn * dx * root) / dr2, (-d * dx - abs(dy) * root) / dr2)),
    ]


def intersect_two_circles(
    c1: Point,
    r1: float,
    c2: Point,
    r2: float,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> list[Point]:
    """Intersections of two circles.

    Returns:
        Zero, one (tangent circles) or two points. With two, the first lies
        left of the center line ``c1 -> c2``. Concentric circles give none.
    """
    d = norm(c1, c2)
    if d < tol.epsilon:
        return []

    a = (d * d - r2 * r2 + r1 * r1) / (2 * d)
    h2 = r1 * r1 - a * a
    if h2 < -tol.circle_epsilon * r1 * r1:
        return []

    u = mult(minus(c2, c1), 1 / d)
    base = plus(c1, mult(u, a))
    if abs(h2) <= tol.epsilon * r1 * r1:
        return [base]

    offset = mult(left_normal(u), math.sqrt(h2))
    return [plus(base, offset), minus(base, offset)]


def arc_angles(
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> tuple[Point, float, float]:
    """Center, start angle and unsigned angular span of an arc."""
    center = get_circle_center(start, end, radius, sweep, tol)
    a0 = math.atan2(start[1] - center[1], start[0] - center[0])
    a1 = math.atan2(end[1] - center[1], end[0] - center[0])
    span = (a1 - a0) % TWO_PI if sweep else (a0 - a1) % TWO_PI
    return center, a0, span


def get_arc_angular_length(
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> float:
    """Angular span of an arc, positive for sweep 1 and negative for sweep 0."""
    _, _, span = arc_angles(start, end, radius, sweep, tol)
    return span if sweep else -span


def arc_length(
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> float:
    """Length of an arc."""
    _, _, span = arc_angles(start, end, radius, sweep, tol)
    return radius * span


def point_coordinate_on_arc(
    p: Point,
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> float:
    """Parametric coordinate of a point of the circle relative to an arc.

    The angular offset from the start is measured in the direction of travel
    and normalized into the full turn centered on the arc's middle, so points
    just before the start get small negative values and points just after
    the end get values slightly above 1.
    """
    center, a0, span = arc_angles(start, end, radius, sweep, tol)
    angle = math.atan2(p[1] - center[1], p[0] - center[0])
    offset = angle - a0 if sweep else a0 - angle
    low = span / 2 - math.pi
    offset = (offset - low) % TWO_PI + low
    return offset / span


def is_in_pie_slice(
    p: Point,
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> bool:
    """True if ``p`` lies within the angular range of the arc, endpoints included."""
    x = point_coordinate_on_arc(p, start, end, radius, sweep, tol)
    return -tol.epsilon <= x <= 1 + tol.epsilon


def evaluate_arc(
    x: float,
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point:
    """Point at parametric coordinate ``x`` along an arc."""
    if x == 0:
        return start
    if x == 1:
        return end
    center, a0, span = arc_angles(start, end, radius, sweep, tol)
    angle = a0 + span * x if sweep else a0 - span * x
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def arc_direction_at(
    x: float,
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point:
    """Unit direction of travel along an arc at parametric coordinate ``x``."""
    center = get_circle_center(start, end, radius, sweep, tol)
    p = evaluate_arc(x, start, end, radius, sweep, tol)
    radial = mult(minus(p, center), 1 / radius)
    tangent = left_normal(radial)
    return tangent if sweep else mult(tangent, -1)


def arc_tangent_at(
    x: float,
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> tuple[Point, Point]:
    """Two points on the tangent line at ``x``, one unit behind and one ahead."""
    p = evaluate_arc(x, start, end, radius, sweep, tol)
    d = arc_direction_at(x, start, end, radius, sweep, tol)
    return (minus(p, d), plus(p, d))


def intersect_line_and_arc(
    l1: Point,
    l2: Point,
    start: Point,
    end: Point,
    radius: float,
    sweep: int,
    near_end: bool = False,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point | None:
    """Intersection of a line with an arc's circle closest to an arc endpoint.

    Used to rejoin offset primitives, so the arc's angular range is not
    checked.

    Args:
        l1: First point of the line
        l2: Second point of the line
        start: Arc start
        end: Arc end
        radius: Arc radius
        sweep: Arc sweep flag
        near_end: Pick the root closest to the arc end instead of its start
        tol: Tolerance context

    Returns:
        The selected root, or None if the line misses the circle
    """
    center = get_circle_center(start, end, radius, sweep, tol)
    roots = intersect_line_and_circle(l1, l2, center, radius, tol)
    if not roots:
        return None
    anchor = end if near_end else start
    return min(roots, key=lambda p: norm(p, anchor))


def intersect_two_arcs(
    start1: Point,
    end1: Point,
    radius1: float,
    sweep1: int,
    start2: Point,
    end2: Point,
    radius2: float,
    sweep2: int,
    tol: GeometryConfig = DEFAULT_TOLERANCE,
) -> Point | None:
    """Intersection of two arcs' circles closest to the end of the first arc."""
    c1 = get_circle_center(start1, end1, radius1, sweep1, tol)
    c2 = get_circle_center(start2, end2, radius2, sweep2, tol)
    roots = intersect_two_circles(c1, radius1, c2, radius2, tol)
    if not roots:
        return None
    return min(roots, key=lambda p: norm(p, end1))


def are_on_same_circle(
    arc1: ArcSpec, arc2: ArcSpec, tol: GeometryConfig = DEFAULT_TOLERANCE
) -> bool:
    """True if two arcs, given as ``(start, end, radius, sweep)``, share a circle."""
    if abs(arc1[2] - arc2[2]) >= tol.circle_epsilon:
        return False
    c1 = get_circle_center(*arc1, tol=tol)
    c2 = get_circle_center(*arc2, tol=tol)
    return norm(c1, c2) < tol.circle_epsilon
