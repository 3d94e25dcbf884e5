"""Sideways offsetting of paths.

Every segment is shifted on its own: lines move along their left normal and
arcs keep their center while their radius grows or shrinks. Consecutive
shifted segments are then rejoined at their intersection, which extends or
trims them. Offsets are positive toward the left of the direction of travel.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from arcpath.core.circle import (
    arc_direction_at,
    get_circle_center,
    intersect_line_and_arc,
    intersect_two_arcs,
)
from arcpath.core.vector import (
    cross,
    expand_offsets,
    intersect_lines,
    minus,
    offset_edge,
    place_along,
    points_equal,
)
from arcpath.domain import Arc, Close, LineTo, Point, Segment
from arcpath.exceptions import ImpossibleGeometryError, PreconditionViolationError

if TYPE_CHECKING:
    from arcpath.config import GeometryConfig
    from arcpath.core.path import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShiftedSegment:
    """A segment moved sideways, before it is rejoined with its neighbours."""

    start: Point
    end: Point
    radius: float | None = None
    sweep: int | None = None

    @property
    def is_arc(self) -> bool:
        return self.radius is not None


def shift_segment(seg: Segment, offset: float, tol: "GeometryConfig") -> ShiftedSegment:
    """Move one segment ``offset`` to the left of its direction of travel.

    Raises:
        ImpossibleGeometryError: If an arc would shrink to a zero or negative radius
    """
    if not seg.is_arc:
        start, end = offset_edge(seg.start, seg.end, offset)
        return ShiftedSegment(start, end)

    old_radius = cast(float, seg.radius)
    sweep = cast(int, seg.sweep)
    center = get_circle_center(seg.start, seg.end, old_radius, sweep, tol)
    # Moving left goes toward the center of a counter-clockwise arc
    delta = offset * (2 * sweep - 1)
    radius = old_radius - delta
    if radius <= tol.epsilon:
        raise ImpossibleGeometryError(
            f"offset {offset} collapses the arc of radius {old_radius} on segment {seg.index}"
        )
    fraction = delta / old_radius
    return ShiftedSegment(
        place_along(seg.start, center, fraction=fraction),
        place_along(seg.end, center, fraction=fraction),
        radius,
        sweep,
    )


def _junction(first: ShiftedSegment, second: ShiftedSegment, tol: "GeometryConfig") -> Point:
    """Point where ``first`` hands over to ``second``."""
    if not first.is_arc and not second.is_arc:
        point = intersect_lines(first.start, first.end, second.start, second.end, tol)
    elif not first.is_arc:
        point = intersect_line_and_arc(
            first.start, first.end, second.start, second.end, second.radius, second.sweep,
            near_end=False, tol=tol,
        )
    elif not second.is_arc:
        point = intersect_line_and_arc(
            second.start, second.end, first.start, first.end, first.radius, first.sweep,
            near_end=True, tol=tol,
        )
    else:
        point = intersect_two_arcs(
            first.start, first.end, first.radius, first.sweep,
            second.start, second.end, second.radius, second.sweep,
            tol=tol,
        )
    return first.end if point is None else point


def offset_path(path: "Path", offsets: float | Sequence[float]) -> "Path":
    """Offset every non-degenerate segment of ``path`` and rejoin them.

    Args:
        path: Open or closed path
        offsets: One distance for every segment, or a sequence with one entry
            per non-degenerate segment in path order

    Returns:
        A new path, closed if ``path`` is

    Raises:
        PreconditionViolationError: If the path has no segment of non-zero
            length or too few offsets are given
        ImpossibleGeometryError: If an arc collapses
    """
    from arcpath.core.path import Path

    tol = path.tolerance
    segments = [s for s in path.segments() if not points_equal(s.start, s.end, tol)]
    if not segments:
        raise PreconditionViolationError("offset", "path has no segment of non-zero length")
    shifts = expand_offsets(offsets, len(segments))
    shifted = [shift_segment(seg, shift, tol) for seg, shift in zip(segments, shifts)]

    closed = path.is_closed()
    count = len(shifted)
    if closed:
        joints = [_junction(shifted[k - 1], shifted[k], tol) for k in range(count)]
        start = joints[0]
        ends = joints[1:] + [joints[0]]
    else:
        start = shifted[0].start
        ends = [_junction(shifted[k], shifted[k + 1], tol) for k in range(count - 1)]
        ends.append(shifted[-1].end)

    result = Path(tolerance=tol).move_to(start)
    for seg, original, end in zip(shifted, segments, ends):
        if original.closing:
            break
        if seg.is_arc:
            result.controls.append(Arc(end, seg.radius, seg.sweep))
        else:
            result.controls.append(LineTo(end))
    if closed:
        result.controls.append(Close())

    logger.debug("Offset %d segments of %s", count, path)
    return result


def _end_direction(path: "Path") -> Point:
    """Direction of travel at the end of an open path."""
    seg = path.segment(len(path.controls) - 1)
    if seg.is_arc:
        return arc_direction_at(1.0, seg.start, seg.end, seg.radius, seg.sweep, path.tolerance)
    return minus(seg.end, seg.start)


def _cap_sweep(start: Point, end: Point, outward: Point) -> int:
    """Sweep of the half circle from ``start`` to ``end`` bulging toward ``outward``."""
    return 1 if cross(minus(end, start), outward) < 0 else 0


def thicken_and_close(
    path: "Path", offset: float, round_start: bool = False, round_end: bool = False
) -> "Path":
    """Closed outline made of ``path``, a cap, and ``path`` offset back to its start.

    The return side runs along ``path`` reversed and offset by ``offset``
    toward its own left, that is to the right of ``path``. Caps are straight
    lines or, when asked for, half circles of diameter ``abs(offset)``.

    Raises:
        PreconditionViolationError: If ``path`` is closed or empty
    """
    if path.is_closed():
        raise PreconditionViolationError("thicken", "path is already closed")
    if len(path.controls) < 2:
        raise PreconditionViolationError("thicken", "path has no segment")

    back = path.invert().offset(offset)
    result = path.clone()
    cap_radius = abs(offset) / 2

    if round_end:
        sweep = _cap_sweep(result.end_point, back.start_point, _end_direction(result))
        result.controls.append(Arc(back.start_point, cap_radius, sweep))
    else:
        result.line_to(back.start_point)
    result.merge(back)

    if result.is_closed():
        return result
    if round_start:
        sweep = _cap_sweep(result.end_point, result.start_point, _end_direction(back))
        result.controls.append(Arc(result.start_point, cap_radius, sweep))
    result.close()
    return result
