"""Paths made of straight segments and circular arcs.

A ``Path`` is an ordered list of controls: a ``MoveTo``, then any number of
``LineTo`` and ``Arc`` controls, then optionally a ``Close``. Segment ``i``
runs from the point of control ``i - 1`` to the point of control ``i``; the
closing segment of a closed path runs back to the first point.

Builder and editing methods (``move_to``, ``line_to``, ``simplify``,
``mirror``, ``round_fillet``...) mutate the path in place. Transforms,
boolean operations and offsetting return new paths and leave their operands
untouched.
"""

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

from arcpath.config import DEFAULT_TOLERANCE, GeometryConfig
from arcpath.core.circle import (
    arc_angles,
    arc_direction_at,
    are_on_same_circle,
    evaluate_arc,
    get_arc_angular_length,
    get_circle_center,
    intersect_line_and_circle,
    intersect_two_circles,
    point_coordinate_on_arc,
)
from arcpath.core.transform import AffineTransform
from arcpath.core.vector import (
    are_on_same_line,
    compute_angle_between,
    cross,
    dot,
    interpolate,
    intersect_lines,
    minus,
    mirror_point,
    norm,
    offset_polyline,
    place_along,
    point_coordinate_on_line,
    point_in_polygon,
    point_inside_line_bbox,
    point_to_line,
    points_equal,
)
from arcpath.domain import (
    Arc,
    Close,
    Control,
    IntersectionLocation,
    LineTo,
    MoveTo,
    PathIntersection,
    Point,
    Segment,
    SegmentKind,
    SimpleIntersection,
)
from arcpath.exceptions import (
    ImpossibleGeometryError,
    NoIntersectionError,
    PreconditionViolationError,
    UnsupportedGeometryError,
)
from arcpath.io.svg_path import format_path_data, parse_path_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LengthInfo:
    """Arc-length table of a path.

    Attributes:
        total: Length of the whole path
        ranges: ``(starts_at, ends_at)`` for every segment, indexed by segment
            number; entry 0 stands for the move-to and is ``(0.0, 0.0)``
    """

    total: float
    ranges: list[tuple[float, float]]


@dataclass(frozen=True, slots=True)
class _Fillet:
    start: Point
    end: Point
    sweep: int


class Path:
    """An ordered boundary of line and circular-arc segments."""

    def __init__(
        self,
        controls: Iterable[Control] | None = None,
        tolerance: GeometryConfig | None = None,
    ) -> None:
        self.controls: list[Control] = list(controls) if controls is not None else []
        self.tolerance = tolerance or DEFAULT_TOLERANCE

    # Construction

    @classmethod
    def from_d(cls, d: str, tolerance: GeometryConfig | None = None) -> "Path":
        """Parse SVG path data (``M``, ``L``, circular ``A``, ``Z``)."""
        return cls(parse_path_data(d), tolerance)

    @classmethod
    def from_polyline(
        cls,
        points: Sequence[Point],
        closed: bool = True,
        tolerance: GeometryConfig | None = None,
    ) -> "Path":
        """Path through ``points`` joined by straight segments."""
        if not points:
            return cls(tolerance=tolerance)
        path = cls(tolerance=tolerance).move_to(points[0])
        for point in points[1:]:
            path.line_to(point)
        if closed:
            path.close()
        return path

    @classmethod
    def make_circle(
        cls,
        radius: float,
        center: Point = (0.0, 0.0),
        tolerance: GeometryConfig | None = None,
    ) -> "Path":
        """Counter-clockwise circle made of two half-circle arcs."""
        cx, cy = center
        return (
            cls(tolerance=tolerance)
            .move_to((cx + radius, cy))
            .arc((cx - radius, cy), radius, 1)
            .arc((cx + radius, cy), radius, 1)
            .close()
        )

    @classmethod
    def make_rect(
        cls, width: float, height: float, tolerance: GeometryConfig | None = None
    ) -> "Path":
        """Counter-clockwise rectangle with a corner at the origin."""
        return cls.from_polyline(
            [(0, 0), (width, 0), (width, height), (0, height)], closed=True, tolerance=tolerance
        )

    def move_to(self, point: Point) -> "Path":
        if self.controls:
            raise PreconditionViolationError("move to", "path has already been started")
        self.controls.append(MoveTo(_as_point(point)))
        return self

    def line_to(self, point: Point) -> "Path":
        self._require_open("line to")
        self.controls.append(LineTo(_as_point(point)))
        return self

    def arc(self, point: Point, radius: float, sweep: int) -> "Path":
        """Append a circular arc ending at ``point``.

        Raises:
            ImpossibleGeometryError: If the radius is not positive or is too
                small to join the current point to ``point``
        """
        self._require_open("add arc")
        if radius <= 0:
            raise ImpossibleGeometryError(f"arc radius must be positive, got {radius}")
        end = _as_point(point)
        get_circle_center(self.end_point, end, radius, sweep, self.tolerance)
        self.controls.append(Arc(end, float(radius), int(sweep)))
        return self

    def close(self) -> "Path":
        self._require_open("close")
        self.controls.append(Close())
        return self

    def arc_to(self, point: Point, radius: float) -> "Path":
        """Draw a line to ``point`` and round the corner it makes with the previous line."""
        self.line_to(point)
        self.round_fillet(radius)
        return self

    def _require_open(self, operation: str) -> None:
        if not self.controls:
            raise PreconditionViolationError(operation, "path is empty, call move_to first")
        if self.is_closed():
            raise PreconditionViolationError(operation, "path is closed")

    # Queries

    def is_empty(self) -> bool:
        return not self.controls

    def is_closed(self) -> bool:
        return bool(self.controls) and isinstance(self.controls[-1], Close)

    def clone(self) -> "Path":
        return Path(self.controls, self.tolerance)

    @property
    def start_point(self) -> Point:
        if not self.controls:
            raise PreconditionViolationError("get start point", "path is empty")
        return self.controls[0].point  # type: ignore[union-attr]

    @property
    def end_point(self) -> Point:
        """Last point reached; the start point for closed paths."""
        return self._point_at(len(self.controls) - 1)

    def points(self) -> list[Point]:
        """Points of every control except ``Close``."""
        return [c.point for c in self.controls if not isinstance(c, Close)]

    def _point_at(self, index: int) -> Point:
        control = self.controls[index]
        if isinstance(control, Close):
            return self.start_point
        return control.point

    def segment(self, index: int) -> Segment:
        """The segment ending at control ``index`` (1-based)."""
        if not 1 <= index < len(self.controls):
            raise IndexError(f"segment {index} out of range 1..{len(self.controls) - 1}")
        control = self.controls[index]
        start = self._point_at(index - 1)
        if isinstance(control, Close):
            return Segment(index, start, self.start_point, SegmentKind.LINE, closing=True)
        if isinstance(control, Arc):
            return Segment(
                index, start, control.point, SegmentKind.ARC, control.radius, control.sweep
            )
        if isinstance(control, LineTo):
            return Segment(index, start, control.point, SegmentKind.LINE)
        raise PreconditionViolationError("read segment", f"move-to found at position {index}")

    def segments(self) -> Iterator[Segment]:
        for index in range(1, len(self.controls)):
            yield self.segment(index)

    def __len__(self) -> int:
        return len(self.controls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.controls == other.controls

    __hash__ = None  # type: ignore[assignment]

    def to_string(self) -> str:
        return format_path_data(self.controls)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Path.from_d({self.to_string()!r})"

    # Parametrization

    def _segment_length(self, seg: Segment) -> float:
        if norm(seg.start, seg.end) == 0:
            return 0.0
        if seg.is_arc:
            _, _, span = arc_angles(seg.start, seg.end, seg.radius, seg.sweep, self.tolerance)
            return seg.radius * span
        return norm(seg.start, seg.end)

    def get_length_info(self) -> LengthInfo:
        ranges: list[tuple[float, float]] = [(0.0, 0.0)]
        total = 0.0
        for seg in self.segments():
            length = self._segment_length(seg)
            ranges.append((total, total + length))
            total += length
        return LengthInfo(total, ranges)

    @property
    def length(self) -> float:
        return self.get_length_info().total

    def evaluate(self, segment: int, x: float) -> Point:
        """Point at parametric coordinate ``x`` along a segment."""
        seg = self.segment(segment)
        if x == 0:
            return seg.start
        if x == 1:
            return seg.end
        if seg.is_arc:
            return evaluate_arc(x, seg.start, seg.end, seg.radius, seg.sweep, self.tolerance)
        return interpolate(seg.start, seg.end, x)

    def locate_fraction(self, fraction: float) -> tuple[int, float]:
        """``(segment, x)`` of the point at ``fraction`` of the path's length."""
        info = self.get_length_info()
        if len(info.ranges) < 2:
            raise PreconditionViolationError("evaluate", "path has no segments")
        target = fraction * info.total
        last = len(info.ranges) - 1
        for index in range(1, len(info.ranges)):
            starts_at, ends_at = info.ranges[index]
            if ends_at > starts_at and (target <= ends_at or index == last):
                x = (target - starts_at) / (ends_at - starts_at)
                return index, min(max(x, 0.0), 1.0)
        return last, 1.0

    def evaluate_anywhere(self, fraction: float) -> Point:
        """Point at ``fraction`` of the path's total length."""
        return self.evaluate(*self.locate_fraction(fraction))

    def to_polyline(self) -> list[Point]:
        """Vertices of the path with arcs flattened into short chords."""
        if not self.controls:
            return []
        points = [self.start_point]
        for seg in self.segments():
            if seg.is_arc and norm(seg.start, seg.end) > 0:
                _, _, span = arc_angles(seg.start, seg.end, seg.radius, seg.sweep, self.tolerance)
                steps = max(1, math.ceil(span / self.tolerance.flatten_angle))
                for k in range(1, steps + 1):
                    points.append(
                        evaluate_arc(
                            k / steps, seg.start, seg.end, seg.radius, seg.sweep, self.tolerance
                        )
                    )
            else:
                points.append(seg.end)
        if len(points) > 1 and self.is_closed() and points_equal(points[-1], points[0], self.tolerance):
            points.pop()
        return points

    def signed_area(self) -> float:
        """Enclosed area, positive for counter-clockwise paths.

        Each arc adds or removes its circular segment (the region between the
        arc and its chord) to the polygon of its endpoints.

        Raises:
            PreconditionViolationError: If the path is open
        """
        if not self.is_closed():
            raise PreconditionViolationError("compute area", "path is open")
        area = 0.0
        for seg in self.segments():
            area += cross(seg.start, seg.end) / 2
            if seg.is_arc and norm(seg.start, seg.end) > 0:
                _, _, span = arc_angles(seg.start, seg.end, seg.radius, seg.sweep, self.tolerance)
                bulge = seg.radius * seg.radius / 2 * (span - math.sin(span))
                area += bulge if seg.sweep else -bulge
        return area

    def area(self) -> float:
        return abs(self.signed_area())

    def rotates_clockwise(self) -> bool:
        """True if the closed path winds clockwise (negative signed area)."""
        return self.signed_area() < 0

    def contains_point(self, point: Point) -> bool:
        """True if ``point`` lies inside the closed path."""
        if not self.is_closed():
            raise PreconditionViolationError("test containment", "path is open")
        return point_in_polygon(point, self.to_polyline())

    # Editing

    def _corner(self, index: int | None, operation: str) -> tuple[int, Segment, Segment]:
        if index is None:
            index = len(self.controls) - 2
        if not 1 <= index < len(self.controls) - 1:
            raise PreconditionViolationError(operation, f"control {index} is not an interior corner")
        before = self.segment(index)
        after = self.segment(index + 1)
        if before.is_arc or after.is_arc:
            raise PreconditionViolationError(operation, "both segments around the corner must be lines")
        return index, before, after

    def _fillet_geometry(self, p1: Point, p2: Point, p3: Point, radius: float) -> _Fillet:
        turn = cross(minus(p2, p1), minus(p3, p2))
        if are_on_same_line(p1, p2, p3, self.tolerance):
            raise ImpossibleGeometryError("cannot round a straight corner")
        center = offset_polyline([p1, p2, p3], radius if turn > 0 else -radius, tol=self.tolerance)[1]
        start = point_to_line(center, p1, p2)
        end = point_to_line(center, p2, p3)
        eps = self.tolerance.epsilon
        if point_coordinate_on_line(start, p1, p2) < -eps or point_coordinate_on_line(end, p2, p3) > 1 + eps:
            raise ImpossibleGeometryError(f"radius {radius} does not fit the corner at {p2}")
        sweep = 1 if cross(minus(start, center), minus(end, center)) > 0 else 0
        return _Fillet(start, end, sweep)

    def round_fillet(self, radius: float, index: int | None = None) -> None:
        """Replace the corner at control ``index`` with a tangent arc.

        Args:
            radius: Fillet radius
            index: Control whose point is the corner; defaults to the last
                corner of the path

        Raises:
            PreconditionViolationError: If the corner is not between two lines
            ImpossibleGeometryError: If the corner is straight or too short
        """
        index, before, after = self._corner(index, "round fillet")
        fillet = self._fillet_geometry(before.start, before.end, after.end, radius)

        replacement: list[Control] = []
        if not points_equal(fillet.start, before.start, self.tolerance):
            replacement.append(LineTo(fillet.start))
        replacement.append(Arc(fillet.end, float(radius), fillet.sweep))

        drop_next = not after.closing and points_equal(fillet.end, after.end, self.tolerance)
        tail = self.controls[index + 2 :] if drop_next else self.controls[index + 1 :]
        self.controls = self.controls[:index] + replacement + tail

    def round_fillet_all(self, radius: float) -> None:
        """Round every corner joining two lines, except the start of a closed path."""
        fillets: dict[int, _Fillet] = {}
        for index in range(1, len(self.controls) - 1):
            before = self.segment(index)
            after = self.segment(index + 1)
            if before.is_arc or after.is_arc:
                continue
            if are_on_same_line(before.start, before.end, after.end, self.tolerance):
                continue
            fillets[index] = self._fillet_geometry(before.start, before.end, after.end, radius)

        result: list[Control] = [self.controls[0]]
        for index, control in enumerate(self.controls[1:], start=1):
            last = _control_point(result[-1])
            if index in fillets:
                fillet = fillets[index]
                if not points_equal(fillet.start, last, self.tolerance):
                    result.append(LineTo(fillet.start))
                result.append(Arc(fillet.end, float(radius), fillet.sweep))
            elif isinstance(control, LineTo) and points_equal(control.point, last, self.tolerance):
                continue
            else:
                result.append(control)
        self.controls = result

    def fillet(self, width: float, index: int | None = None) -> None:
        """Cut the corner at control ``index`` with a straight chamfer of ``width``."""
        index, before, after = self._corner(index, "fillet")
        p1, p2, p3 = before.start, before.end, after.end
        half_sin = math.sin(compute_angle_between(minus(p1, p2), minus(p3, p2)) / 2)
        if abs(half_sin) < self.tolerance.collinear_epsilon:
            raise ImpossibleGeometryError("cannot cut a corner that folds back on itself")
        setback = abs(width / (2 * half_sin))
        start = place_along(p2, p1, from_start=setback)
        end = place_along(p2, p3, from_start=setback)
        self.controls = (
            self.controls[:index] + [LineTo(start), LineTo(end)] + self.controls[index + 1 :]
        )

    def mirror(self, l1: Point | None = None, l2: Point | None = None) -> None:
        """Append the path's reflection, traversed backward, to make it symmetric.

        The axis defaults to the line through the first and last points. The
        path closes itself when the reflection ends on the start point.

        Raises:
            PreconditionViolationError: If the path is closed or has no segment
        """
        if self.is_closed():
            raise PreconditionViolationError("mirror", "path is closed")
        if len(self.controls) < 2:
            raise PreconditionViolationError("mirror", "path has no segment")
        l1 = self.start_point if l1 is None else l1
        l2 = self.end_point if l2 is None else l2
        if points_equal(l1, l2, self.tolerance):
            raise ImpossibleGeometryError("mirror axis has zero length")

        reflected: list[Control] = []
        for seg in reversed(list(self.segments())):
            target = mirror_point(seg.start, l1, l2)
            if seg.is_arc:
                reflected.append(Arc(target, seg.radius, seg.sweep))
            else:
                reflected.append(LineTo(target))
        self.controls.extend(reflected)
        if points_equal(self.end_point, self.start_point, self.tolerance):
            self.controls.append(Close())
        self.simplify()

    def simplify(self) -> None:
        """Remove redundant segments in place.

        Drops zero-length segments, folds a zero-length closing segment into
        its neighbors, joins consecutive collinear lines and joins
        consecutive arcs of the same circle whose combined span stays under
        half a turn.
        """
        if len(self.controls) < 2:
            return
        tol = self.tolerance
        closed = self.is_closed()
        start = self.start_point
        body = self.controls[1:-1] if closed else self.controls[1:]

        kept: list[Control] = []
        last = start
        for control in body:
            point = _control_point(control)
            if points_equal(point, last, tol):
                continue
            kept.append(control)
            last = point

        if closed and kept and points_equal(_control_point(kept[-1]), start, tol):
            if isinstance(kept[0], LineTo) and len(kept) > 1:
                start = kept[0].point
                kept = kept[1:]
            elif isinstance(kept[-1], LineTo):
                kept = kept[:-1]

        merged: list[Control] = []
        for i, control in enumerate(kept):
            before = _control_point(merged[-1]) if merged else start
            if isinstance(control, LineTo):
                if i + 1 < len(kept):
                    following = kept[i + 1]
                    nxt = following.point if isinstance(following, LineTo) else None
                else:
                    nxt = start if closed else None
                if nxt is not None and _continues_straight(before, control.point, nxt, tol):
                    continue
            elif isinstance(control, Arc) and merged and isinstance(merged[-1], Arc):
                previous = merged[-1]
                arc_start = _control_point(merged[-2]) if len(merged) > 1 else start
                if self._joinable_arcs(arc_start, previous, control):
                    merged[-1] = Arc(control.point, previous.radius, previous.sweep)
                    continue
            merged.append(control)

        if closed and len(merged) >= 2 and isinstance(merged[0], LineTo):
            last = _control_point(merged[-1])
            if _continues_straight(last, start, merged[0].point, tol):
                start = merged[0].point
                merged = merged[1:]

        simplified: list[Control] = [MoveTo(start), *merged]
        if closed:
            simplified.append(Close())
        logger.debug("Simplified path from %d to %d controls", len(self.controls), len(simplified))
        self.controls = simplified

    def _joinable_arcs(self, start: Point, first: Arc, second: Arc) -> bool:
        if first.sweep != second.sweep:
            return False
        arc1 = (start, first.point, first.radius, first.sweep)
        arc2 = (first.point, second.point, second.radius, second.sweep)
        if not are_on_same_circle(arc1, arc2, self.tolerance):
            return False
        span = abs(get_arc_angular_length(*arc1, tol=self.tolerance)) + abs(
            get_arc_angular_length(*arc2, tol=self.tolerance)
        )
        return span < math.pi

    # Subpaths

    def _traversed(self, index: int, backward: bool) -> Control:
        seg = self.segment(index)
        target = seg.start if backward else seg.end
        if seg.is_arc:
            return Arc(target, seg.radius, 1 - seg.sweep if backward else seg.sweep)
        return LineTo(target)

    def _step_segment(self, index: int, step: int) -> int:
        nxt = index + step
        if 1 <= nxt < len(self.controls):
            return nxt
        if not self.is_closed():
            raise PreconditionViolationError("extract subpath", "open path cannot wrap around")
        return 1 if nxt >= len(self.controls) else len(self.controls) - 1

    def subpath(
        self,
        start_segment: int,
        start_x: float,
        end_segment: int,
        end_x: float,
        invert: bool = False,
    ) -> "Path":
        """Open path tracing the boundary from one location to another.

        Args:
            start_segment: Segment of the first point
            start_x: Parametric coordinate of the first point
            end_segment: Segment of the last point
            end_x: Parametric coordinate of the last point
            invert: Walk backward; arc sweep flags are flipped

        Returns:
            A new open path. Closed paths are walked through their closing
            segment when needed; a start and end on the same segment with the
            end behind the start go all the way around.
        """
        for index in (start_segment, end_segment):
            if not 1 <= index < len(self.controls):
                raise IndexError(f"segment {index} out of range 1..{len(self.controls) - 1}")

        result = Path(tolerance=self.tolerance)
        result.move_to(self.evaluate(start_segment, start_x))
        step = -1 if invert else 1
        wrap = start_segment == end_segment and (end_x > start_x if invert else end_x < start_x)

        index = start_segment
        while True:
            result.controls.append(self._traversed(index, invert))
            if index == end_segment:
                if not wrap:
                    break
                wrap = False
            index = self._step_segment(index, step)

        result.controls[-1] = replace(result.controls[-1], point=self.evaluate(end_segment, end_x))
        return result

    def invert(self) -> "Path":
        """The same boundary traversed in the opposite direction."""
        segments = list(self.segments())
        if not segments:
            return self.clone()

        result = Path(tolerance=self.tolerance)
        if not self.is_closed():
            result.move_to(self.end_point)
            for seg in reversed(segments):
                result.controls.append(self._traversed(seg.index, True))
            return result

        result.move_to(self.start_point)
        closing, body = segments[-1], segments[:-1]
        if not points_equal(closing.start, closing.end, self.tolerance):
            result.controls.append(LineTo(closing.start))
        for seg in reversed(body[1:]):
            result.controls.append(self._traversed(seg.index, True))
        if body and body[0].is_arc:
            result.controls.append(self._traversed(body[0].index, True))
        result.controls.append(Close())
        return result

    def merge(self, other: "Path") -> "Path":
        """Append an open path to this path's open end, in place.

        A connecting line is inserted when the two ends are more than
        ``tolerance.merge_distance`` apart. The result closes itself when its
        end comes back to its start.

        Raises:
            PreconditionViolationError: If this path or ``other`` is closed
        """
        if other.is_closed():
            raise PreconditionViolationError("merge", "cannot append a closed path")
        if not self.controls:
            self.controls = list(other.controls)
            return self
        if self.is_closed():
            raise PreconditionViolationError("merge", "path is closed")
        if other.is_empty():
            return self

        if norm(self.end_point, other.start_point) > self.tolerance.merge_distance:
            self.controls.append(LineTo(other.start_point))
        self.controls.extend(other.controls[1:])
        if len(self.controls) > 2 and points_equal(self.end_point, self.start_point, self.tolerance):
            self.controls.append(Close())
        return self

    # Transforms

    def transform(self, transform: AffineTransform) -> "Path":
        """Map every point through an affine transform.

        Radii scale with the transform and sweep flags flip when it mirrors
        the plane.

        Raises:
            UnsupportedGeometryError: If the path has arcs and the transform
                does not map circles to circles
        """
        has_arcs = any(isinstance(c, Arc) for c in self.controls)
        if has_arcs and not transform.is_conformal():
            raise UnsupportedGeometryError("non-uniform transform of circular arcs")
        flip = transform.is_orientation_reversing
        factor = transform.scale_factor

        controls: list[Control] = []
        for control in self.controls:
            if isinstance(control, MoveTo):
                controls.append(MoveTo(transform.apply(control.point)))
            elif isinstance(control, LineTo):
                controls.append(LineTo(transform.apply(control.point)))
            elif isinstance(control, Arc):
                sweep = 1 - control.sweep if flip else control.sweep
                controls.append(Arc(transform.apply(control.point), control.radius * factor, sweep))
            else:
                controls.append(control)
        return Path(controls, self.tolerance)

    def translate(self, vector: Point) -> "Path":
        return self.transform(AffineTransform.translation(vector[0], vector[1]))

    def scale(self, sx: float, sy: float | None = None) -> "Path":
        return self.transform(AffineTransform.scaling(sx, sy))

    def rotate(self, angle: float, center: Point = (0.0, 0.0)) -> "Path":
        """Rotate counter-clockwise by ``angle`` radians about ``center``."""
        return self.transform(AffineTransform.rotation(angle, center))

    # Intersections

    def _live_segments(self) -> Iterator[Segment]:
        for seg in self.segments():
            if not points_equal(seg.start, seg.end, self.tolerance):
                yield seg

    def intersect_line(self, p1: Point, p2: Point) -> list[SimpleIntersection]:
        """Crossings of the segment ``p1-p2`` with the path.

        ``crosses_from_the_right`` is True when the probe's direction points
        to the left of the path's tangent at the crossing.

        Raises:
            ImpossibleGeometryError: If ``p1`` and ``p2`` coincide
        """
        tol = self.tolerance
        if points_equal(p1, p2, tol):
            raise ImpossibleGeometryError("cannot intersect with a zero-length line")
        direction = minus(p2, p1)
        hits: list[SimpleIntersection] = []
        for seg in self._live_segments():
            if seg.is_arc:
                center = get_circle_center(seg.start, seg.end, seg.radius, seg.sweep, tol)
                for point in intersect_line_and_circle(p1, p2, center, seg.radius, tol):
                    if not point_inside_line_bbox(point, p1, p2, tol):
                        continue
                    x = point_coordinate_on_arc(point, seg.start, seg.end, seg.radius, seg.sweep, tol)
                    if not 0 < x < 1:
                        continue
                    tangent = arc_direction_at(x, seg.start, seg.end, seg.radius, seg.sweep, tol)
                    hits.append(SimpleIntersection(point, seg.index, x, cross(tangent, direction) > 0))
            else:
                point = intersect_lines(seg.start, seg.end, p1, p2, tol)
                if point is None:
                    continue
                if not (
                    point_inside_line_bbox(point, seg.start, seg.end, tol)
                    and point_inside_line_bbox(point, p1, p2, tol)
                ):
                    continue
                x = point_coordinate_on_line(point, seg.start, seg.end)
                tangent = minus(seg.end, seg.start)
                hits.append(SimpleIntersection(point, seg.index, x, cross(tangent, direction) > 0))
        return hits

    def intersect_arc(
        self, start: Point, end: Point, radius: float, sweep: int
    ) -> list[SimpleIntersection]:
        """Crossings of an arc with the path, strictly inside the arc."""
        tol = self.tolerance
        center = get_circle_center(start, end, radius, sweep, tol)
        hits: list[SimpleIntersection] = []
        for seg in self._live_segments():
            if seg.is_arc:
                seg_center = get_circle_center(seg.start, seg.end, seg.radius, seg.sweep, tol)
                candidates = intersect_two_circles(seg_center, seg.radius, center, radius, tol)
            else:
                candidates = intersect_line_and_circle(seg.start, seg.end, center, radius, tol)

            for point in candidates:
                probe_x = point_coordinate_on_arc(point, start, end, radius, sweep, tol)
                if not 0 < probe_x < 1:
                    continue
                if seg.is_arc:
                    x = point_coordinate_on_arc(point, seg.start, seg.end, seg.radius, seg.sweep, tol)
                    if not 0 < x < 1:
                        continue
                    tangent = arc_direction_at(x, seg.start, seg.end, seg.radius, seg.sweep, tol)
                else:
                    if not point_inside_line_bbox(point, seg.start, seg.end, tol):
                        continue
                    x = point_coordinate_on_line(point, seg.start, seg.end)
                    tangent = minus(seg.end, seg.start)
                direction = arc_direction_at(probe_x, start, end, radius, sweep, tol)
                hits.append(SimpleIntersection(point, seg.index, x, cross(tangent, direction) > 0))
        return hits

    def find_path_intersections(self, other: "Path") -> list[PathIntersection]:
        """Every crossing between this path's boundary and ``other``'s."""
        tol = self.tolerance
        found: list[PathIntersection] = []
        for seg in self._live_segments():
            if seg.is_arc:
                hits = other.intersect_arc(seg.start, seg.end, seg.radius, seg.sweep)
            else:
                hits = other.intersect_line(seg.start, seg.end)
            for hit in hits:
                if seg.is_arc:
                    x = point_coordinate_on_arc(hit.point, seg.start, seg.end, seg.radius, seg.sweep, tol)
                else:
                    x = point_coordinate_on_line(hit.point, seg.start, seg.end)
                own = IntersectionLocation(seg.index, x, not hit.crosses_from_the_right)
                found.append(PathIntersection(hit.point, own, hit.location))
        logger.debug("Found %d path intersections", len(found))
        return found

    def intersect_open_path(self, open_path: "Path") -> "Path":
        """The part of ``open_path`` lying inside this closed path.

        When the open path enters the shape several times, the first inside
        stretch is returned.

        Raises:
            PreconditionViolationError: If this path is open or ``open_path`` is closed
            NoIntersectionError: If no part of ``open_path`` is inside
        """
        if not self.is_closed():
            raise PreconditionViolationError("intersect open path", "clipping path is open")
        if open_path.is_closed():
            raise PreconditionViolationError("intersect open path", "clipped path is closed")

        crossings = sorted(
            (i.on_self for i in open_path.find_path_intersections(self)),
            key=lambda loc: loc.sort_key,
        )
        last_segment = len(open_path.controls) - 1
        stops = [(1, 0.0)] + [(c.segment, c.x) for c in crossings] + [(last_segment, 1.0)]
        for (seg_a, x_a), (seg_b, x_b) in zip(stops[:-1], stops[1:]):
            if seg_a == seg_b and x_b <= x_a:
                continue
            piece = open_path.subpath(seg_a, x_a, seg_b, x_b)
            if piece.length > 0 and self.contains_point(piece.evaluate_anywhere(0.5)):
                return piece
        raise NoIntersectionError("open path clipping", len(crossings))

    # Boolean operations and offsetting

    def boolean_intersection(self, other: "Path") -> "Path":
        """Closed path covering the area inside both paths."""
        from arcpath.core.boolean import BooleanEngine

        return BooleanEngine(self, other).intersection()

    def boolean_difference(self, other: "Path") -> "Path":
        """Closed path covering the area inside this path and outside ``other``."""
        from arcpath.core.boolean import BooleanEngine

        return BooleanEngine(self, other).difference()

    def boolean_union(self, other: "Path") -> "Path":
        """Closed path covering the area inside either path."""
        from arcpath.core.boolean import BooleanEngine

        return BooleanEngine(self, other).union()

    def offset(self, offsets: float | Sequence[float]) -> "Path":
        """Path shifted sideways by ``offsets``, positive to the left of travel."""
        from arcpath.core.offset import offset_path

        return offset_path(self, offsets)

    def thicken_and_close(
        self, offset: float, round_start: bool = False, round_end: bool = False
    ) -> "Path":
        """Closed ribbon between this open path and its offset."""
        from arcpath.core.offset import thicken_and_close

        return thicken_and_close(self, offset, round_start, round_end)


def _as_point(point: Sequence[float]) -> Point:
    return (float(point[0]), float(point[1]))


def _control_point(control: Control) -> Point:
    return control.point  # type: ignore[union-attr]


def _continues_straight(before: Point, point: Point, after: Point, tol: GeometryConfig) -> bool:
    """True if ``point`` lies on the straight run from ``before`` to ``after``."""
    return are_on_same_line(before, point, after, tol) and dot(
        minus(point, before), minus(after, point)
    ) > 0
