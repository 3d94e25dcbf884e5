"""Tests for the boolean engine and its loop walker."""

import math

import pytest

from arcpath import Path
from arcpath.config import BooleanOperation
from arcpath.core.boolean import BooleanEngine, LoopWalker, Ordering, WalkState
from arcpath.domain import IntersectionLocation, PathIntersection, Side
from arcpath.exceptions import NoIntersectionError, NonConvergentError, PreconditionViolationError

NOTCHED_BAR = "M 600 0 L 53.210678118654755 0 L 53.210678118654755 -70 L 600 -70 Z"
ROUNDED_TAB = "M 85 -35 A 3 3 0 0 0 85 -29 L 85 35 L 100 35 L 100 -29 A 3 3 0 0 0 100 -35 Z"


@pytest.fixture
def tower() -> Path:
    """Clockwise 3 x 15 rectangle sticking out of the top of the square fixture."""
    return Path.from_d("M 5 5 L 5 20 L 8 20 L 8 5 Z")


def two_crossing_walker(step_limit: int = 10) -> LoopWalker:
    """Walker for two crossings ordered the same way along both sides."""
    ordering = Ordering(order=(0, 1), after=(1, 0), before=(1, 0))
    return LoopWalker(
        crossing_flags={Side.SELF: [True, False], Side.OTHER: [False, True]},
        orderings={Side.SELF: ordering, Side.OTHER: ordering},
        turn_right=True,
        step_limit=step_limit,
    )


class TestOrdering:
    """Tests for crossing orders along one side."""

    def test_along_sorts_by_position(self) -> None:
        """Segment index first, then coordinate, with cyclic neighbours."""
        loc = IntersectionLocation
        crossings = [
            PathIntersection((0, 0), loc(3, 0.2, True), loc(1, 0.5, False)),
            PathIntersection((1, 0), loc(1, 0.9, False), loc(2, 0.1, True)),
            PathIntersection((2, 0), loc(1, 0.1, True), loc(1, 0.7, False)),
        ]
        ordering = Ordering.along(crossings, Side.SELF)
        assert ordering.order == (2, 1, 0)
        assert ordering.after == (2, 0, 1)
        assert ordering.before == (1, 2, 0)
        assert ordering.next(0, True) == 2
        assert ordering.next(0, False) == 1
        assert Ordering.along(crossings, Side.OTHER).order == (0, 2, 1)


class TestLoopWalker:
    """Tests for the loop walk state machine."""

    def test_every_walk_closes(self) -> None:
        """Two crossings give four loops of two steps covering every state."""
        loops = list(two_crossing_walker().loops())
        assert len(loops) == 4
        assert all(len(loop) == 2 for loop in loops)
        states = {state for loop in loops for state in loop}
        assert len(states) == 8

    def test_walk_starts_with_start(self) -> None:
        """The first yielded state is the start and the walk returns to it."""
        walker = two_crossing_walker()
        start = WalkState(0, Side.SELF, True)
        loop = list(walker.walk(start))
        assert loop == [start, WalkState(1, Side.OTHER, True)]
        assert walker.step(loop[-1]) == start

    def test_subject_states_start_loops(self) -> None:
        """Loops are enumerated from subject-side states."""
        for loop in two_crossing_walker().loops():
            assert loop[0].side is Side.SELF

    def test_step_limit(self) -> None:
        """A walk longer than the limit is stopped."""
        walker = two_crossing_walker(step_limit=1)
        with pytest.raises(NonConvergentError) as exc_info:
            list(walker.walk(WalkState(0, Side.SELF, True)))
        assert exc_info.value.steps == 1

    def test_state_inversion(self) -> None:
        """Backward states traverse their path inverted."""
        assert WalkState(0, Side.OTHER, False).invert
        assert not WalkState(0, Side.OTHER, True).invert
        assert Side.SELF.opposite is Side.OTHER


class TestIntersection:
    """Tests for boolean intersection."""

    def test_squares(self, square: Path, tower: Path) -> None:
        """The overlap of two rectangles."""
        result = square.boolean_intersection(tower)
        assert result.is_closed()
        assert result.area() == pytest.approx(15)
        assert result.contains_point((6.5, 7.5))

    def test_circle_and_rectangle(self, assert_path_close) -> None:
        """The circle keeps the two arcs inside the rectangle."""
        rect = Path.make_rect(52, 40).translate((-26, -20))
        result = Path.make_circle(24).boolean_intersection(rect)
        x = math.sqrt(176)
        assert_path_close(
            result,
            f"M {-x} 20 A 24 24 0 0 1 {-x} -20 L {x} -20 A 24 24 0 0 1 {x} 20 Z",
        )
        cap = 24**2 * math.acos(20 / 24) - 20 * x
        assert result.area() == pytest.approx(math.pi * 24**2 - 2 * cap)

    def test_slot_and_triangle(self, loop_path: Path) -> None:
        """A triangle overlapping the rounded end of the slot."""
        center = (1500, 500)
        triangle = Path.from_polyline(
            [center, (2000, 500 + 1000 * math.sin(math.pi / 3)), (2500, 500)]
        )
        result = loop_path.boolean_intersection(triangle)
        # The zero-length closing segment is folded away, so the result starts
        # at the end of the first line
        assert result.to_string() == (
            "M 1788.6751345948128 1000 L 1900 1000 L 1950 500 L 1600 500 "
            "A 100 100 0 0 1 1550 586.6025403784439 Z"
        )

    def test_disjoint_shapes(self, square: Path) -> None:
        """Shapes that do not touch have no loop to trace."""
        far = square.translate((100, 0))
        with pytest.raises(NoIntersectionError) as exc_info:
            square.boolean_intersection(far)
        assert exc_info.value.count == 0

    def test_open_operand(self, square: Path) -> None:
        """Both operands must be closed."""
        with pytest.raises(PreconditionViolationError):
            square.boolean_intersection(Path.from_d("M 0 0 L 20 20"))
        with pytest.raises(PreconditionViolationError):
            Path.from_d("M 0 0 L 20 20").boolean_difference(square)


class TestDifference:
    """Tests for boolean difference."""

    def test_squares(self, square: Path, tower: Path) -> None:
        """A notch cut out of the top edge."""
        result = square.boolean_difference(tower)
        assert result.to_string() == "M 10 10 L 10 0 L 0 0 L 0 10 L 5 10 L 5 5 L 8 5 L 8 10 Z"

    def test_rounded_tab(self) -> None:
        """Arcs of the clip become part of the result."""
        bar = Path.from_d(NOTCHED_BAR)
        tab = Path.from_d(ROUNDED_TAB)
        result = bar.boolean_difference(tab)
        overlap = 15 * 35 + 9 * math.pi
        assert result.area() == pytest.approx(bar.area() - overlap)
        assert not result.contains_point((92.5, -10))
        assert not result.contains_point((83, -32))
        assert result.contains_point((300, -35))


class TestUnion:
    """Tests for boolean union."""

    def test_shared_edge(self) -> None:
        """Rectangles sharing a side are stitched along it."""
        left = Path.from_d("M 0 0 L 10 0 L 10 10 L 0 10 Z")
        right = Path.from_d("M 10 0 L 20 0 L 20 10 L 10 10 Z")
        assert left.boolean_union(right).to_string() == "M 0 10 L 0 0 L 20 0 L 20 10 Z"

    def test_crossing_boundaries(self, square: Path, tower: Path) -> None:
        """The outer loop of two overlapping rectangles."""
        result = square.boolean_union(tower)
        assert result.area() == pytest.approx(130)
        assert result.rotates_clockwise() == square.rotates_clockwise()
        assert result.contains_point((6.5, 15))
        assert result.contains_point((1, 1))


class TestEngine:
    """Tests for the engine's crossing bookkeeping."""

    def test_shared_vertex_crossings_are_merged(self, square: Path) -> None:
        """A crossing through a corner is found on both segments but kept once."""
        wedge = Path.from_d("M 5 5 L 15 15 L 15 5 Z")
        engine = BooleanEngine(square, wedge)
        assert len(square.find_path_intersections(wedge)) == 3
        assert len(engine.intersections) == 2

    def test_walker_needs_two_crossings(self, square: Path) -> None:
        """The walker is only built for crossing boundaries."""
        engine = BooleanEngine(square, square.translate((50, 50)))
        with pytest.raises(NoIntersectionError) as exc_info:
            engine.walker(BooleanOperation.UNION)
        assert exc_info.value.operation == "union"
