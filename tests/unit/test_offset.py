"""Tests for path offsetting and thickening."""

import math

import pytest

from arcpath import Path
from arcpath.config import DEFAULT_TOLERANCE
from arcpath.core.offset import ShiftedSegment, shift_segment
from arcpath.exceptions import ImpossibleGeometryError, PreconditionViolationError

TRACK = "M 900 700 A 200 200 0 0 0 900 1100 L 2020 1100 A 200 200 0 0 0 2020 700"


class TestShiftSegment:
    """Tests for moving single segments sideways."""

    def test_line_moves_left(self) -> None:
        """Lines shift along their left normal."""
        seg = Path.from_d("M 0 0 L 10 0").segment(1)
        assert shift_segment(seg, 2, DEFAULT_TOLERANCE) == ShiftedSegment((0, 2), (10, 2))

    def test_arc_keeps_center(self) -> None:
        """Counter-clockwise arcs shrink when moved left, clockwise ones grow."""
        ccw = Path.from_d("M 10 0 A 10 10 0 0 1 -10 0").segment(1)
        shifted = shift_segment(ccw, 2, DEFAULT_TOLERANCE)
        assert shifted.radius == pytest.approx(8)
        assert shifted.start == pytest.approx((8, 0))
        assert shifted.end == pytest.approx((-8, 0))

        cw = Path.from_d("M -10 0 A 10 10 0 0 0 10 0").segment(1)
        assert shift_segment(cw, 2, DEFAULT_TOLERANCE).radius == pytest.approx(12)

    def test_collapsing_arc(self) -> None:
        """An arc cannot shrink past its center."""
        seg = Path.from_d("M 0 0 A 1 1 0 0 1 2 0").segment(1)
        with pytest.raises(ImpossibleGeometryError):
            shift_segment(seg, 2, DEFAULT_TOLERANCE)


class TestOffset:
    """Tests for offsetting whole paths."""

    def test_open_track(self) -> None:
        """Arcs and lines offset outward together."""
        result = Path.from_d(TRACK).offset(100)
        assert result.to_string() == (
            "M 900 600 A 300 300 0 0 0 900 1200 L 2020 1200 A 300 300 0 0 0 2020 600"
        )

    def test_closed_square(self, square: Path) -> None:
        """The clockwise square grows to the left of travel and shrinks to the right."""
        grown = square.offset(1)
        assert grown.is_closed()
        assert grown.area() == pytest.approx(144)
        assert grown.points()[0] == pytest.approx((-1, -1))
        assert square.offset(-1).area() == pytest.approx(64)

    def test_closed_circle(self, assert_path_close) -> None:
        """Concentric arcs keep their shared endpoints."""
        result = Path.make_circle(10).offset(2)
        assert_path_close(result, "M 8 0 A 8 8 0 0 1 -8 0 A 8 8 0 0 1 8 0 Z")

    def test_per_segment_offsets(self, assert_path_close) -> None:
        """Each segment may move by its own distance."""
        result = Path.from_d("M 0 0 L 10 0 L 10 10").offset([1, 2])
        assert_path_close(result, "M 0 1 L 8 1 L 8 10")

    def test_too_few_offsets(self) -> None:
        """One distance per segment is required."""
        with pytest.raises(PreconditionViolationError):
            Path.from_d("M 0 0 L 10 0 L 10 10").offset([1])

    def test_degenerate_path(self) -> None:
        """A path without length has nothing to offset."""
        with pytest.raises(PreconditionViolationError):
            Path.from_d("M 1 1 L 1 1").offset(1)


class TestThicken:
    """Tests for closing a path into a ribbon."""

    def test_line(self) -> None:
        """A single line becomes a rectangle on its right side."""
        path = Path().move_to((0, 400)).line_to((500, 400))
        assert path.thicken_and_close(100).to_string() == "M 0 400 L 500 400 L 500 300 L 0 300 Z"

    def test_track(self) -> None:
        """The return side is the track offset inward."""
        result = Path.from_d(TRACK).thicken_and_close(100)
        assert result.to_string() == (
            "M 900 700 A 200 200 0 0 0 900 1100 L 2020 1100 A 200 200 0 0 0 2020 700 "
            "L 2020 800 A 100 100 0 0 1 2020 1000 L 900 1000 A 100 100 0 0 1 900 800 Z"
        )

    def test_round_caps(self, assert_path_close) -> None:
        """Half circle caps bulge away from the ribbon."""
        line = Path.from_d("M 0 0 L 10 0")
        end_only = line.thicken_and_close(2, round_end=True)
        assert_path_close(end_only, "M 0 0 L 10 0 A 1 1 0 0 0 10 -2 L 0 -2 Z")
        both = line.thicken_and_close(2, round_start=True, round_end=True)
        assert_path_close(both, "M 0 0 L 10 0 A 1 1 0 0 0 10 -2 L 0 -2 A 1 1 0 0 0 0 0 Z")
        assert both.area() == pytest.approx(20 + math.pi)
        assert both.contains_point((10.5, -1))

    def test_preconditions(self, square: Path) -> None:
        """Only open paths with a segment can be thickened."""
        with pytest.raises(PreconditionViolationError):
            square.thicken_and_close(1)
        with pytest.raises(PreconditionViolationError):
            Path().move_to((0, 0)).thicken_and_close(1)
