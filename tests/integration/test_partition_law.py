"""End-to-end checks of the boolean operations on whole shapes.

The intersection and difference of a subject with the same clip split the
subject in two, so their areas add up to the subject's area. These tests
also drive the command line from path data through to measured output.
"""

import math

import pytest
from typer.testing import CliRunner

from arcpath import Path
from arcpath.cli.app import app

SQUARE = "M 0 0 L 0 10 L 10 10 L 10 0 Z"
TOWER = "M 5 5 L 5 20 L 8 20 L 8 5 Z"
NOTCHED_BAR = "M 600 0 L 53.210678118654755 0 L 53.210678118654755 -70 L 600 -70 Z"
ROUNDED_TAB = "M 85 -35 A 3 3 0 0 0 85 -29 L 85 35 L 100 35 L 100 -29 A 3 3 0 0 0 100 -35 Z"


@pytest.mark.parametrize(
    "subject, clip, overlap",
    [
        (SQUARE, TOWER, 15.0),
        (NOTCHED_BAR, ROUNDED_TAB, 15 * 35 + 9 * math.pi),
    ],
    ids=["rectangles", "arcs"],
)
def test_intersection_and_difference_partition_subject(subject, clip, overlap):
    """Test the two halves of a subject add up to the whole."""
    first = Path.from_d(subject)
    second = Path.from_d(clip)

    inside = first.boolean_intersection(second)
    outside = first.boolean_difference(second)

    assert inside.area() == pytest.approx(overlap)
    assert inside.area() + outside.area() == pytest.approx(first.area())


def test_union_covers_both_operands():
    """Test the union area counts the overlap once."""
    square = Path.from_d(SQUARE)
    tower = Path.from_d(TOWER)

    union = square.boolean_union(tower)
    overlap = square.boolean_intersection(tower)

    assert union.area() == pytest.approx(square.area() + tower.area() - overlap.area())


def test_results_keep_subject_winding():
    """Test results wind the same way as the subject."""
    square = Path.from_d(SQUARE)
    tower = Path.from_d(TOWER)

    assert square.boolean_difference(tower).rotates_clockwise()
    assert square.boolean_union(tower).rotates_clockwise()


def test_result_round_trips_through_path_data():
    """Test a computed path parses back to the same controls."""
    result = Path.from_d(NOTCHED_BAR).boolean_difference(Path.from_d(ROUNDED_TAB))
    assert Path.from_d(result.to_string()) == result


def test_invert_is_an_involution():
    """Test inverting twice gives back the original path."""
    result = Path.from_d(NOTCHED_BAR).boolean_difference(Path.from_d(ROUNDED_TAB))
    assert result.invert().invert() == result
    assert result.invert().area() == pytest.approx(result.area())
    assert result.invert().rotates_clockwise() != result.rotates_clockwise()


def test_cli_pipeline(tmp_path):
    """Test the output of one command feeds the next."""
    runner = CliRunner()
    cut = runner.invoke(app, ["boolean", "difference", SQUARE, TOWER])
    assert cut.exit_code == 0

    result_data = next(line for line in cut.output.splitlines() if line.startswith("M "))
    data_file = tmp_path / "cut.txt"
    data_file.write_text(result_data, encoding="utf-8")

    described = runner.invoke(app, ["info", f"@{data_file}"])
    assert described.exit_code == 0
    assert "85" in described.output

    output = tmp_path / "cut.svg"
    drawn = runner.invoke(app, ["render", f"@{data_file}", SQUARE, "-o", str(output)])
    assert drawn.exit_code == 0
    assert result_data in output.read_text(encoding="utf-8")
