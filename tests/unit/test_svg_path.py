"""Tests for the SVG path-data codec."""

import pytest

from arcpath.domain import Arc, Close, LineTo, MoveTo
from arcpath.exceptions import PathSyntaxError, UnsupportedGeometryError
from arcpath.io import format_number, format_path_data, parse_path_data, tokenize_path_data


class TestFormatNumber:
    """Tests for number formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, "0"),
            (-0.0, "0"),
            (10.0, "10"),
            (-0.5, "-0.5"),
            (123.456, "123.456"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1.5e-6, "0.0000015"),
            (1e-7, "1e-7"),
            (1e21, "1e+21"),
            (2.5e20, "250000000000000000000"),
        ],
    )
    def test_shortest_form(self, value: float, expected: str) -> None:
        """Integral values drop the decimal point, tiny and huge ones use exponents."""
        assert format_number(value) == expected

    def test_round_trips(self) -> None:
        """Formatted numbers parse back to the same float."""
        for value in (53.210678118654755, 1833.3333333333333, -1e-9, 1e300):
            assert float(format_number(value)) == value


class TestTokenize:
    """Tests for the tokenizer."""

    def test_commas_and_glued_commands(self) -> None:
        """Commas separate like spaces and letters need no separator."""
        assert tokenize_path_data("M0,0L10-5z") == ["M", "0", "0", "L", "10", "-5", "z"]

    def test_exponents(self) -> None:
        """Numbers may carry an exponent."""
        assert tokenize_path_data("M 1e-3 2.5E+2") == ["M", "1e-3", "2.5E+2"]

    def test_bad_character(self) -> None:
        """Anything else is a syntax error."""
        with pytest.raises(PathSyntaxError) as exc_info:
            tokenize_path_data("M 0 0 # 1 1")
        assert "#" in exc_info.value.reason


class TestParse:
    """Tests for parsing path data into controls."""

    def test_all_commands(self) -> None:
        """Moves, lines, arcs and the closing command."""
        controls = parse_path_data("M 0 0 L 10 0 A 5 5 0 0 1 10 10 Z")
        assert controls == [MoveTo((0, 0)), LineTo((10, 0)), Arc((10, 10), 5, 1), Close()]

    def test_implicit_line_after_move(self) -> None:
        """Extra pairs after M are line segments."""
        controls = parse_path_data("M 0 0 10 0 10 10")
        assert controls == [MoveTo((0, 0)), LineTo((10, 0)), LineTo((10, 10))]

    def test_repeated_command(self) -> None:
        """A command letter applies to every following group of numbers."""
        controls = parse_path_data("M 0 0 L 1 0 2 0 A 1 1 0 0 0 3 1 1 1 0 0 0 4 2")
        assert controls[1:] == [LineTo((1, 0)), LineTo((2, 0)), Arc((3, 1), 1, 0), Arc((4, 2), 1, 0)]

    def test_lowercase_close(self) -> None:
        """``z`` closes the path like ``Z``."""
        assert parse_path_data("M 0 0 L 1 0 L 1 1 z")[-1] == Close()

    def test_empty_data(self) -> None:
        """Whitespace alone is an empty path."""
        assert parse_path_data("  ") == []

    @pytest.mark.parametrize(
        "data",
        [
            "L 1 1",
            "Z",
            "0 0",
            "M 0",
            "M 0 0 L 1",
            "M 0 0 A 1 1 0 0 2 1 1",
        ],
    )
    def test_syntax_errors(self, data: str) -> None:
        """Missing M, misplaced numbers and bad sweep flags."""
        with pytest.raises(PathSyntaxError):
            parse_path_data(data)

    @pytest.mark.parametrize(
        "data, feature",
        [
            ("M 0 0 L 1 1 Z M 2 2", "multiple subpaths"),
            ("M 0 0 M 1 1", "multiple subpaths"),
            ("M 0 0 A 1 2 0 0 1 1 1", "elliptical arc"),
            ("M 0 0 A 1 1 0 1 1 1 1", "large-arc"),
            ("m 0 0 l 1 1", "'m'"),
            ("M 0 0 C 1 1 2 2 3 3", "'C'"),
        ],
    )
    def test_unsupported_features(self, data: str, feature: str) -> None:
        """Constructs outside the line and circular-arc subset."""
        with pytest.raises(UnsupportedGeometryError) as exc_info:
            parse_path_data(data)
        assert feature in exc_info.value.feature


class TestFormat:
    """Tests for writing controls as path data."""

    def test_canonical_form(self) -> None:
        """Commands separated by single spaces, radii repeated."""
        controls = [MoveTo((0, 0)), LineTo((10.0, 0)), Arc((10, 10), 5.0, 1), Close()]
        assert format_path_data(controls) == "M 0 0 L 10 0 A 5 5 0 0 1 10 10 Z"

    def test_exact_round_trip(self) -> None:
        """Canonical path data survives a parse and format unchanged."""
        data = (
            "M 600 0 L 53.210678118654755 0 L 53.210678118654755 -70 L 85 -70 "
            "L 85 -35 A 3 3 0 0 0 85 -29 L 85 0 L 600 0 Z"
        )
        assert format_path_data(parse_path_data(data)) == data
