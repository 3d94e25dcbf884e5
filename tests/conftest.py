"""Shared fixtures for arcpath tests."""

import re
from collections.abc import Callable

import pytest

from arcpath import Path
from arcpath.core.vector import point_to_line

_TOKEN = re.compile(r"[A-DF-Za-df-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def path_data_close(actual: str, expected: str, tolerance: float = 1e-6) -> bool:
    """Compare two path-data strings command by command, numbers within ``tolerance``."""
    left = _TOKEN.findall(actual)
    right = _TOKEN.findall(expected)
    if len(left) != len(right):
        return False
    for a, b in zip(left, right):
        if a.isalpha() or b.isalpha():
            if a.upper() != b.upper():
                return False
        elif abs(float(a) - float(b)) > tolerance:
            return False
    return True


@pytest.fixture
def assert_path_close() -> Callable[..., None]:
    """Assert that a path (or path data) matches expected path data approximately."""

    def check(actual: object, expected: str, tolerance: float = 1e-6) -> None:
        assert path_data_close(str(actual), expected, tolerance), f"{actual} != {expected}"

    return check


@pytest.fixture
def loop_path() -> Path:
    """Trapezoid with a rounded slot cut in from its bottom edge (clockwise)."""
    half, radius, inter_center = 500, 100, 1000
    bl, tl, tr, br = (0, 1000), (0, 0), (2000, 0), (1900, 1000)

    path = Path()
    path.move_to((half, half + radius))
    path.arc((half, half - radius), radius, 1)
    path.line_to((half + inter_center, half - radius))
    path.arc((half + inter_center, half + radius), radius, 1)
    path.line_to(point_to_line((half + inter_center, 0), bl, br))
    path.line_to(br)
    path.line_to(tr)
    path.line_to(tl)
    path.line_to(bl)
    path.line_to(point_to_line((half, 0), bl, br))
    path.close()
    return path


@pytest.fixture
def square() -> Path:
    """Clockwise 10 x 10 square at the origin."""
    return Path.from_d("M 0 0 L 0 10 L 10 10 L 10 0 Z")
