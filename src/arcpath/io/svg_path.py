"""SVG path-data codec.

Only the subset a path can represent is accepted: absolute ``M``, ``L`` and
circular ``A`` commands (equal radii, large-arc flag 0) and ``Z``/``z``.
Numbers are written in their shortest round-tripping form, integral values
without a decimal point, so ``10.0`` becomes ``10`` and ``0.1 + 0.2`` keeps
all of its digits.
"""

import math
import re
from collections.abc import Iterable
from decimal import Decimal

from arcpath.domain import Arc, Close, Control, LineTo, MoveTo
from arcpath.exceptions import PathSyntaxError, UnsupportedGeometryError

_TOKEN_RE = re.compile(r"\s+|([A-Za-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def format_number(value: float) -> str:
    """Write a number the way ECMAScript's ``Number.prototype.toString`` does.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(-0.5)
        '-0.5'
        >>> format_number(1e-7)
        '1e-7'
    """
    if value == 0:
        return "0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).as_tuple()
    n = int(exponent) + len(digit_tuple)
    digits = "".join(str(digit) for digit in digit_tuple).rstrip("0")
    k = len(digits)

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        power = n - 1
        text = f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
    return sign + text


def tokenize_path_data(d: str) -> list[str]:
    """Split path data into command letters and number strings.

    Commas count as whitespace, and command letters need no separator from
    the numbers around them.

    Raises:
        PathSyntaxError: On any character that is neither a letter, a number
            nor a separator
    """
    text = d.replace(",", " ")
    tokens: list[str] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise PathSyntaxError(d, f"unexpected character {text[pos]!r} at offset {pos}")
        if match.group(1):
            tokens.append(match.group(1))
        pos = match.end()
    return tokens


def _is_command(token: str) -> bool:
    return token.isalpha()


def parse_path_data(d: str) -> list[Control]:
    """Parse path data into controls.

    Args:
        d: SVG path data, e.g. ``"M 0 0 L 10 0 A 5 5 0 0 1 10 10 Z"``

    Returns:
        The controls in order

    Raises:
        PathSyntaxError: If numbers are missing or misplaced
        UnsupportedGeometryError: On relative, curve or elliptical-arc
            commands, a set large-arc flag, or more than one subpath
    """
    tokens = tokenize_path_data(d)
    controls: list[Control] = []
    command: str | None = None
    i = 0

    def take(count: int) -> list[float]:
        nonlocal i
        values = tokens[i : i + count]
        if len(values) < count or any(_is_command(v) for v in values):
            raise PathSyntaxError(d, f"command {command} expects {count} numbers")
        i += count
        return [float(v) for v in values]

    while i < len(tokens):
        token = tokens[i]
        if controls and isinstance(controls[-1], Close):
            raise UnsupportedGeometryError("multiple subpaths in one path")

        if _is_command(token):
            i += 1
            if token in ("Z", "z"):
                if not controls:
                    raise PathSyntaxError(d, "path must start with M")
                controls.append(Close())
                command = None
                continue
            if token not in ("M", "L", "A"):
                raise UnsupportedGeometryError(f"path command '{token}'")
            command = token
        elif command is None:
            raise PathSyntaxError(d, f"number {token} without a command")

        if command == "M":
            if controls:
                raise UnsupportedGeometryError("multiple subpaths in one path")
            x, y = take(2)
            controls.append(MoveTo((x, y)))
            command = "L"
        elif command == "L":
            if not controls:
                raise PathSyntaxError(d, "path must start with M")
            x, y = take(2)
            controls.append(LineTo((x, y)))
        else:
            if not controls:
                raise PathSyntaxError(d, "path must start with M")
            rx, ry, _rotation, large_arc, sweep, x, y = take(7)
            if rx != ry:
                raise UnsupportedGeometryError(f"elliptical arc (rx={rx}, ry={ry})")
            if large_arc != 0:
                raise UnsupportedGeometryError("arc with large-arc flag set")
            if sweep not in (0, 1):
                raise PathSyntaxError(d, f"sweep flag must be 0 or 1, got {sweep}")
            controls.append(Arc((x, y), rx, int(sweep)))

    return controls


def format_path_data(controls: Iterable[Control]) -> str:
    """Write controls as path data."""
    parts: list[str] = []
    for control in controls:
        if isinstance(control, Close):
            parts.append("Z")
            continue
        x, y = (format_number(v) for v in control.point)
        if isinstance(control, MoveTo):
            parts.append(f"M {x} {y}")
        elif isinstance(control, LineTo):
            parts.append(f"L {x} {y}")
        else:
            r = format_number(control.radius)
            parts.append(f"A {r} {r} 0 0 {control.sweep} {x} {y}")
    return " ".join(parts)
