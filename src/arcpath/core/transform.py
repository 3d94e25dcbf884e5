"""Affine transforms of the plane.

An ``AffineTransform`` stores the six coefficients of the SVG ``matrix(a b c
d e f)`` form, mapping ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``.
Paths only need two capabilities from it: mapping a point and telling
whether the map reverses orientation.
"""

import math
import re
from dataclasses import dataclass

from arcpath.domain import Point
from arcpath.exceptions import ImpossibleGeometryError, PathSyntaxError

_TRANSFORM_PATTERN = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")
_NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """A 2D affine map in SVG matrix form."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float = 0.0) -> "AffineTransform":
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, angle: float, center: Point = (0.0, 0.0)) -> "AffineTransform":
        """Counter-clockwise rotation by ``angle`` radians about ``center``."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        cx, cy = center
        return cls(
            a=cos_a,
            b=sin_a,
            c=-sin_a,
            d=cos_a,
            e=cx - cos_a * cx + sin_a * cy,
            f=cy - sin_a * cx - cos_a * cy,
        )

    @classmethod
    def from_svg(cls, transform: str) -> "AffineTransform":
        """Parse an SVG ``transform`` attribute.

        Functions are applied right to left, as in SVG: in
        ``"translate(10) scale(2)"`` points are scaled first.

        Raises:
            PathSyntaxError: If a function has the wrong number of arguments
        """
        result = cls.identity()
        for match in _TRANSFORM_PATTERN.finditer(transform):
            name = match.group(1)
            args = [float(v) for v in _NUMBER_PATTERN.findall(match.group(2))]
            result = result.compose(_svg_function(name, args, transform))
        return result

    def apply(self, point: Point) -> Point:
        """Map a point through the transform."""
        x, y = point
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def is_orientation_reversing(self) -> bool:
        """True for maps that mirror the plane (negative determinant)."""
        return self.determinant < 0

    def is_conformal(self, tolerance: float = 1e-9) -> bool:
        """True if the map is a similarity, so circles stay circles."""
        scale = max(abs(self.a), abs(self.b), abs(self.c), abs(self.d), 1.0)
        tol = tolerance * scale
        rotation_like = abs(self.a - self.d) <= tol and abs(self.b + self.c) <= tol
        reflection_like = abs(self.a + self.d) <= tol and abs(self.b - self.c) <= tol
        return rotation_like or reflection_like

    @property
    def scale_factor(self) -> float:
        """Length scaling of a conformal map."""
        return math.sqrt(abs(self.determinant))

    def compose(self, other: "AffineTransform") -> "AffineTransform":
        """The map applying ``other`` first, then ``self``."""
        return AffineTransform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def then(self, other: "AffineTransform") -> "AffineTransform":
        """The map applying ``self`` first, then ``other``."""
        return other.compose(self)

    def inverse(self) -> "AffineTransform":
        """Inverse map.

        Raises:
            ImpossibleGeometryError: If the transform is not invertible
        """
        det = self.determinant
        if abs(det) < 1e-12:
            raise ImpossibleGeometryError("transform is not invertible")
        return AffineTransform(
            a=self.d / det,
            b=-self.b / det,
            c=-self.c / det,
            d=self.a / det,
            e=(self.c * self.f - self.d * self.e) / det,
            f=(self.b * self.e - self.a * self.f) / det,
        )


def _svg_function(name: str, args: list[float], source: str) -> AffineTransform:
    counts = {
        "matrix": (6,),
        "translate": (1, 2),
        "scale": (1, 2),
        "rotate": (1, 3),
        "skewX": (1,),
        "skewY": (1,),
    }
    if len(args) not in counts[name]:
        raise PathSyntaxError(source, f"{name}() takes {counts[name]} arguments, got {len(args)}")

    if name == "matrix":
        return AffineTransform(*args)
    if name == "translate":
        return AffineTransform.translation(args[0], args[1] if len(args) > 1 else 0.0)
    if name == "scale":
        return AffineTransform.scaling(args[0], args[1] if len(args) > 1 else None)
    if name == "rotate":
        center = (args[1], args[2]) if len(args) == 3 else (0.0, 0.0)
        return AffineTransform.rotation(math.radians(args[0]), center)
    if name == "skewX":
        return AffineTransform(c=math.tan(math.radians(args[0])))
    return AffineTransform(b=math.tan(math.radians(args[0])))
