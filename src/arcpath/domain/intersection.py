"""Records produced by the intersection search.

Every crossing is located by ``(segment, x)``: the segment index it lies on
and its parametric coordinate along that segment.
"""

from dataclasses import dataclass
from enum import Enum, auto

from arcpath.domain.controls import Point


class Side(Enum):
    """Which operand of a two-path operation a location refers to."""

    SELF = auto()
    OTHER = auto()

    @property
    def opposite(self) -> "Side":
        """The other operand."""
        return Side.OTHER if self is Side.SELF else Side.SELF


@dataclass(frozen=True, slots=True)
class IntersectionLocation:
    """Position of a crossing along one path.

    Attributes:
        segment: Index of the segment the crossing lies on
        x: Parametric coordinate along that segment
        crosses_from_the_right: True if the other curve passes from the right
            of this path's tangent to its left at the crossing
    """

    segment: int
    x: float
    crosses_from_the_right: bool

    @property
    def sort_key(self) -> float:
        """Position along the whole path, segment first then ``x``."""
        return self.segment * 10 + self.x


@dataclass(frozen=True, slots=True)
class SimpleIntersection:
    """Crossing between a path and an external line or arc probe."""

    point: Point
    segment: int
    x: float
    crosses_from_the_right: bool

    @property
    def location(self) -> IntersectionLocation:
        """Location of the crossing along the path."""
        return IntersectionLocation(self.segment, self.x, self.crosses_from_the_right)


@dataclass(frozen=True, slots=True)
class PathIntersection:
    """Crossing between two path boundaries, located along both.

    Attributes:
        point: Where the boundaries cross
        on_self: Location along the path the search was run from
        on_other: Location along the path passed as argument
    """

    point: Point
    on_self: IntersectionLocation
    on_other: IntersectionLocation

    def location(self, side: Side) -> IntersectionLocation:
        """Location along the requested operand."""
        return self.on_self if side is Side.SELF else self.on_other
