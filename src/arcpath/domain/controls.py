"""Path controls and segment views.

This module defines the building blocks of a path:
- MoveTo, LineTo, Arc, Close: The control variants (a closed sum type)
- Segment: A derived view of the edge ending at a given control
- SegmentKind: Enum for the geometric type of a segment
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

Point = tuple[float, float]
Point3 = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start of a path. Only valid as the first control."""

    point: Point

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": "M", "point": list(self.point)}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the previous point to ``point``."""

    point: Point

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": "L", "point": list(self.point)}


@dataclass(frozen=True, slots=True)
class Arc:
    """Circular arc from the previous point to ``point``.

    The large-arc flag is always 0. A sweep of 1 travels counter-clockwise
    in a y-up frame (increasing angle), matching SVG's positive-angle direction.

    Attributes:
        point: End point of the arc
        radius: Circle radius, strictly positive
        sweep: 0 or 1, selects one of the two arcs of that radius
    """

    point: Point
    radius: float
    sweep: int

    def flipped(self) -> "Arc":
        """Return the same arc with the other sweep flag."""
        return Arc(self.point, self.radius, 1 - self.sweep)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": "A",
            "point": list(self.point),
            "radius": self.radius,
            "sweep": self.sweep,
        }


@dataclass(frozen=True, slots=True)
class Close:
    """Implicit straight segment back to the first point. Only valid last."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": "Z"}


Control = Union[MoveTo, LineTo, Arc, Close]


def control_from_dict(data: dict[str, Any]) -> Control:
    """Create a control from its dictionary form."""
    kind = data["type"]
    if kind == "Z":
        return Close()
    point = (float(data["point"][0]), float(data["point"][1]))
    if kind == "M":
        return MoveTo(point)
    if kind == "L":
        return LineTo(point)
    if kind == "A":
        return Arc(point, float(data["radius"]), int(data["sweep"]))
    raise ValueError(f"Unknown control type: {kind}")


class SegmentKind(Enum):
    """Geometric type of a segment."""

    LINE = auto()
    ARC = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    """The edge of a path ending at control ``index``.

    Segments are numbered from 1; segment ``i`` runs from the point of control
    ``i - 1`` to the point of control ``i``. A closing segment runs from the
    last point back to the first one.

    Attributes:
        index: Position of the control this segment ends at
        start: Point the segment starts from
        end: Point the segment ends at
        kind: Line or arc
        radius: Arc radius (None for lines)
        sweep: Arc sweep flag (None for lines)
        closing: True for the synthetic segment of a Close control
    """

    index: int
    start: Point
    end: Point
    kind: SegmentKind
    radius: float | None = None
    sweep: int | None = None
    closing: bool = False

    @property
    def is_arc(self) -> bool:
        """True if the segment is a circular arc."""
        return self.kind == SegmentKind.ARC
