"""Domain models for arcpath.

This module contains the value types a path is made of and the records the
intersection search produces. All models are designed to be:

- Immutable (frozen dataclasses), so controls can be shared between paths
- Independent of the parsing and serialization layer

Key classes:
- MoveTo, LineTo, Arc, Close: The control variants of a path
- Segment: A read-only view of one edge of a path
- IntersectionLocation: Where a crossing lies along one path
- SimpleIntersection: A crossing between a path and a line or arc probe
- PathIntersection: A crossing located along two paths at once
"""

from arcpath.domain.controls import (
    Arc,
    Close,
    Control,
    LineTo,
    MoveTo,
    Point,
    Point3,
    Segment,
    SegmentKind,
)
from arcpath.domain.intersection import (
    IntersectionLocation,
    PathIntersection,
    Side,
    SimpleIntersection,
)

__all__: list[str] = [
    # Enums
    "SegmentKind",
    "Side",
    # Core types
    "Point",
    "Point3",
    "MoveTo",
    "LineTo",
    "Arc",
    "Close",
    "Control",
    "Segment",
    "IntersectionLocation",
    "SimpleIntersection",
    "PathIntersection",
]
