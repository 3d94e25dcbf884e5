"""Standalone SVG documents for inspecting paths.

Paths are drawn as unfilled strokes, point lists as polylines with a dot on
every vertex. The viewBox covers every shape plus a margin, and the stroke
width is scaled to the drawing so small and large geometry stay readable.
"""

import math
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import TYPE_CHECKING, Union

from arcpath.domain import Point
from arcpath.io.svg_path import format_number

if TYPE_CHECKING:
    from arcpath.core.path import Path

SVG_NS = "http://www.w3.org/2000/svg"
COLORS = ("red", "green", "blue", "purple", "brown")

Shape = Union["Path", Sequence[Point]]


@dataclass
class BBox:
    """Axis-aligned bounding box grown one point at a time."""

    x_min: float = math.inf
    y_min: float = math.inf
    x_max: float = -math.inf
    y_max: float = -math.inf
    margin_percents: float = 5.0

    @property
    def is_empty(self) -> bool:
        return self.x_min > self.x_max

    def include(self, point: Point) -> None:
        self.x_min = min(self.x_min, point[0])
        self.y_min = min(self.y_min, point[1])
        self.x_max = max(self.x_max, point[0])
        self.y_max = max(self.y_max, point[1])

    def include_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self.include(point)

    @property
    def size(self) -> float:
        """Largest side of the box."""
        if self.is_empty:
            return 0.0
        return max(self.x_max - self.x_min, self.y_max - self.y_min)

    def to_view_box_values(self, margin: float | None = None) -> tuple[float, float, float, float]:
        """``(x, y, width, height)`` rounded outward to whole units plus a margin."""
        if self.is_empty:
            return (0.0, 0.0, 0.0, 0.0)
        x_distance = math.ceil(self.x_max - self.x_min)
        y_distance = math.ceil(self.y_max - self.y_min)
        if margin is None:
            margin = self.margin_percents / 100 * max(x_distance, y_distance)
        return (
            math.floor(self.x_min) - margin,
            math.floor(self.y_min) - margin,
            x_distance + 2 * margin,
            y_distance + 2 * margin,
        )

    def to_view_box(self, margin: float | None = None) -> str:
        return " ".join(format_number(v) for v in self.to_view_box_values(margin))

    @classmethod
    def from_view_box(cls, view_box: str | None) -> "BBox":
        """Box covering an SVG viewBox attribute value."""
        box = cls()
        if not view_box:
            return box
        x, y, width, height = (float(v) for v in view_box.replace(",", " ").split())
        box.x_min, box.y_min = x, y
        box.x_max, box.y_max = x + width, y + height
        return box


def _polyline_element(points: Sequence[Point], color: str, radius: float) -> ET.Element:
    group = ET.Element("g")
    d = " ".join(
        f"{'M' if i == 0 else 'L'} {format_number(p[0])} {format_number(p[1])}"
        for i, p in enumerate(points)
    )
    ET.SubElement(group, "path", d=d, stroke=color, fill="none")
    for p in points[1:]:
        ET.SubElement(
            group,
            "circle",
            cx=format_number(p[0]),
            cy=format_number(p[1]),
            r=format_number(radius),
            fill=color,
        )
    return group


def render_svg(shapes: Sequence[Shape]) -> str:
    """Render paths and point lists as an SVG document.

    Args:
        shapes: Paths (drawn from their path data) or point sequences
            (drawn as polylines with vertex markers)

    Returns:
        The SVG document text
    """
    bbox = BBox()
    for shape in shapes:
        if hasattr(shape, "to_polyline"):
            bbox.include_all(shape.to_polyline())
        else:
            bbox.include_all(shape)

    size = bbox.size or 1.0
    stroke = size / 500
    root = ET.Element("svg", xmlns=SVG_NS, viewBox=bbox.to_view_box())
    root.set(
        "style",
        f"stroke-width: {format_number(stroke)}px; "
        f"stroke-dasharray: {format_number(stroke)} {format_number(stroke)} "
        f"{format_number(3 * stroke)} {format_number(stroke)};",
    )

    for i, shape in enumerate(shapes):
        color = COLORS[i % len(COLORS)]
        if hasattr(shape, "to_string"):
            ET.SubElement(root, "path", d=shape.to_string(), stroke=color, fill="none")
        else:
            root.append(_polyline_element(list(shape), color, 2 * stroke))

    return ET.tostring(root, encoding="unicode")


def write_svg(output: FilePath, shapes: Sequence[Shape]) -> FilePath:
    """Render shapes and write the document to ``output``."""
    output.write_text(render_svg(shapes), encoding="utf-8")
    return output
