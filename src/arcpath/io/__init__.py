"""SVG input/output for arcpath.

This module handles the textual forms of paths:

- Parsing and writing the restricted SVG path-data grammar (M, L, A, Z)
- Writing numbers the way SVG-producing JavaScript tools do
- Rendering paths and point lists into standalone SVG documents

Key classes and functions:
- parse_path_data / format_path_data: Path-data codec
- format_number: Shortest round-tripping number text
- BBox: Axis-aligned bounding box used for viewBox computation
- render_svg / write_svg: SVG document output
"""

from arcpath.io.svg_document import BBox, render_svg, write_svg
from arcpath.io.svg_path import format_number, format_path_data, parse_path_data, tokenize_path_data

__all__ = [
    "BBox",
    "format_number",
    "format_path_data",
    "parse_path_data",
    "render_svg",
    "tokenize_path_data",
    "write_svg",
]
