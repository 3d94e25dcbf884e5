"""Debug geometry sink.

When enabled, failing operations dump their inputs as SVG files so the
geometry can be inspected visually. Disabled by default, in which case
``debug_geometry`` does nothing.
"""

import itertools
import logging
from pathlib import Path

from arcpath.io.svg_document import Shape, write_svg

logger = logging.getLogger(__name__)

_output_dir: Path | None = None
_counter = itertools.count(1)


def enable_debug_output(directory: Path) -> None:
    """Write debug geometry into ``directory``, creating it if needed."""
    global _output_dir
    directory.mkdir(parents=True, exist_ok=True)
    _output_dir = directory
    logger.debug("Debug geometry output enabled in %s", directory)


def disable_debug_output() -> None:
    global _output_dir
    _output_dir = None


def debug_output_dir() -> Path | None:
    return _output_dir


def debug_geometry(*shapes: Shape) -> Path | None:
    """Render ``shapes`` into a new numbered SVG file.

    Returns:
        The file written, or None when output is disabled or fails
    """
    if _output_dir is None:
        return None
    target = _output_dir / f"arcpath-debug-{next(_counter):04d}.svg"
    try:
        write_svg(target, shapes)
    except OSError as e:
        logger.warning("Could not write debug geometry to %s: %s", target, e)
        return None
    logger.debug("Wrote debug geometry to %s", target)
    return target
