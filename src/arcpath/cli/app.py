"""CLI application entry point for arcpath.

This module provides the main CLI interface using Typer. Paths are given as
SVG path data on the command line, or as ``@file`` to read the data from a
file.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import Annotated

import typer

from arcpath import __version__
from arcpath.cli.output import (
    console,
    print_error,
    print_path_info,
    print_step,
    print_success,
    print_written,
)
from arcpath.config import (
    ArcpathSettings,
    BooleanOperation,
    DebugConfig,
    GeometryConfig,
    LoggingConfig,
)
from arcpath.core.path import Path
from arcpath.exceptions import ArcpathError
from arcpath.io import write_svg
from arcpath.utils import OperationLogger, configure_logging, enable_debug_output

# Create the Typer app
app = typer.Typer(
    name="arcpath",
    help="Boolean operations, offsetting and inspection of line-and-arc SVG paths.",
    add_completion=False,
    no_args_is_help=True,
)

@dataclass
class _Session:
    """State shared by the callback and the command that follows it."""

    tracker: OperationLogger | None = None
    geometry: GeometryConfig | None = None


_session = _Session()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]arcpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    log_file: Annotated[
        FilePath | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    debug_dir: Annotated[
        FilePath | None,
        typer.Option(
            "--debug-dir",
            help="Write SVG snapshots of failing operations into this directory",
        ),
    ] = None,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            help="Distance under which two points count as the same point",
        ),
    ] = 1e-5,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Work with SVG paths made of straight lines and circular arcs."""
    settings = ArcpathSettings(
        geometry=GeometryConfig(epsilon=epsilon),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
        debug=DebugConfig(output_dir=debug_dir),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    _session.tracker = OperationLogger(logger)
    _session.geometry = settings.geometry
    if settings.debug.output_dir is not None:
        enable_debug_output(settings.debug.output_dir)


def _load_path(value: str) -> Path:
    """Path from path data or from ``@file``."""
    if value.startswith("@"):
        source = FilePath(value[1:])
        if not source.is_file():
            print_error(f"Input file not found: {source}")
            raise typer.Exit(code=1)
        value = source.read_text(encoding="utf-8")
    path = Path.from_d(value, _session.geometry)
    if path.is_empty():
        print_error("Empty path data")
        raise typer.Exit(code=1)
    return path


def _run(operation: str, action: Callable[[], Path], **operands: str) -> Path:
    """Run one path operation, logging it and turning failures into exit code 1."""
    tracker = _session.tracker
    if tracker is not None:
        tracker.log_operation_start(operation, **operands)
    started = time.perf_counter()
    try:
        result = action()
    except ArcpathError as e:
        if tracker is not None:
            tracker.log_operation_error(operation, e)
        print_error(str(e), details=type(e).__name__)
        raise typer.Exit(code=1)
    elapsed = time.perf_counter() - started
    if tracker is not None:
        tracker.log_operation_complete(operation, len(result) - 1, elapsed * 1000)
    print_success(operation, elapsed, len(result) - 1)
    return result


@app.command()
def boolean(
    operation: Annotated[
        BooleanOperation,
        typer.Argument(help="intersection, difference or union", show_default=False),
    ],
    subject: Annotated[str, typer.Argument(help="Subject path data or @file", show_default=False)],
    clip: Annotated[str, typer.Argument(help="Clip path data or @file", show_default=False)],
) -> None:
    """Combine two closed paths and print the resulting path data.

    Example:
        arcpath boolean difference "M 0 0 L 10 0 L 10 10 L 0 10 Z" "M 5 5 L 8 5 L 8 12 L 5 12 Z"
    """
    try:
        first = _load_path(subject)
        second = _load_path(clip)
    except ArcpathError as e:
        print_error(f"Could not parse path: {e}")
        raise typer.Exit(code=1)

    actions = {
        BooleanOperation.INTERSECTION: first.boolean_intersection,
        BooleanOperation.DIFFERENCE: first.boolean_difference,
        BooleanOperation.UNION: first.boolean_union,
    }
    result = _run(operation.value, lambda: actions[operation](second), subject=subject, clip=clip)
    typer.echo(result.to_string())


@app.command()
def offset(
    path: Annotated[str, typer.Argument(help="Path data or @file", show_default=False)],
    distance: Annotated[
        float,
        typer.Argument(help="Offset distance, positive to the left of travel", show_default=False),
    ],
    thicken: Annotated[
        bool,
        typer.Option("--thicken", help="Close an open path into a ribbon of this width"),
    ] = False,
    round_start: Annotated[
        bool,
        typer.Option("--round-start", help="Round cap at the start of a thickened path"),
    ] = False,
    round_end: Annotated[
        bool,
        typer.Option("--round-end", help="Round cap at the end of a thickened path"),
    ] = False,
) -> None:
    """Offset a path sideways and print the resulting path data."""
    if (round_start or round_end) and not thicken:
        print_error("--round-start and --round-end require --thicken")
        raise typer.Exit(code=1)
    try:
        source = _load_path(path)
    except ArcpathError as e:
        print_error(f"Could not parse path: {e}")
        raise typer.Exit(code=1)

    if thicken:
        result = _run(
            "thicken",
            lambda: source.thicken_and_close(distance, round_start=round_start, round_end=round_end),
            path=path,
        )
    else:
        result = _run("offset", lambda: source.offset(distance), path=path)
    typer.echo(result.to_string())


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="Path data or @file", show_default=False)],
) -> None:
    """Show length, area and winding of a path."""
    try:
        source = _load_path(path)
        print_path_info(source)
    except ArcpathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def render(
    paths: Annotated[
        list[str],
        typer.Argument(help="Path data or @file, one per shape", show_default=False),
    ],
    output: Annotated[
        FilePath,
        typer.Option("--output", "-o", help="SVG file to write"),
    ],
) -> None:
    """Draw paths into a standalone SVG document."""
    print_step(f"Rendering {len(paths)} paths")
    try:
        shapes = [_load_path(p) for p in paths]
        write_svg(output, shapes)
    except ArcpathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write {output}", details=str(e))
        raise typer.Exit(code=1)
    print_written(str(output), len(shapes))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
