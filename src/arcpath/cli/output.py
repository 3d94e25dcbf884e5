"""Rich console output for the CLI.

Status messages go to stderr so that path data printed on stdout can be
piped into other tools.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from arcpath.core.path import Path

console = Console(stderr=True)

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def _elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


def _coords(point: tuple[float, float]) -> str:
    return f"{point[0]:.6g} {point[1]:.6g}"


def print_step(message: str) -> None:
    console.print(f"[dim]{SYM_STEP}[/dim] {message}")


def print_success(operation: str, duration_s: float, segments: int) -> None:
    """Print the summary line of a finished operation.

    Args:
        operation: Name of the operation that ran
        duration_s: Time it took in seconds
        segments: Segment count of the resulting path
    """
    console.print(
        f"[bold green]{SYM_OK} {operation}[/bold green] {SYM_DOT} {segments} segments "
        f"{SYM_DOT} {_elapsed(duration_s)}"
    )


def print_written(output_path: str, shape_count: int) -> None:
    line = Text(f"{SYM_OK} ", style="green")
    line.append(output_path, style="bold")
    line.append(f" ({shape_count} shapes)")
    console.print(line)


def print_path_info(path: Path) -> None:
    """Print segment count, length and, for closed paths, area and winding."""
    closed = path.is_closed()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("property", style="bold")
    table.add_column("value")
    table.add_row("Segments", str(len(path) - 1))
    table.add_row("Closed", "yes" if closed else "no")
    table.add_row("Length", f"{path.length:.6g}")
    if closed:
        table.add_row("Area", f"{path.area():.6g}")
        table.add_row("Winding", "clockwise" if path.rotates_clockwise() else "counter-clockwise")
    table.add_row("Start", _coords(path.start_point))
    table.add_row("End", _coords(path.end_point))
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print an error and, when given, a second line of details."""
    text = Text(f"{SYM_ERR} Error: ", style="bold red")
    text.append(message)
    console.print(text)
    if details:
        console.print(Text(f"  {details}", style="dim"))
