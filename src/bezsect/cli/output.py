"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from bezsect.core.processor import PairResult
from bezsect.domain import Point, Rect
from bezsect.utils import ProcessingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def format_number(value: float) -> str:
    """Format a coordinate for display."""
    return f"{value:.6g}"


def print_points(points: Sequence[Point], capacity: int | None = None) -> None:
    """Print intersection points as a table.

    Args:
        points: Points to print
        capacity: Result capacity; a full result is flagged as possibly truncated
    """
    if not points:
        console.print(f"  {SYM_DOT} No intersections")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for idx, pt in enumerate(points, start=1):
        table.add_row(str(idx), format_number(pt.x), format_number(pt.y))
    console.print(table)

    noun = "intersection" if len(points) == 1 else "intersections"
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {len(points)} {noun}")
    if capacity is not None and len(points) >= capacity:
        print_warning(f"Capacity of {capacity} reached; further intersections were dropped")


def print_pair_results(results: Sequence[PairResult], capacity: int | None = None) -> None:
    """Print the intersection points of each batch pair.

    Failed pairs are skipped here; their errors appear in the summary.

    Args:
        results: Results in input order
        capacity: Result capacity per pair
    """
    for result in results:
        if not result.ok:
            continue
        console.print(f"\n[bold]pair {result.index}[/bold]")
        print_points(result.points, capacity=capacity)


def print_solutions(axis: str, value: float, other_axis: str, solutions: Sequence[tuple[float, float]]) -> None:
    """Print parameter values solving a curve for a coordinate.

    Args:
        axis: Name of the solved axis ("x" or "y")
        value: The coordinate value solved for
        other_axis: Name of the paired axis
        solutions: (t, other coordinate) pairs
    """
    if not solutions:
        console.print(f"  {SYM_DOT} Curve never reaches {axis} = {format_number(value)}")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("t", justify="right")
    table.add_column(other_axis, justify="right")
    for t, other in solutions:
        table.add_row(format_number(t), format_number(other))
    console.print(table)


def print_bounds(bbox: Rect, extrema: Sequence[float], pieces: int) -> None:
    """Print bounding box information for a segment.

    Args:
        bbox: Bounding box
        extrema: Interior extrema parameters
        pieces: Number of monotone pieces
    """
    x0, y0, x1, y1 = (format_number(v) for v in bbox.to_tuple())
    console.print(f"  Bounding box      ({x0}, {y0}) {SYM_DOT}{SYM_DOT} ({x1}, {y1})")
    console.print(f"  Size              {format_number(bbox.width)} {SYM_DOT} {format_number(bbox.height)}")
    extrema_str = ", ".join(format_number(t) for t in extrema) or "none"
    console.print(f"  Extrema (t)       {extrema_str}")
    console.print(f"  Monotone pieces   {pieces}")


def print_path(path_data: str) -> None:
    """Print SVG path data without markup interpretation."""
    console.print(Text(path_data))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_batch_summary(stats: ProcessingStats) -> None:
    """Print batch summary.

    Args:
        stats: Statistics from the run
    """
    time_str = _format_time(stats.duration_seconds)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.processed_count} pairs {SYM_DOT} {stats.intersections_found} intersections {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )
    if stats.saturated_count:
        console.print(f"  {stats.saturated_count} pairs reached capacity")
    if stats.timings_ms:
        console.print(f"  {stats.avg_pair_ms:.2f}ms avg per pair")

    for index, error in stats.errors:
        line = Text(f"  {SYM_ERR} pair {index}: ")
        line.append(error)
        console.print(line)


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]{SYM_WARN}[/yellow] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    console.print(Text(message))
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of pairs completed before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} pairs completed {SYM_DOT} {cancelled} tasks cancelled")
