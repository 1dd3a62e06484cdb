"""CLI application entry point for bezsect.

This module provides the main CLI interface using Typer.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bezsect import __version__
from bezsect.cli.output import (
    console,
    create_progress,
    print_batch_summary,
    print_bounds,
    print_cancellation_summary,
    print_error,
    print_pair_results,
    print_path,
    print_points,
    print_solutions,
    print_step,
)
from bezsect.config import (
    BezsectSettings,
    IntersectionStrategy,
    LoggingConfig,
    ProcessingConfig,
    SolverConfig,
)
from bezsect.core import (
    BatchIntersector,
    apply_affine,
    apply_translate_scale,
    intersect_segments,
    split_monotone,
)
from bezsect.domain import Affine, TranslateScale
from bezsect.exceptions import BezsectError
from bezsect.io import format_path, parse_path, parse_segment, read_pairs, write_results
from bezsect.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bezsect",
    help="Intersect, solve and transform Bézier path segments.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class _State:
    """Options shared by all commands."""

    log_file: Path | None = None
    log_level: str = "WARNING"

    def logging_config(self, quiet: bool = False) -> LoggingConfig:
        return LoggingConfig(log_file=self.log_file, log_level=self.log_level, quiet=quiet)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bezsect[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
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
    """Intersect, solve and transform Bézier path segments.

    Segments are given as SVG path data; commands that take a single
    segment use the first segment of the path.
    """
    state = _State(log_file=log_file, log_level=log_level.upper())
    configure_logging(
        log_file=state.log_file,
        console_level=state.log_level,
    )
    ctx.obj = state


def _state(ctx: typer.Context) -> _State:
    return ctx.obj if isinstance(ctx.obj, _State) else _State()


@app.command()
def intersect(
    path_a: Annotated[str, typer.Argument(help="SVG path data of the first segment", show_default=False)],
    path_b: Annotated[str, typer.Argument(help="SVG path data of the second segment", show_default=False)],
    accuracy: Annotated[
        float,
        typer.Option("--accuracy", "-a", help="Bounding box size at which the search stops"),
    ] = 0.01,
    capacity: Annotated[
        int,
        typer.Option("--capacity", "-c", help="Maximum number of points to report", min=1, max=64),
    ] = 9,
    strategy: Annotated[
        IntersectionStrategy,
        typer.Option("--strategy", "-s", help="Intersection strategy"),
    ] = IntersectionStrategy.MONOTONE,
) -> None:
    """Find the intersection points of two segments.

    Example:
        bezsect intersect "M0 0L10 10" "M0 10L10 0"
    """
    try:
        config = SolverConfig(accuracy=accuracy, capacity=capacity, strategy=strategy)
    except ValidationError as e:
        print_error("Invalid solver options", details=str(e.errors()[0]["msg"]))
        raise typer.Exit(code=1)

    try:
        a = parse_segment(path_a)
        b = parse_segment(path_b)
        points = intersect_segments(a, b, config)
    except BezsectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_points(points, capacity=config.capacity)


@app.command()
def solve(
    path: Annotated[str, typer.Argument(help="SVG path data of the segment", show_default=False)],
    x: Annotated[float | None, typer.Option("--x", help="Solve for this x coordinate")] = None,
    y: Annotated[float | None, typer.Option("--y", help="Solve for this y coordinate")] = None,
) -> None:
    """Find the parameters where a segment reaches a coordinate.

    Example:
        bezsect solve "M0 0Q35 0 80 35" --x 40
    """
    if (x is None) == (y is None):
        print_error("Give exactly one of --x or --y")
        raise typer.Exit(code=1)

    try:
        seg = parse_segment(path)
    except BezsectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if x is not None:
        solutions = [(t, seg.eval(t).y) for t in seg.solve_t_for_x(x)]
        print_solutions("x", x, "y", solutions)
    elif y is not None:
        solutions = [(t, seg.eval(t).x) for t in seg.solve_t_for_y(y)]
        print_solutions("y", y, "x", solutions)


@app.command()
def bbox(
    path: Annotated[str, typer.Argument(help="SVG path data of the segment", show_default=False)],
) -> None:
    """Print the bounding box and extrema of a segment.

    Example:
        bezsect bbox "M0 0C0 10 10 10 10 0"
    """
    try:
        seg = parse_segment(path)
    except BezsectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_bounds(seg.bounding_box(), seg.extrema(), len(split_monotone(seg)))


@app.command()
def transform(
    path: Annotated[str, typer.Argument(help="SVG path data", show_default=False)],
    translate: Annotated[
        tuple[float, float],
        typer.Option("--translate", "-t", help="Translation DX DY, applied last"),
    ] = (0.0, 0.0),
    scale: Annotated[
        float,
        typer.Option("--scale", help="Uniform scale factor, applied first"),
    ] = 1.0,
    rotate: Annotated[
        float,
        typer.Option("--rotate", "-r", help="Rotation in degrees, applied after scaling"),
    ] = 0.0,
) -> None:
    """Transform every segment of a path and print the result.

    Example:
        bezsect transform "M0 0L10 10" --scale 2 --translate 5 5
    """
    try:
        segments = parse_path(path)
    except BezsectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if rotate == 0.0:
        ts = TranslateScale(translation=translate, scale=scale)
        transformed = [apply_translate_scale(seg, ts) for seg in segments]
    else:
        affine = (
            Affine.scale(scale)
            .then(Affine.rotate(math.radians(rotate)))
            .then(Affine.translate(*translate))
        )
        transformed = [apply_affine(seg, affine) for seg in segments]

    print_path(format_path(transformed))


@app.command()
def batch(
    ctx: typer.Context,
    pair_file: Annotated[
        Path,
        typer.Argument(help='JSON file with a list of {"a": path, "b": path} pairs', show_default=False),
    ],
    accuracy: Annotated[
        float,
        typer.Option("--accuracy", "-a", help="Bounding box size at which the search stops"),
    ] = 0.01,
    capacity: Annotated[
        int,
        typer.Option("--capacity", "-c", help="Maximum number of points per pair", min=1, max=64),
    ] = 9,
    strategy: Annotated[
        IntersectionStrategy,
        typer.Option("--strategy", "-s", help="Intersection strategy"),
    ] = IntersectionStrategy.MONOTONE,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1: inline)",
            min=1,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write results as JSON to this file",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Intersect every pair listed in a JSON file.

    Example:
        bezsect batch pairs.json --workers 4 --output results.json
    """
    state = _state(ctx)

    try:
        settings = BezsectSettings(
            solver=SolverConfig(accuracy=accuracy, capacity=capacity, strategy=strategy),
            processing=ProcessingConfig(max_workers=workers),
            logging=state.logging_config(quiet=quiet),
        )
    except ValidationError as e:
        print_error("Invalid solver options", details=str(e.errors()[0]["msg"]))
        raise typer.Exit(code=1)

    try:
        if not quiet:
            print_step(f"Reading {pair_file}")
        pairs = read_pairs(pair_file)
    except FileNotFoundError:
        print_error(
            f"Input file not found: {pair_file}",
            details=f"The file '{pair_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    except BezsectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not pairs:
        if not quiet:
            console.print("\nNo pairs found. Nothing to process.")
        raise typer.Exit(code=0)

    intersector = BatchIntersector(settings)
    completed = 0

    def update(done: int, *_: object) -> None:
        nonlocal completed
        completed = done

    try:
        if not quiet:
            print_step(f"Intersecting {len(pairs)} pairs")
            with create_progress() as progress:
                task_id = progress.add_task("pairs", total=len(pairs))

                def update_progress(done: int, *_: object) -> None:
                    update(done)
                    progress.update(task_id, completed=done)

                results, stats = intersector.run(pairs, progress_callback=update_progress)
        else:
            results, stats = intersector.run(pairs, progress_callback=update)
    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_summary(processed=completed, cancelled=len(pairs) - completed)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

    if output is not None:
        write_results(output, results)

    if not quiet:
        print_pair_results(results, capacity=settings.solver.capacity)
        print_batch_summary(stats)
        if output is not None:
            console.print(f"  Results written to {output}")

    if stats.error_count:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
