"""Batch intersection orchestration.

This module intersects many segment pairs, either inline or in parallel
using ProcessPoolExecutor.

Key components:
- intersect_segments: Dispatch one pair to the configured strategy
- intersect_pair: Top-level picklable function for parallel execution
- BatchIntersector: Orchestrator for batch runs
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from bezsect.config import BezsectSettings, IntersectionStrategy, SolverConfig
from bezsect.core.intersect import find_intersections_bbox
from bezsect.core.monotone import Monotone, intersect_split_monotone
from bezsect.core.segments import PathSeg, segment_from_dict, segment_to_dict
from bezsect.domain import BoundedList, Point
from bezsect.utils import ProcessingLogger, ProcessingStats, configure_logging


def intersect_segments(a: PathSeg, b: PathSeg, config: SolverConfig) -> BoundedList[Point]:
    """Intersect two segments with the configured strategy.

    Args:
        a: First segment
        b: Second segment
        config: Solver accuracy, capacity and strategy

    Returns:
        Intersection points, at most ``config.capacity`` of them
    """
    if config.strategy == IntersectionStrategy.BBOX:
        return find_intersections_bbox(a, b, config.accuracy, config.capacity)
    elif config.strategy == IntersectionStrategy.ASSUME_MONOTONE:
        return Monotone(a).intersect(Monotone(b), config.accuracy, config.capacity)
    else:
        return intersect_split_monotone(a, b, config.accuracy, config.capacity)


def intersect_pair(pair_dict: dict[str, Any], config_dict: dict[str, Any]) -> dict[str, Any]:
    """Intersect a single serialized segment pair.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        pair_dict: {"index": int, "a": segment_dict, "b": segment_dict}
        config_dict: Serialized solver configuration

    Returns:
        Dictionary containing either:
        - Success: {"index", "points", "saturated", "duration_ms"}
        - Error: {"index", "error", "traceback", "duration_ms"}
    """
    start_time = time.perf_counter()
    index = pair_dict.get("index", -1)

    try:
        config = SolverConfig(**config_dict)
        a = segment_from_dict(pair_dict["a"])
        b = segment_from_dict(pair_dict["b"])

        points = intersect_segments(a, b, config)

        duration_ms = (time.perf_counter() - start_time) * 1000
        return {
            "index": index,
            "points": [p.to_dict() for p in points],
            "saturated": points.is_full(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        return {
            "index": index,
            "error": f"{type(e).__name__}: {e}",
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class PairResult:
    """Outcome of intersecting one pair.

    Attributes:
        index: Position of the pair in the input
        points: Intersection points (empty on error)
        saturated: True if the result reached capacity and may be truncated
        error: Error message, or None on success
        duration_ms: Time spent on the pair
    """

    index: int
    points: list[Point] = field(default_factory=list)
    saturated: bool = False
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output; ``error`` is only present on failure."""
        data: dict[str, Any] = {
            "index": self.index,
            "points": [p.to_dict() for p in self.points],
            "saturated": self.saturated,
        }
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PairResult":
        """Build from the dictionary returned by ``intersect_pair``."""
        return cls(
            index=data["index"],
            points=[Point.from_dict(p) for p in data.get("points", [])],
            saturated=data.get("saturated", False),
            error=data.get("error"),
            duration_ms=data.get("duration_ms", 0.0),
        )


class BatchIntersector:
    """Intersects many segment pairs, inline or on worker processes.

    Example:
        settings = BezsectSettings()
        intersector = BatchIntersector(settings)
        results, stats = intersector.run(
            [(Line(Point(0, 0), Point(1, 1)), Line(Point(0, 1), Point(1, 0)))],
            max_workers=1,
        )
    """

    def __init__(self, config: BezsectSettings) -> None:
        """Initialize the intersector with configuration.

        Args:
            config: Settings containing solver, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )

    def run(
        self,
        pairs: Sequence[tuple[PathSeg, PathSeg]],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, int, bool], None] | None = None,
    ) -> tuple[list[PairResult], ProcessingStats]:
        """Intersect every pair.

        Args:
            pairs: Segment pairs to intersect
            max_workers: Maximum worker processes (None = config default,
                1 = run inline in this process)
            progress_callback: Optional callback(completed, total, index, success)
                for progress updates

        Returns:
            Results in input order, and statistics for the run

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        config_dict = self.config.solver.model_dump(mode="json")
        tasks = [
            {"index": idx, "a": segment_to_dict(a), "b": segment_to_dict(b)}
            for idx, (a, b) in enumerate(pairs)
        ]

        self.logger.info(
            "Starting batch",
            pair_count=len(tasks),
            max_workers=max_workers,
            strategy=self.config.solver.strategy.value,
        )

        results: dict[int, PairResult] = {}

        def record(result_dict: dict[str, Any]) -> None:
            result = PairResult.from_dict(result_dict)
            results[result.index] = result
            if result.ok:
                processing_logger.log_pair_complete(
                    index=result.index,
                    intersections=len(result.points),
                    duration_ms=result.duration_ms,
                )
                if result.saturated:
                    processing_logger.log_pair_saturated(result.index, self.config.solver.capacity)
            else:
                processing_logger.log_pair_error(
                    index=result.index,
                    error=result.error or "unknown error",
                    traceback=result_dict.get("traceback"),
                )
            if progress_callback is not None:
                progress_callback(len(results), len(tasks), result.index, result.ok)

        if max_workers == 1 or len(tasks) <= 1:
            for task in tasks:
                record(intersect_pair(task, config_dict))
        else:
            self._run_parallel(tasks, config_dict, max_workers, stats, record)

        stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            intersections=stats.intersections_found,
            saturated=stats.saturated_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return [results[idx] for idx in sorted(results)], stats

    def _run_parallel(
        self,
        tasks: list[dict[str, Any]],
        config_dict: dict[str, Any],
        max_workers: int | None,
        stats: ProcessingStats,
        record: Callable[[dict[str, Any]], None],
    ) -> None:
        """Run tasks on a ProcessPoolExecutor, recording results as they complete."""
        pending_futures: dict[Future, int] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for task in tasks:
                future = executor.submit(intersect_pair, task, config_dict)
                pending_futures[future] = task["index"]

            try:
                for future in as_completed(list(pending_futures)):
                    index = pending_futures.pop(future)
                    try:
                        result_dict = future.result()
                    except Exception as e:
                        # Executor-level error (e.g. a worker died)
                        result_dict = {
                            "index": index,
                            "error": f"{type(e).__name__}: {e}",
                            "traceback": traceback.format_exc(),
                        }
                    record(result_dict)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()
                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise
