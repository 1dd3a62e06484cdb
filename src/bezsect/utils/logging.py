"""Logging utilities for bezsect."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging carry this name so a second call
# replaces them instead of stacking duplicates.
_HANDLER_NAME = "bezsect"


@dataclass
class ProcessingStats:
    """Statistics from a batch run."""

    processed_count: int = 0
    error_count: int = 0
    intersections_found: int = 0
    saturated_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    timings_ms: list[float] = field(default_factory=list)
    was_cancelled: bool = False
    cancelled_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_pair_ms(self) -> float:
        """Average time spent per pair, in milliseconds."""
        if not self.timings_ms:
            return 0.0
        return sum(self.timings_ms) / len(self.timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, attach no console handler

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bezsect")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_pair_complete(
        self,
        index: int,
        intersections: int,
        duration_ms: float,
    ) -> None:
        """Log a successfully intersected pair."""
        self._logger.info(
            "Pair intersected",
            pair=index,
            intersections=intersections,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.intersections_found += intersections
        self._stats.timings_ms.append(duration_ms)

    def log_pair_saturated(self, index: int, capacity: int) -> None:
        """Log a pair whose result hit the capacity and may be truncated."""
        self._logger.warning("Intersection capacity reached", pair=index, capacity=capacity)
        self._stats.saturated_count += 1

    def log_pair_error(
        self,
        index: int,
        error: str,
        traceback: str | None = None,
    ) -> None:
        """Log a pair that failed."""
        self._logger.error(
            "Pair processing failed",
            pair=index,
            error=error,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((index, error))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
