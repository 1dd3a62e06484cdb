"""Configuration settings for bezsect."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class IntersectionStrategy(str, Enum):
    """How a pair of segments is intersected."""

    BBOX = "bbox"
    MONOTONE = "monotone"
    ASSUME_MONOTONE = "assume_monotone"


class SolverConfig(BaseModel):
    """Configuration for the intersection solvers.

    ``accuracy`` bounds the size of the boxes the recursive search stops at.
    The reported points are box centers, so they sit within roughly one
    accuracy of the true intersection; points closer than twice the accuracy
    are merged.
    """

    accuracy: float = Field(
        default=0.01,
        gt=0.0,
        description="Bounding box size at which the recursive search stops",
    )
    capacity: int = Field(
        default=9,
        ge=1,
        le=64,
        description="Maximum number of intersection points reported per pair",
    )
    strategy: IntersectionStrategy = Field(
        default=IntersectionStrategy.MONOTONE,
        description="Intersection strategy",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto, 1 = inline)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output",
    )


class BezsectSettings(BaseModel):
    """Main application settings."""

    solver: SolverConfig = Field(default_factory=SolverConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BezsectSettings:
    """Get default application settings."""
    return BezsectSettings()
