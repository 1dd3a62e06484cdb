"""Configuration management for bezsect.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SolverConfig: Accuracy, capacity and strategy for intersection
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- BezsectSettings: Main application settings
"""

from bezsect.config.settings import (
    BezsectSettings,
    IntersectionStrategy,
    LoggingConfig,
    ProcessingConfig,
    SolverConfig,
    get_default_settings,
)

__all__ = [
    "BezsectSettings",
    "IntersectionStrategy",
    "LoggingConfig",
    "ProcessingConfig",
    "SolverConfig",
    "get_default_settings",
]
