"""Command-line interface for bezsect.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Intersection, solving, bounding box and transform commands
- Batch intersection with progress bars and worker processes
- Detailed error reporting
"""

from bezsect.cli.app import cli, main

__all__ = ["cli", "main"]
