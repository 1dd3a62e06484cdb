"""Path I/O layer for bezsect.

This module handles reading and writing SVG path data using fonttools.
It provides a clean abstraction layer between fonttools pens and the
segment types.

Key responsibilities:
- Parse SVG path data into segments
- Load batches of segment pairs from JSON
- Write segments back as SVG path data
- Write batch results as JSON

Key functions:
- parse_path / parse_segment: SVG path data to segments
- read_pairs: JSON pair file to segment pairs
- format_path: Segments to SVG path data
- write_results: Batch results to JSON
"""

from bezsect.io.converter import draw_segments, recording_to_segments
from bezsect.io.reader import parse_path, parse_segment, read_pairs
from bezsect.io.writer import format_path, write_results

__all__ = [
    "draw_segments",
    "format_path",
    "parse_path",
    "parse_segment",
    "read_pairs",
    "recording_to_segments",
    "write_results",
]
