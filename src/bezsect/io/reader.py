"""SVG path data reader.

This module parses SVG path data (the ``d`` attribute) into path segments,
using the fonttools SVG path parser to drive a RecordingPen.
"""

import json
from pathlib import Path

from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path as _parse_svg_path

from bezsect.core.segments import PathSeg
from bezsect.exceptions import PathParseError, UnsupportedSegmentError
from bezsect.io.converter import recording_to_segments


def parse_path(path_data: str) -> list[PathSeg]:
    """Parse SVG path data into segments.

    Supports every SVG path command. Arcs arrive as cubic approximations
    and ``Z`` closes a subpath with a line when needed.

    Args:
        path_data: SVG path data, e.g. ``"M9 31C37.5 31 59 61 59 81"``

    Returns:
        Segments in drawing order (possibly empty)

    Raises:
        PathParseError: If the path data is malformed
    """
    pen = RecordingPen()
    try:
        _parse_svg_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise PathParseError(path_data, str(e) or type(e).__name__) from e

    try:
        return recording_to_segments(pen.value)
    except UnsupportedSegmentError as e:
        raise PathParseError(path_data, e.reason) from e


def parse_segment(path_data: str) -> PathSeg:
    """Parse SVG path data and return its first segment.

    Raises:
        PathParseError: If the path data is malformed or draws nothing
    """
    segments = parse_path(path_data)
    if not segments:
        raise PathParseError(path_data, "path contains no segments")
    return segments[0]


def read_pairs(file_path: Path) -> list[tuple[PathSeg, PathSeg]]:
    """Load segment pairs from a JSON file.

    The file holds a list of objects with ``a`` and ``b`` path data, e.g.
    ``[{"a": "M0 0L10 10", "b": "M0 10L10 0"}]``. The first segment of each
    path is used.

    Args:
        file_path: Path to the JSON file

    Returns:
        List of (a, b) segment pairs in file order

    Raises:
        FileNotFoundError: If the file does not exist
        PathParseError: If the file structure or any path data is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Pair file not found: {file_path}")

    try:
        entries = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise PathParseError(str(file_path), f"invalid JSON: {e}") from e

    if not isinstance(entries, list):
        raise PathParseError(str(file_path), "expected a list of pairs")

    pairs: list[tuple[PathSeg, PathSeg]] = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict) or "a" not in entry or "b" not in entry:
            raise PathParseError(str(file_path), f"entry {idx} needs 'a' and 'b' path data")
        pairs.append((parse_segment(entry["a"]), parse_segment(entry["b"])))

    return pairs
