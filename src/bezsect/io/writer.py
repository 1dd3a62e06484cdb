"""SVG path data and result writers.

This module turns path segments back into SVG path data by drawing them
onto a fonttools SVGPathPen, and writes batch results as JSON.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from fontTools.pens.svgPathPen import SVGPathPen

from bezsect.core.segments import PathSeg
from bezsect.io.converter import draw_segments


def format_number(value: float) -> str:
    """Format a coordinate without losing precision.

    Integral values drop the trailing ``.0``; everything else uses the
    shortest round-tripping representation.
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_path(segments: Sequence[PathSeg]) -> str:
    """Format segments as SVG path data.

    Args:
        segments: Segments to write

    Returns:
        Absolute SVG path data, e.g. ``"M9 31C37.5 31 59 61 59 81"``
    """
    pen = SVGPathPen(None, ntos=format_number)
    draw_segments(segments, pen)
    return pen.getCommands()


def write_results(file_path: Path, results: Sequence[Any]) -> None:
    """Write batch results to a JSON file.

    Args:
        file_path: Destination path; parent directories are created
        results: Objects with a ``to_dict()`` method, e.g. ``PairResult``
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [result.to_dict() for result in results]
    file_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
