"""Unit tests for the path I/O layer.

Tests for SVG path parsing, writing, and converter functions.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest
from fontTools.pens.recordingPen import RecordingPen

from bezsect.core.processor import PairResult
from bezsect.core.segments import CubicBez, Line, QuadBez
from bezsect.domain import Point
from bezsect.exceptions import PathParseError, UnsupportedSegmentError
from bezsect.io import (
    draw_segments,
    format_path,
    parse_path,
    parse_segment,
    read_pairs,
    recording_to_segments,
    write_results,
)
from bezsect.io.writer import format_number


class TestParsePath:
    """Tests for parse_path and parse_segment."""

    def test_line(self) -> None:
        """Test a single line."""
        assert parse_path("M0 0L10 10") == [Line(Point(0.0, 0.0), Point(10.0, 10.0))]

    def test_quad(self) -> None:
        """Test a single quadratic."""
        assert parse_path("M0 0Q5 10 10 0") == [
            QuadBez(Point(0.0, 0.0), Point(5.0, 10.0), Point(10.0, 0.0))
        ]

    def test_cubic(self) -> None:
        """Test a single cubic with fractional and negative coordinates."""
        seg = parse_segment("M53 69C82 12 -2 -11 23 69")
        assert seg == CubicBez(
            Point(53.0, 69.0), Point(82.0, 12.0), Point(-2.0, -11.0), Point(23.0, 69.0)
        )

    def test_relative_commands(self) -> None:
        """Test relative commands resolve against the current point."""
        assert parse_path("M10 10l5 0") == [Line(Point(10.0, 10.0), Point(15.0, 10.0))]

    def test_closed_path_adds_closing_line(self) -> None:
        """Test Z closes the subpath with a line back to the start."""
        segments = parse_path("M0 0L10 0L10 10Z")
        assert len(segments) == 3
        assert segments[-1] == Line(Point(10.0, 10.0), Point(0.0, 0.0))

    def test_multiple_segments_connect(self) -> None:
        """Test consecutive segments share endpoints."""
        segments = parse_path("M0 0C0 10 10 10 10 0Q15 -5 20 0L30 0")
        assert [seg.kind for seg in segments] == ["cubic", "quad", "line"]
        for prev, nxt in zip(segments, segments[1:]):
            assert prev.end() == nxt.start()

    def test_empty_path(self) -> None:
        """Test an empty path has no segments."""
        assert parse_path("") == []

    def test_parse_segment_empty_raises(self) -> None:
        """Test parse_segment needs at least one segment."""
        with pytest.raises(PathParseError):
            parse_segment("M5 5")

    def test_missing_coordinate_raises(self) -> None:
        """Test truncated data raises PathParseError."""
        with pytest.raises(PathParseError) as exc_info:
            parse_path("M0 0L10")
        assert exc_info.value.path_data == "M0 0L10"

    def test_missing_command_raises(self) -> None:
        """Test data without an initial command raises PathParseError."""
        with pytest.raises(PathParseError):
            parse_path("10 10")


class TestRecordingToSegments:
    """Tests for recording_to_segments."""

    def test_basic_recording(self) -> None:
        """Test converting pen commands into segments."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("qCurveTo", ((15, 5), (10, 10))),
            ("curveTo", ((5, 15), (0, 15), (0, 10))),
            ("closePath", ()),
        ]
        segments = recording_to_segments(recording)
        assert [seg.kind for seg in segments] == ["line", "quad", "cubic", "line"]
        assert segments[-1] == Line(Point(0.0, 10.0), Point(0.0, 0.0))

    def test_implied_on_curve_points(self) -> None:
        """Test a quadratic run is split at implied on-curve points."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("qCurveTo", ((0, 10), (10, 10), (10, 0))),
            ("endPath", ()),
        ]
        segments = recording_to_segments(recording)
        assert segments == [
            QuadBez(Point(0.0, 0.0), Point(0.0, 10.0), Point(5.0, 10.0)),
            QuadBez(Point(5.0, 10.0), Point(10.0, 10.0), Point(10.0, 0.0)),
        ]

    def test_close_without_gap(self) -> None:
        """Test closePath adds nothing when already at the start."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("lineTo", ((0, 0),)),
            ("closePath", ()),
        ]
        assert len(recording_to_segments(recording)) == 2

    def test_draw_without_current_point(self) -> None:
        """Test drawing before moveTo raises."""
        with pytest.raises(UnsupportedSegmentError):
            recording_to_segments([("lineTo", ((1, 1),))])

    def test_quad_without_on_curve_points(self) -> None:
        """Test a TrueType-style closed quadratic contour is unsupported."""
        with pytest.raises(UnsupportedSegmentError):
            recording_to_segments([("moveTo", ((0, 0),)), ("qCurveTo", ((1, 1), (2, 0), None))])

    def test_unknown_command(self) -> None:
        """Test an unknown command raises."""
        with pytest.raises(UnsupportedSegmentError):
            recording_to_segments([("moveTo", ((0, 0),)), ("arcTo", ((1, 1),))])


class TestDrawSegments:
    """Tests for draw_segments."""

    def test_connected_segments(self) -> None:
        """Test connected segments share a single moveTo."""
        pen = RecordingPen()
        draw_segments(
            [
                Line(Point(0.0, 0.0), Point(10.0, 0.0)),
                QuadBez(Point(10.0, 0.0), Point(15.0, 5.0), Point(10.0, 10.0)),
            ],
            pen,
        )
        assert pen.value == [
            ("moveTo", ((0.0, 0.0),)),
            ("lineTo", ((10.0, 0.0),)),
            ("qCurveTo", ((15.0, 5.0), (10.0, 10.0))),
            ("endPath", ()),
        ]

    def test_disconnected_segments_start_new_subpath(self) -> None:
        """Test a gap between segments starts a new subpath."""
        pen = MagicMock()
        draw_segments(
            [
                Line(Point(0.0, 0.0), Point(1.0, 0.0)),
                Line(Point(5.0, 5.0), Point(6.0, 5.0)),
            ],
            pen,
        )
        assert pen.method_calls == [
            call.moveTo((0.0, 0.0)),
            call.lineTo((1.0, 0.0)),
            call.endPath(),
            call.moveTo((5.0, 5.0)),
            call.lineTo((6.0, 5.0)),
            call.endPath(),
        ]

    def test_no_segments(self) -> None:
        """Test nothing is drawn for an empty list."""
        pen = MagicMock()
        draw_segments([], pen)
        assert pen.method_calls == []


class TestFormatPath:
    """Tests for format_path."""

    def test_format_number(self) -> None:
        """Test integral values drop the fraction and others keep precision."""
        assert format_number(3.0) == "3"
        assert format_number(-2.0) == "-2"
        assert format_number(37.5) == "37.5"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_single_cubic(self) -> None:
        """Test writing a cubic."""
        seg = CubicBez(Point(9.0, 31.0), Point(37.5, 31.0), Point(59.0, 61.0), Point(59.0, 81.0))
        data = format_path([seg])
        assert data.startswith("M9 31")
        assert "37.5" in data
        assert parse_path(data) == [seg]

    def test_mixed_path_reparses(self) -> None:
        """Test a written path parses back into the same segments."""
        segments = parse_path("M0 0C0 10 10 10 10 0Q15 -5 20 0L30 0M40 40L50 50")
        assert parse_path(format_path(segments)) == segments

    def test_empty(self) -> None:
        """Test no segments give empty path data."""
        assert format_path([]) == ""


class TestReadPairs:
    """Tests for read_pairs."""

    def test_reads_pairs(self, tmp_path: Path) -> None:
        """Test pairs are read in file order."""
        pair_file = tmp_path / "pairs.json"
        pair_file.write_text(
            json.dumps(
                [
                    {"a": "M0 0L10 10", "b": "M0 10L10 0"},
                    {"a": "M0 0Q5 10 10 0", "b": "M0 2L10 2"},
                ]
            )
        )
        pairs = read_pairs(pair_file)
        assert len(pairs) == 2
        assert isinstance(pairs[0][0], Line)
        assert isinstance(pairs[1][0], QuadBez)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_pairs(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises PathParseError."""
        pair_file = tmp_path / "pairs.json"
        pair_file.write_text("[{")
        with pytest.raises(PathParseError):
            read_pairs(pair_file)

    @pytest.mark.parametrize("content", ['{"a": "M0 0L1 1"}', '[{"a": "M0 0L1 1"}]', "[1]"])
    def test_invalid_structure(self, tmp_path: Path, content: str) -> None:
        """Test entries without both paths raise PathParseError."""
        pair_file = tmp_path / "pairs.json"
        pair_file.write_text(content)
        with pytest.raises(PathParseError):
            read_pairs(pair_file)


class TestWriteResults:
    """Tests for write_results."""

    def test_writes_json_list(self, tmp_path: Path) -> None:
        """Test results are written in order, creating parent directories."""
        out_file = tmp_path / "nested" / "results.json"
        results = [
            PairResult(index=0, points=[Point(4.0, 4.0)]),
            PairResult(index=1, error="PathParseError: bad"),
        ]

        write_results(out_file, results)

        data = json.loads(out_file.read_text(encoding="utf-8"))
        assert data == [
            {"index": 0, "points": [{"x": 4.0, "y": 4.0}], "saturated": False},
            {"index": 1, "points": [], "saturated": False, "error": "PathParseError: bad"},
        ]
