"""Exception hierarchy for bezsect."""


class BezsectError(Exception):
    """Base exception for all bezsect errors."""

    pass


class PathError(BezsectError):
    """Errors related to path data or path segments."""

    pass


class PathParseError(PathError):
    """Error parsing SVG path data."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Failed to parse path '{path_data}': {reason}")


class UnsupportedSegmentError(PathError):
    """Segment data that does not describe a line, quad or cubic."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unsupported segment: {reason}")


class GeometryError(BezsectError):
    """Errors in geometric calculations."""

    pass


class InvalidAccuracyError(GeometryError):
    """Accuracy tolerance that would keep the subdivision from terminating."""

    def __init__(self, accuracy: float) -> None:
        self.accuracy = accuracy
        super().__init__(f"Accuracy must be a positive number, got {accuracy!r}")


class InvalidCapacityError(GeometryError):
    """Result capacity that cannot hold any value."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Capacity must be a non-negative integer, got {capacity!r}")
