"""Hydrothermal vent lines."""

import enum
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

Point = tuple[int, int]


class Orientation(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


@dataclass(frozen=True)
class _Segment:
    orientation: Orientation
    start: Point
    end: Point


def _parse(text: str) -> list[_Segment]:
    segments = []
    for line in text.split("\n"):
        coords = [int(value) for end in line.split(" -> ") for value in end.split(",")]
        if len(coords) != 4:
            raise ValueError(f"malformed line: {line!r}")
        x1, y1, x2, y2 = coords
        if x1 < x2 or y1 < y2:
            start, end = (x1, y1), (x2, y2)
        else:
            start, end = (x2, y2), (x1, y1)
        if start[0] == end[0]:
            orientation = Orientation.VERTICAL
        elif start[1] == end[1]:
            orientation = Orientation.HORIZONTAL
        else:
            orientation = Orientation.DIAGONAL
        segments.append(_Segment(orientation, start, end))
    return segments


def _straight_points(segment: _Segment) -> Iterator[Point]:
    (sx, sy), (ex, ey) = segment.start, segment.end
    if segment.orientation is Orientation.HORIZONTAL:
        yield from ((x, sy) for x in range(sx, ex + 1))
    elif segment.orientation is Orientation.VERTICAL:
        yield from ((sx, y) for y in range(sy, ey + 1))


def _diagonal_points(segment: _Segment) -> Iterator[Point]:
    (sx, sy), (ex, ey) = segment.start, segment.end
    # Top left to bottom right.
    for y in range(sy, ey + 1):
        yield from ((x, y) for x in range(sx, ex + 1) if x - sx == y - sy)
    # Bottom left to top right.
    for j, y in enumerate(range(ey, sy + 1)):
        yield from ((x, y) for x in range(sx, ex + 1) if x - ex + j == y - ey - j)
    # Top right to bottom left.
    for j, y in enumerate(range(sy, ey + 1)):
        yield from ((x, y) for x in range(ex, sx + 1) if x - sx + j == y - sy - j)


def _overlaps(counts: Counter) -> int:
    return sum(1 for count in counts.values() if count > 1)


def part_one(text: str) -> int:
    """Count points covered by at least two horizontal or vertical lines."""
    counts = Counter(point for segment in _parse(text) for point in _straight_points(segment))
    return _overlaps(counts)


def part_two(text: str) -> int:
    """Count points covered by at least two lines, diagonals included."""
    counts: Counter = Counter()
    for segment in _parse(text):
        counts.update(_straight_points(segment))
        if segment.orientation is Orientation.DIAGONAL:
            counts.update(_diagonal_points(segment))
    return _overlaps(counts)