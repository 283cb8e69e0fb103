"""Resonant collinearity: antinodes of antenna pairs."""

from collections.abc import Sequence
from itertools import combinations

Point = tuple[int, int]
Grid = Sequence[Sequence[str]]


def parse_grid(text: str) -> list[list[str]]:
    """Split the map into rows of characters, ignoring surrounding whitespace."""
    grid = [list(line) for line in text.strip().splitlines()]
    if not grid or not grid[0]:
        raise ValueError("the map is empty")
    return grid


def _in_bounds(point: Point, grid: Grid) -> bool:
    x, y = point
    return 0 <= x < len(grid[0]) and 0 <= y < len(grid)


def find_antinodes(a: Point, b: Point) -> tuple[Point, Point]:
    """Return the two points in line with a and b at the same distance beyond each."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    return (a[0] - dx, a[1] - dy), (b[0] + dx, b[1] + dy)


def _antinodes_in_line(a: Point, b: Point, width: int, height: int) -> list[Point]:
    """Return every point reached by stepping from a by the pair's offset, both ways."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    if dx == 0 and dy == 0:
        raise ValueError(f"two antennas share the point {a}")
    points = []
    x, y = a
    while x < width and y < height:
        points.append((x, y))
        x, y = x + dx, y + dy
    x, y = a[0] - dx, a[1] - dy
    while x >= 0 and y >= 0:
        points.append((x, y))
        x, y = x - dx, y - dy
    return points


def find_antennas_grouped_by_frequency(grid: Grid) -> dict[str, list[Point]]:
    """Map each antenna frequency to its positions, in reading order."""
    antennas: dict[str, list[Point]] = {}
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != ".":
                antennas.setdefault(cell, []).append((x, y))
    return antennas


def part_one(text: str) -> int:
    """Count distinct on-map antinodes of every pair of same-frequency antennas."""
    grid = parse_grid(text)
    antinodes = {
        point
        for antennas in find_antennas_grouped_by_frequency(grid).values()
        for a, b in combinations(antennas, 2)
        for point in find_antinodes(a, b)
        if _in_bounds(point, grid)
    }
    return len(antinodes)


def part_two(text: str) -> int:
    """Count distinct on-map points in line with any same-frequency antenna pair."""
    grid = parse_grid(text)
    width, height = len(grid[0]), len(grid)
    antinodes = {
        point
        for antennas in find_antennas_grouped_by_frequency(grid).values()
        for a, b in combinations(antennas, 2)
        for point in _antinodes_in_line(a, b, width, height)
        if _in_bounds(point, grid)
    }
    return len(antinodes)