"""Smoke basin height map."""

import math
from collections.abc import Iterator

Point = tuple[int, int]


def _parse(text: str) -> list[list[int]]:
    grid = []
    for line in text.splitlines():
        if not line.isdigit():
            raise ValueError(f"not a row of digits: {line!r}")
        grid.append([int(char) for char in line])
    if not grid:
        raise ValueError("the height map is empty")
    return grid


def _neighbours(grid: list[list[int]], x: int, y: int) -> Iterator[Point]:
    height, width = len(grid), len(grid[0])
    for nx, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
        if 0 <= nx < width and 0 <= ny < height:
            yield nx, ny


def _low_points(grid: list[list[int]]) -> list[Point]:
    return [
        (x, y)
        for y, row in enumerate(grid)
        for x, value in enumerate(row)
        if all(grid[ny][nx] > value for nx, ny in _neighbours(grid, x, y))
    ]


def _basin_size(grid: list[list[int]], start: Point) -> int:
    visited: set[Point] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if (x, y) in visited or grid[y][x] == 9:
            continue
        visited.add((x, y))
        stack.extend(_neighbours(grid, x, y))
    return len(visited)


def part_one(text: str) -> int:
    """Return the sum of risk levels (height plus one) of all low points."""
    grid = _parse(text)
    return sum(grid[y][x] + 1 for x, y in _low_points(grid))


def part_two(text: str) -> int:
    """Return the product of the sizes of the three largest basins."""
    grid = _parse(text)
    sizes = sorted((_basin_size(grid, point) for point in _low_points(grid)), reverse=True)
    return math.prod(sizes[:3])