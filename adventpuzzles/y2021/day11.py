"""Flashing dumbo octopuses."""

import itertools
from collections.abc import Iterator

Point = tuple[int, int]


def _parse(text: str) -> list[list[int]]:
    grid = [[int(char) for char in line] for line in text.splitlines()]
    if not grid or not grid[0]:
        raise ValueError("the energy grid is empty")
    return grid


def _neighbours(grid: list[list[int]], x: int, y: int) -> Iterator[Point]:
    height, width = len(grid), len(grid[0])
    for dx, dy in itertools.product((-1, 0, 1), repeat=2):
        nx, ny = x + dx, y + dy
        if (dx or dy) and 0 <= nx < width and 0 <= ny < height:
            yield nx, ny


def _step(grid: list[list[int]]) -> int:
    """Advance one step in place and return how many octopuses flashed."""
    cells = [(x, y) for y, row in enumerate(grid) for x in range(len(row))]
    for x, y in cells:
        grid[y][x] += 1

    flashed: set[Point] = set()
    while True:
        ready = [(x, y) for x, y in cells if grid[y][x] > 9 and (x, y) not in flashed]
        if not ready:
            break
        for x, y in ready:
            flashed.add((x, y))
            for nx, ny in _neighbours(grid, x, y):
                grid[ny][nx] += 1

    for x, y in flashed:
        grid[y][x] = 0
    return len(flashed)


def part_one(text: str) -> int:
    """Return the total number of flashes over 100 steps."""
    grid = _parse(text)
    return sum(_step(grid) for _ in range(100))


def part_two(text: str) -> int:
    """Return the first step on which every octopus flashes."""
    grid = _parse(text)
    total = len(grid) * len(grid[0])
    for step in itertools.count(1):
        if _step(grid) == total:
            return step
    raise AssertionError("unreachable")