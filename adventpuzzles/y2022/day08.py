"""Treetop tree house: visibility and scenic scores."""

import math


def _parse(text: str) -> list[list[int]]:
    grid = [[int(char) for char in line] for line in text.splitlines()]
    if not grid:
        raise ValueError("the forest is empty")
    return grid


def _lines_of_sight(grid: list[list[int]], x: int, y: int) -> list[list[int]]:
    """Return tree heights looking right, down, left and up, nearest first."""
    row = grid[y]
    column = [line[x] for line in grid]
    return [row[x + 1 :], column[y + 1 :], row[:x][::-1], column[:y][::-1]]


def _viewing_distance(height: int, line: list[int]) -> int:
    distance = 0
    for tree in line:
        distance += 1
        if tree >= height:
            break
    return distance


def _cells(grid: list[list[int]]):
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            yield x, y, height


def part_one(text: str) -> int:
    """Count trees visible from outside the grid."""
    grid = _parse(text)
    return sum(
        any(all(tree < height for tree in line) for line in _lines_of_sight(grid, x, y))
        for x, y, height in _cells(grid)
    )


def part_two(text: str) -> int:
    """Return the highest scenic score of any tree."""
    grid = _parse(text)
    return max(
        math.prod(_viewing_distance(height, line) for line in _lines_of_sight(grid, x, y))
        for x, y, height in _cells(grid)
    )