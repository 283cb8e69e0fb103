"""Cosmic expansion: distances between galaxies."""

import itertools

Position = tuple[int, int]


def _cumulative(flags: list[bool]) -> list[int]:
    return list(itertools.accumulate(int(flag) for flag in flags))


def _galaxy_positions(universe: list[str], multiplier: int) -> list[Position]:
    width = len(universe[0])
    occupied_columns = {
        column for row in universe for column, char in enumerate(row) if char == "#"
    }
    empty_rows = _cumulative(["#" not in row for row in universe])
    empty_columns = _cumulative([column not in occupied_columns for column in range(width)])
    growth = multiplier - 1
    return [
        (row + empty_rows[row] * growth, column + empty_columns[column] * growth)
        for row, line in enumerate(universe)
        for column, char in enumerate(line)
        if char == "#"
    ]


def sum_distances(text: str, multiplier: int) -> int:
    """Sum the Manhattan distances between all galaxy pairs.

    Every empty row and column is replaced by `multiplier` copies of itself.
    """
    universe = text.splitlines()
    if not universe:
        raise ValueError("the image is empty")
    galaxies = _galaxy_positions(universe, multiplier)
    return sum(
        abs(a[0] - b[0]) + abs(a[1] - b[1]) for a, b in itertools.combinations(galaxies, 2)
    )


def part_one(text: str) -> int:
    """Sum galaxy distances with empty space doubled."""
    return sum_distances(text, 2)


def part_two(text: str) -> int:
    """Sum galaxy distances with empty space a million times larger."""
    return sum_distances(text, 1_000_000)