"""Ceres search: finding XMAS in a letter grid."""

from collections.abc import Sequence

WORD = "XMAS"
_CROSS_CORNERS = (
    ("M", "M", "S", "S"),
    ("S", "M", "S", "M"),
    ("M", "S", "M", "S"),
    ("S", "S", "M", "M"),
)


def _parse(text: str) -> list[str]:
    grid = text.splitlines()
    if not grid or not grid[0]:
        raise ValueError("the word search is empty")
    return grid


def _transpose(grid: Sequence[str]) -> list[str]:
    width = len(grid[0])
    columns = [[] for _ in range(width)]
    for line in grid:
        if len(line) > width:
            raise ValueError("rows are longer than the first row")
        for index, char in enumerate(line):
            columns[index].append(char)
    return ["".join(column) for column in columns]


def _diagonal_matches(grid: Sequence[str], word: str) -> int:
    """Count occurrences of word running down and to the right."""
    rows, cols, size = len(grid), len(grid[0]), len(word)
    return sum(
        all(grid[i + k][j + k] == char for k, char in enumerate(word))
        for i in range(rows - size + 1)
        for j in range(cols - size + 1)
    )


def _count_in_lines(lines: Sequence[str]) -> int:
    return sum(line.count(WORD) + line.count(WORD[::-1]) for line in lines)


def part_one(text: str) -> int:
    """Count XMAS in every direction: across, down and along both diagonals."""
    grid = _parse(text)
    mirrored = [line[::-1] for line in grid]
    return (
        _count_in_lines(grid)
        + _count_in_lines(_transpose(grid))
        + sum(
            _diagonal_matches(g, word)
            for g in (grid, mirrored)
            for word in (WORD, WORD[::-1])
        )
    )


def _is_cross(grid: Sequence[str], row: int, col: int) -> bool:
    if row == 0 or col == 0 or row >= len(grid) - 1 or col >= len(grid[0]) - 1:
        return False
    corners = (
        grid[row - 1][col - 1],
        grid[row - 1][col + 1],
        grid[row + 1][col - 1],
        grid[row + 1][col + 1],
    )
    return corners in _CROSS_CORNERS


def part_two(text: str) -> int:
    """Count the A's at the centre of two crossing MAS words."""
    grid = _parse(text)
    return sum(
        _is_cross(grid, row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "A"
    )