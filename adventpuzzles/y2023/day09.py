"""Mirage maintenance: extrapolating sequences."""


def _numbers(line: str) -> list[int]:
    return [int(value) for value in line.split()]


def get_rows(numbers: list[int]) -> list[list[int]]:
    """Return the sequence followed by its successive difference rows, ending at all zeros."""
    rows = [list(numbers)]
    current = list(numbers)
    while True:
        current = [later - earlier for earlier, later in zip(current, current[1:])]
        rows.append(current)
        if not any(current):
            return rows


def _check_rows(rows: list[list[int]]) -> None:
    if any(not row for row in rows):
        raise ValueError("sequence too short to extrapolate")


def get_next_number(rows: list[list[int]]) -> int:
    """Return the value that continues the first row."""
    _check_rows(rows)
    return sum(row[-1] for row in rows)


def _previous_number(rows: list[list[int]]) -> int:
    _check_rows(rows)
    value = 0
    for row in reversed(rows):
        value = row[0] - value
    return value


def extrapolate(line: str) -> int:
    """Return the next value of the sequence on the line."""
    return get_next_number(get_rows(_numbers(line)))


def part_one(text: str) -> int:
    """Sum the next values of all sequences."""
    return sum(extrapolate(line) for line in text.splitlines())


def part_two(text: str) -> int:
    """Sum the values preceding all sequences."""
    return sum(_previous_number(get_rows(_numbers(line))) for line in text.splitlines())