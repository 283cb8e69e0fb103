"""Point of incidence: mirrors in patterns of ash and rock."""

from collections.abc import Iterator, Sequence


def _rows(pattern: str) -> list[str]:
    return pattern.split("\n")


def _transpose(rows: Sequence[str]) -> list[str]:
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("pattern rows differ in length")
    return ["".join(column) for column in zip(*rows)]


def _horizontal_reflection(rows: Sequence[str], ignore: int) -> int | None:
    """Return the number of rows above the first mirror line, skipping `ignore`."""
    for index in range(len(rows) - 1):
        if index + 1 == ignore:
            continue
        span = min(index + 1, len(rows) - index - 1)
        if all(rows[index - k] == rows[index + 1 + k] for k in range(span)):
            return index + 1
    return None


def _vertical_reflection(rows: Sequence[str], ignore: int) -> int | None:
    return _horizontal_reflection(_transpose(rows), ignore)


def find_reflection(pattern: str, ignore: int) -> tuple[int, int]:
    """Return (rows above, 0) for a horizontal mirror, else (0, columns left) or (0, 0)."""
    rows = _rows(pattern)
    horizontal = _horizontal_reflection(rows, ignore)
    if horizontal is not None:
        return horizontal, 0
    vertical = _vertical_reflection(rows, ignore)
    if vertical is not None:
        return 0, vertical
    return 0, 0


def _smudged_variants(pattern: str) -> Iterator[str]:
    swap = {"#": ".", ".": "#"}
    for index, char in enumerate(pattern):
        if char in swap:
            yield pattern[:index] + swap[char] + pattern[index + 1 :]


def part_one(text: str) -> int:
    """Sum the columns left of vertical mirrors plus 100 times the rows above horizontal ones."""
    total = 0
    for pattern in text.split("\n\n"):
        horizontal, vertical = find_reflection(pattern, 0)
        total += vertical + 100 * horizontal
    return total


def part_two(text: str) -> int:
    """Summarise the new mirror lines found after fixing one smudge in each pattern."""
    total = 0
    for pattern in text.split("\n\n"):
        horizontal, vertical = find_reflection(pattern, 0)
        for variant in _smudged_variants(pattern):
            rows = _rows(variant)
            found = _vertical_reflection(rows, vertical)
            if found is not None and found != vertical:
                total += found
                break
            found = _horizontal_reflection(rows, horizontal)
            if found is not None and found != horizontal:
                total += 100 * found
                break
    return total