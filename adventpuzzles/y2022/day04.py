"""Camp cleanup section assignments."""


def _pairs(text: str):
    for line in text.splitlines():
        first, second = line.split(",")[:2]
        yield _section(first), _section(second)


def _section(assignment: str) -> tuple[int, int]:
    start, end = assignment.split("-")[:2]
    return int(start), int(end)


def _fully_contains(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return (a[0] >= b[0] and a[1] <= b[1]) or (b[0] >= a[0] and b[1] <= a[1])


def _overlaps(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return (b[0] <= a[0] <= b[1]) or (a[0] <= b[0] <= a[1])


def part_one(text: str) -> int:
    """Count pairs where one assignment fully contains the other."""
    return sum(_fully_contains(a, b) for a, b in _pairs(text))


def part_two(text: str) -> int:
    """Count pairs whose assignments overlap at all."""
    return sum(_overlaps(a, b) for a, b in _pairs(text))