"""Crab submarine alignment."""


def _positions(text: str) -> list[int]:
    return [int(value) for value in text.split(",")]


def _fuel_part_two(source: int, target: int) -> int:
    distance = abs(source - target)
    return distance * (distance + 1) // 2


def _truncating_mean(values: list[int]) -> int:
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def part_one(text: str) -> int:
    """Return the fuel to align all crabs on the median position."""
    positions = sorted(_positions(text))
    median = positions[len(positions) // 2]
    return sum(abs(position - median) for position in positions)


def part_two(text: str) -> int:
    """Return the fuel with growing step cost to align on the truncated mean."""
    positions = _positions(text)
    target = _truncating_mean(positions)
    return sum(_fuel_part_two(position, target) for position in positions)