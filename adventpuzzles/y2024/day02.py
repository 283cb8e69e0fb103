"""Red-nosed reports: safety of level sequences."""

from collections.abc import Callable, Sequence


def _reports(text: str) -> list[list[int]]:
    return [[int(value) for value in line.split()] for line in text.splitlines()]


def _is_valid_sequence(levels: Sequence[int], difference: Callable[[int, int], int]) -> bool:
    return all(1 <= difference(a, b) <= 3 for a, b in zip(levels, levels[1:]))


def _is_safe(levels: Sequence[int]) -> bool:
    return _is_valid_sequence(levels, lambda a, b: a - b) or _is_valid_sequence(
        levels, lambda a, b: b - a
    )


def _is_safe_with_dampener(levels: Sequence[int]) -> bool:
    return any(
        _is_safe([*levels[:index], *levels[index + 1 :]]) for index in range(len(levels))
    )


def part_one(text: str) -> int:
    """Count reports that strictly increase or decrease by 1 to 3 at each step."""
    return sum(_is_safe(levels) for levels in _reports(text))


def part_two(text: str) -> int:
    """Count reports that become safe after removing one level."""
    return sum(_is_safe_with_dampener(levels) for levels in _reports(text))