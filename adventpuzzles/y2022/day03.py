"""Rucksack reorganisation."""

from collections.abc import Iterable


def _priority(item: str) -> int:
    if item.islower():
        return ord(item) - 96
    return ord(item) - 38


def _common_item(groups: Iterable[str]) -> str:
    sets = [set(group) for group in groups]
    common = set.intersection(*sets)
    if not common:
        raise ValueError(f"no item shared by {list(groups)!r}")
    return min(common)


def part_one(text: str) -> int:
    """Sum the priorities of the item found in both compartments of each rucksack."""
    total = 0
    for line in text.splitlines():
        half = len(line) // 2
        total += _priority(_common_item((line[:half], line[half:])))
    return total


def part_two(text: str) -> int:
    """Sum the priorities of the badge shared by each group of three elves."""
    lines = text.splitlines()
    groups = zip(*[iter(lines)] * 3)
    return sum(_priority(_common_item(group)) for group in groups)