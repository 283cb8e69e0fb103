"""Calorie counting for elves' food supplies."""


def _calorie_totals(text: str) -> list[int]:
    """Return each elf's total calories, largest first."""
    totals = [
        sum(int(line) for line in block.strip().split("\n"))
        for block in text.split("\n\n")
    ]
    return sorted(totals, reverse=True)


def part_one(text: str) -> int:
    """Return the largest number of calories carried by one elf."""
    totals = _calorie_totals(text)
    return totals[0]


def part_two(text: str) -> int:
    """Return the calories carried by the three best-supplied elves together."""
    return sum(_calorie_totals(text)[:3])