"""Sonar sweep: count depth increases."""

WINDOW_SIZE = 3


def _depths(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def part_one(text: str) -> int:
    """Count readings larger than the one before, starting from the second reading.

    The comparison for the second reading is made against zero rather than
    the first reading.
    """
    increased = 0
    previous = 0
    for value in _depths(text)[1:]:
        if value > previous:
            increased += 1
        previous = value
    return increased


def part_two(text: str) -> int:
    """Count increases between consecutive sums of a three-reading sliding window."""
    depths = _depths(text)
    if len(depths) < WINDOW_SIZE:
        raise ValueError(f"need at least {WINDOW_SIZE} readings, got {len(depths)}")
    sums = [sum(window) for window in zip(depths, depths[1:], depths[2:])]
    return sum(1 for earlier, later in zip(sums, sums[1:]) if later > earlier)