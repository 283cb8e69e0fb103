"""Rock paper scissors strategy guide."""

_SCORES_PART_ONE = {
    "A X": 4,
    "A Y": 8,
    "A Z": 3,
    "B X": 1,
    "B Y": 5,
    "B Z": 9,
    "C X": 7,
    "C Y": 2,
    "C Z": 6,
}

_SCORES_PART_TWO = {
    "A X": 3,
    "A Y": 4,
    "A Z": 8,
    "B X": 1,
    "B Y": 5,
    "B Z": 9,
    "C X": 2,
    "C Y": 6,
    "C Z": 7,
}


def part_one(text: str) -> int:
    """Return the total score when the second column is the shape to play."""
    return sum(_SCORES_PART_ONE.get(line, 0) for line in text.splitlines())


def part_two(text: str) -> int:
    """Return the total score when the second column is the wanted outcome."""
    return sum(_SCORES_PART_TWO.get(line, 0) for line in text.splitlines())