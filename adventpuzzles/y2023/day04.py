"""Scratchcards."""


def _matching_numbers(line: str) -> int:
    left, separator, right = line.partition(" | ")
    if not separator:
        raise ValueError(f"malformed card: {line!r}")
    _, separator, winning_text = left.partition(": ")
    if not separator:
        raise ValueError(f"malformed card: {line!r}")
    winning = {int(number) for number in winning_text.split()}
    yours = {int(number) for number in right.split()}
    return len(yours & winning)


def _score(line: str) -> int:
    matches = _matching_numbers(line)
    return 2 ** (matches - 1) if matches else 0


def part_one(text: str) -> int:
    """Sum the points of all cards."""
    return sum(_score(line) for line in text.splitlines())


def part_two(text: str) -> int:
    """Return the total number of cards held after winning copies of later cards."""
    matches = [_matching_numbers(line) for line in text.splitlines()]
    produced = [0] * len(matches)
    for index in reversed(range(len(matches))):
        end = index + 1 + matches[index]
        if end > len(matches):
            raise ValueError(f"card {index + 1} wins copies past the end of the table")
        produced[index] = 1 + sum(produced[index + 1 : end])
    return sum(produced)