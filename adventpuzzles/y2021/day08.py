"""Seven-segment display outputs."""

UNIQUE_SEGMENT_COUNTS = frozenset({2, 4, 3, 7})


def _split_line(line: str) -> tuple[str, str]:
    patterns, separator, output = line.partition(" | ")
    if not separator:
        raise ValueError(f"missing output section: {line!r}")
    return patterns, output


def _output_values(line: str) -> list[str]:
    return _split_line(line)[1].split(" ")


def _only(candidates: list[frozenset[str]], what: str) -> frozenset[str]:
    if len(candidates) != 1:
        raise ValueError(f"cannot identify the pattern for {what}")
    return candidates[0]


def _decode_patterns(patterns: list[frozenset[str]]) -> dict[frozenset[str], int]:
    """Work out which segment pattern shows which digit."""
    by_length: dict[int, list[frozenset[str]]] = {}
    for pattern in patterns:
        by_length.setdefault(len(pattern), []).append(pattern)

    one = _only(by_length.get(2, []), "1")
    four = _only(by_length.get(4, []), "4")
    seven = _only(by_length.get(3, []), "7")
    eight = _only(by_length.get(7, []), "8")

    sixes = by_length.get(6, [])
    nine = _only([p for p in sixes if four <= p], "9")
    zero = _only([p for p in sixes if p != nine and one <= p], "0")
    six = _only([p for p in sixes if p not in (nine, zero)], "6")

    fives = by_length.get(5, [])
    three = _only([p for p in fives if one <= p], "3")
    five = _only([p for p in fives if p != three and p <= six], "5")
    two = _only([p for p in fives if p not in (three, five)], "2")

    return {
        zero: 0, one: 1, two: 2, three: 3, four: 4,
        five: 5, six: 6, seven: 7, eight: 8, nine: 9,
    }


def _decode_line(line: str) -> int:
    patterns_text, output_text = _split_line(line)
    digits = _decode_patterns([frozenset(p) for p in patterns_text.split()])
    value = 0
    for segment in output_text.split():
        key = frozenset(segment)
        if key not in digits:
            raise ValueError(f"unknown output pattern: {segment!r}")
        value = value * 10 + digits[key]
    return value


def part_one(text: str) -> int:
    """Count output digits that are 1, 4, 7 or 8 by their segment count."""
    return sum(
        1
        for line in text.splitlines()
        for value in _output_values(line)
        if len(value) in UNIQUE_SEGMENT_COUNTS
    )


def part_two(text: str) -> int:
    """Decode every display and sum the four-digit output values."""
    return sum(_decode_line(line) for line in text.splitlines() if line.strip())