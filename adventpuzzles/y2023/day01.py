"""Trebuchet calibration values."""

import re

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_VALUES = {word: value for value, word in enumerate(_WORDS, start=1)}
_VALUES.update({word[::-1]: value for word, value in list(_VALUES.items())})

_DIGIT = re.compile(r"\d")
_FORWARD = re.compile(r"\d|" + "|".join(_WORDS))
_BACKWARD = re.compile(r"\d|" + "|".join(word[::-1] for word in _WORDS))


def _value(token: str) -> int:
    if token.isdigit():
        return int(token)
    return _VALUES[token]


def part_one(text: str) -> int:
    """Sum the numbers formed by the first and last digit of each line."""
    total = 0
    for line in text.split("\n"):
        digits = _DIGIT.findall(line)
        if not digits:
            raise ValueError(f"no digit in line {line!r}")
        total += int(digits[0]) * 10 + int(digits[-1])
    return total


def part_two(text: str) -> int:
    """Sum the calibration values when spelled-out digits count as digits too."""
    total = 0
    for line in text.split("\n"):
        first = _FORWARD.search(line)
        last = _BACKWARD.search(line[::-1])
        if first is None or last is None:
            raise ValueError(f"no digit in line {line!r}")
        total += _value(first.group()) * 10 + _value(last.group())
    return total