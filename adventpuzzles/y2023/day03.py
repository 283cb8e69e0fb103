"""Gear ratios on an engine schematic."""

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"\d+")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class _Symbol:
    x: int
    y: int
    char: str


@dataclass(frozen=True)
class _Number:
    value: int
    x_range: tuple[int, int]
    y_range: tuple[int, int]

    def touches(self, symbol: _Symbol) -> bool:
        return (
            self.x_range[0] <= symbol.x <= self.x_range[1]
            and self.y_range[0] <= symbol.y <= self.y_range[1]
        )


def _numbers(text: str) -> list[_Number]:
    return [
        _Number(int(match.group()), (match.start() - 1, match.end()), (y - 1, y + 1))
        for y, line in enumerate(text.splitlines())
        for match in _NUMBER.finditer(line)
    ]


def _symbols(text: str) -> list[_Symbol]:
    return [
        _Symbol(x, y, char)
        for y, line in enumerate(text.splitlines())
        for x, char in enumerate(line)
        if char not in _DIGITS and char != "."
    ]


def part_one(text: str) -> int:
    """Sum the part numbers adjacent to any symbol."""
    symbols = _symbols(text)
    return sum(
        number.value
        for number in _numbers(text)
        if any(number.touches(symbol) for symbol in symbols)
    )


def part_two(text: str) -> int:
    """Sum the gear ratios of '*' symbols adjacent to exactly two numbers."""
    numbers = _numbers(text)
    total = 0
    for symbol in _symbols(text):
        if symbol.char != "*":
            continue
        adjacent = [number for number in numbers if number.touches(symbol)]
        if len(adjacent) == 2:
            total += adjacent[0].value * adjacent[1].value
    return total