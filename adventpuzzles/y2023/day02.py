"""Cube conundrum: games of coloured cubes."""

import math
import re

MAX_CUBES = {"red": 12, "green": 13, "blue": 14}
_COLORS = ("blue", "green", "red")


def _split_game(line: str) -> tuple[str, str]:
    label, separator, record = line.partition(": ")
    if not separator:
        raise ValueError(f"malformed game: {line!r}")
    return label, record


def _game_id(label: str) -> int:
    _, separator, number = label.partition(" ")
    if not separator:
        raise ValueError(f"malformed game label: {label!r}")
    return int(number)


def _valid_result(result: str) -> bool:
    number, separator, color = result.partition(" ")
    if not separator:
        raise ValueError(f"malformed draw: {result!r}")
    count = int(number)
    limit = MAX_CUBES.get(color)
    return limit is None or count <= limit


def _valid_game(record: str) -> bool:
    return all(
        _valid_result(result) for draw in record.split("; ") for result in draw.split(", ")
    )


def _min_required(color: str, draws: list[str]) -> int:
    counts = [int(draw.strip().split(" ", 1)[0]) for draw in draws if draw.endswith(color)]
    if not counts:
        raise ValueError(f"no {color} cubes drawn")
    return max(counts)


def _power(line: str) -> int:
    _, record = _split_game(line)
    draws = re.split(r"[,;]", record)
    return math.prod(_min_required(color, draws) for color in _COLORS)


def part_one(text: str) -> int:
    """Sum the ids of games possible with 12 red, 13 green and 14 blue cubes."""
    total = 0
    for line in text.splitlines():
        label, record = _split_game(line)
        if _valid_game(record):
            total += _game_id(label)
    return total


def part_two(text: str) -> int:
    """Sum the powers of the minimal cube sets of all games."""
    return sum(_power(line) for line in text.splitlines())