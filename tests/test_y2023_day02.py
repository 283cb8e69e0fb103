import pytest

from adventpuzzles.y2023.day02 import part_one, part_two

GAMES = {
    1: ["3 blue, 4 red", "1 red, 2 green, 6 blue", "2 green"],
    2: ["1 blue, 2 green", "3 green, 4 blue, 1 red", "1 green, 1 blue"],
    3: ["8 green, 6 blue, 20 red", "5 blue, 4 red, 13 green", "5 green, 1 red"],
    4: ["1 green, 3 red, 6 blue", "3 green, 6 red", "3 green, 15 blue, 14 red"],
    5: ["6 red, 1 blue, 3 green", "2 blue, 1 red, 2 green"],
}


def _game(number, draws):
    return f"Game {number}: {'; '.join(draws)}"


SAMPLE = "".join(_game(number, draws) + "\n" for number, draws in GAMES.items())


def test_example_input_part1():
    assert part_one(SAMPLE) == 8


def test_example_input_part2():
    assert part_two(SAMPLE) == 2286


def test_limits_are_inclusive():
    assert part_one(_game(7, ["12 red, 13 green, 14 blue"])) == 7


def test_exceeding_limit_is_impossible():
    assert part_one(_game(7, ["13 red, 1 green, 1 blue"])) == 0


def test_power_of_single_game():
    assert part_two(_game(1, GAMES[1])) == 48


def test_missing_colour_raises():
    with pytest.raises(ValueError):
        part_two(_game(1, ["3 blue, 4 red"]))