import pytest

from adventpuzzles.y2022.day09 import part_one, part_two


def test_example_input_part1():
    text = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2"
    assert part_one(text) == 13


def test_example_input_part2():
    text = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"
    assert part_two(text) == 36


def test_straight_line_two_knots():
    assert part_one("R 5") == 5


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        part_one("X 3")