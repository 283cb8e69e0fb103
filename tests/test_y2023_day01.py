import pytest

from adventpuzzles.y2023.day01 import part_one, part_two

SAMPLE_ONE = """1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet"""

SAMPLE_TWO = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen"""


def test_example_input_part1():
    assert part_one(SAMPLE_ONE) == 142


def test_example_input_part2():
    assert part_two(SAMPLE_TWO) == 281


def test_single_digit_counts_as_first_and_last():
    assert part_one("treb7uchet") == 77


def test_overlapping_words_at_end():
    assert part_two("xtwone") == 21


def test_line_without_digit_raises():
    with pytest.raises(ValueError):
        part_one("abc")