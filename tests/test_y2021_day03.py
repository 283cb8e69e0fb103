import pytest

from adventpuzzles.y2021 import day03

SAMPLE = "\n".join(
    [
        "00100",
        "11110",
        "10110",
        "10111",
        "10101",
        "01111",
        "00111",
        "11100",
        "10000",
        "11001",
        "00010",
        "01010",
    ]
)


def test_example_input_part1():
    assert day03.part_one(SAMPLE) == 198


def test_example_input_part2():
    assert day03.part_two(SAMPLE) == 230


def test_line_order_does_not_matter_for_part_one():
    reordered = "\n".join(reversed(SAMPLE.splitlines()))
    assert day03.part_one(reordered) == day03.part_one(SAMPLE)


def test_empty_report_is_rejected():
    with pytest.raises(ValueError):
        day03.part_one("")
    with pytest.raises(ValueError):
        day03.part_two("")