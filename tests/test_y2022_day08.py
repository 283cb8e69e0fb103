import pytest

from adventpuzzles.y2022.day08 import part_one, part_two

SAMPLE = """30373
25512
65332
33549
35390"""


def test_example_input_part1():
    assert part_one(SAMPLE) == 21


def test_example_input_part2():
    assert part_two(SAMPLE) == 8


def test_every_tree_on_small_grid_is_visible():
    assert part_one("12\n34") == 4


def test_non_digit_raises():
    with pytest.raises(ValueError):
        part_one("1x\n22")