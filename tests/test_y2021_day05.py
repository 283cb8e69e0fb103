import pytest

from adventpuzzles.y2021 import day05

SAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2"""


def test_example_input_part1():
    assert day05.part_one(SAMPLE) == 5


def test_example_input_part2():
    assert day05.part_two(SAMPLE) == 12


def test_reversed_endpoints_give_same_result():
    flipped = "\n".join(
        " -> ".join(reversed(line.split(" -> "))) for line in SAMPLE.splitlines()
    )
    assert day05.part_one(flipped) == day05.part_one(SAMPLE)
    assert day05.part_two(flipped) == day05.part_two(SAMPLE)


def test_part_two_never_less_than_part_one():
    assert day05.part_two(SAMPLE) >= day05.part_one(SAMPLE)


def test_malformed_line_is_rejected():
    with pytest.raises(ValueError):
        day05.part_one("1,2 -> 3")