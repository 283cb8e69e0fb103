import pytest

from adventpuzzles.y2021 import day09

SAMPLE = """2199943210
3987894921
9856789892
8767896789
9899965678"""


def test_part_one_example():
    assert day09.part_one(SAMPLE) == 15


def test_part_two_example():
    assert day09.part_two(SAMPLE) == 1134


def test_flipping_rows_keeps_results():
    flipped = "\n".join(reversed(SAMPLE.splitlines()))
    assert day09.part_one(flipped) == day09.part_one(SAMPLE)
    assert day09.part_two(flipped) == day09.part_two(SAMPLE)


def test_mirroring_columns_keeps_results():
    mirrored = "\n".join(line[::-1] for line in SAMPLE.splitlines())
    assert day09.part_one(mirrored) == day09.part_one(SAMPLE)
    assert day09.part_two(mirrored) == day09.part_two(SAMPLE)


def test_non_digit_is_rejected():
    with pytest.raises(ValueError):
        day09.part_one("12a\n456")