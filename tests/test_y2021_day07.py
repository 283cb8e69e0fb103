import pytest

from adventpuzzles.y2021 import day07

SAMPLE = "16,1,2,0,4,2,7,1,2,14"


def test_part_one_example():
    assert day07.part_one(SAMPLE) == 37


def test_part_two_aligns_on_truncated_mean():
    assert day07.part_two(SAMPLE) == 170


def test_order_of_positions_does_not_matter():
    reordered = ",".join(reversed(SAMPLE.split(",")))
    assert day07.part_one(reordered) == day07.part_one(SAMPLE)
    assert day07.part_two(reordered) == day07.part_two(SAMPLE)


def test_part_two_costs_at_least_part_one():
    assert day07.part_two(SAMPLE) >= day07.part_one(SAMPLE)


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        day07.part_one("")