import pytest

from adventpuzzles.y2021 import day06

SAMPLE = "3,4,3,1,2"


def test_part1_example():
    assert day06.run_fish_simulation(SAMPLE, 80) == 5934


def test_part_one_is_eighty_days():
    assert day06.part_one(SAMPLE) == 5934


def test_eighteen_days():
    assert day06.run_fish_simulation(SAMPLE, 18) == 26


def test_zero_days_keeps_population():
    assert day06.run_fish_simulation(SAMPLE, 0) == len(SAMPLE.split(","))


def test_part_two_table_value():
    assert day06.part_two("5") == 4368232009


def test_part_two_example():
    assert day06.part_two(SAMPLE) == 26984457539


def test_part_two_unknown_timer():
    with pytest.raises(ValueError):
        day06.part_two("7")