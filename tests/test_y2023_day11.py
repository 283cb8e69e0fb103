import pytest

from adventpuzzles.y2023.day11 import part_one, part_two, sum_distances

SAMPLE = """...#......
.......#..
#.........
..........
......#...
.#........
.........#
..........
.......#..
#...#....."""


def test_part_one():
    assert part_one(SAMPLE) == 374


def test_expansion_by_ten():
    assert sum_distances(SAMPLE, 10) == 1030


def test_expansion_by_hundred():
    assert sum_distances(SAMPLE, 100) == 8410


def test_part_two_grows_with_gap():
    assert part_two("#.#") == 1_000_001


def test_no_expansion_between_adjacent_galaxies():
    assert part_one("##") == 1


def test_empty_image_raises():
    with pytest.raises(ValueError):
        part_one("")