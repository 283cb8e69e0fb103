import pytest

from adventpuzzles.y2024.day08 import (
    find_antennas_grouped_by_frequency,
    find_antinodes,
    parse_grid,
    part_one,
    part_two,
)

THREE_ANTENNAS = """..........
..........
..........
....a.....
........a.
.....a....
..........
..........
..........
.........."""

THREE_NODES = """T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
.........."""


def test_three_antennas():
    assert part_one(THREE_ANTENNAS) == 4


def test_antinodes():
    first, second = find_antinodes((2, 2), (3, 4))
    assert first == (1, 0)
    assert second == (4, 6)


def test_find_antennas_grouped_by_frequency():
    text = """
......
......
..a...
......
...a..
......
......"""
    assert find_antennas_grouped_by_frequency(parse_grid(text)) == {"a": [(2, 2), (3, 4)]}


def test_part_two_three_nodes():
    assert part_two(THREE_NODES) == 9


def test_part_two_covers_part_one_and_antennas():
    assert part_two(THREE_ANTENNAS) >= part_one(THREE_ANTENNAS)
    assert part_two(THREE_NODES) >= 3


def test_single_antenna_has_no_antinodes():
    assert part_one("....\n.a..\n....") == 0
    assert part_two("....\n.a..\n....") == 0


def test_parse_grid_strips_surrounding_blank_lines():
    assert parse_grid("\n.a\nb.\n") == [[".", "a"], ["b", "."]]


def test_empty_map_raises():
    with pytest.raises(ValueError):
        part_one("   \n")