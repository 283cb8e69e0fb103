import pytest

from adventpuzzles.y2024.day04 import part_one, part_two

SAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_part_one_sample():
    assert part_one(SAMPLE) == 18


def test_part_two_sample():
    assert part_two(SAMPLE) == 9


def test_single_row_forwards_and_backwards():
    assert part_one("XMAS") == 1
    assert part_one("SAMX") == 1


def test_single_cross():
    assert part_two("M.S\n.A.\nM.S") == 1


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        part_one("")