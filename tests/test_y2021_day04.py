import pytest

from adventpuzzles.y2021 import day04

SAMPLE = """7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1

22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7
"""


def test_example_input_part1():
    assert day04.part_one(SAMPLE) == 4512


def test_example_input_part2():
    assert day04.part_two(SAMPLE) == 1924


def test_no_winner_is_an_error():
    text = "99\n\n" + SAMPLE.split("\n\n", 1)[1]
    with pytest.raises(ValueError):
        day04.part_one(text)


def test_single_board_is_first_and_last_winner():
    single = SAMPLE.split("\n\n")
    text = "\n\n".join([single[0], single[3]])
    assert day04.part_one(text) == day04.part_two(text)