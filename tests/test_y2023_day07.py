import pytest

from adventpuzzles.y2023.day07 import part_one, part_two

SAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


def test_part_one_sample():
    assert part_one(SAMPLE) == 6440


def test_part_two_sample():
    assert part_two(SAMPLE) == 5905


def test_single_hand_gets_rank_one():
    assert part_one("AAAAA 10") == 10


def test_jokers_change_ranking():
    text = "JKKK2 10\nQQQ32 1"
    assert part_one(text) == 12
    assert part_two(text) == 21


def test_invalid_card_raises():
    with pytest.raises(ValueError):
        part_one("2345X 1")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part_one("23456")