import pytest

from adventpuzzles.y2023.day04 import part_one, part_two

CARDS = [
    ((41, 48, 83, 86, 17), (83, 86, 6, 31, 17, 9, 48, 53)),
    ((13, 32, 20, 16, 61), (61, 30, 68, 82, 17, 32, 24, 19)),
    ((1, 21, 53, 59, 44), (69, 82, 63, 72, 16, 21, 14, 1)),
    ((41, 92, 73, 84, 69), (59, 84, 76, 51, 58, 5, 54, 83)),
    ((87, 83, 26, 28, 32), (88, 30, 70, 12, 93, 22, 82, 36)),
    ((31, 18, 13, 56, 72), (74, 77, 10, 23, 35, 67, 36, 11)),
]


def _card(number, winning, yours):
    left = " ".join(f"{n:2d}" for n in winning)
    right = " ".join(f"{n:2d}" for n in yours)
    return f"Card {number}: {left} | {right}"


SAMPLE = "".join(
    _card(index, winning, yours) + "\n" for index, (winning, yours) in enumerate(CARDS, start=1)
)


def test_example_input_part1():
    assert part_one(SAMPLE) == 13


def test_example_input_part2():
    assert part_two(SAMPLE) == 30


def test_card_without_matches():
    card = _card(1, (1, 2), (3, 4))
    assert part_one(card) == 0
    assert part_two(card) == 1


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        part_one("Card 1: 1 2 3 4")