from adventpuzzles.y2022.day02 import part_one, part_two

SAMPLE = "A Y\nB X\nC Z\n"


def test_example_input_part1():
    assert part_one(SAMPLE) == 15


def test_example_input_part2():
    assert part_two(SAMPLE) == 12


def test_unknown_rounds_score_zero():
    assert part_one("A Y\nQ Q") == 8
    assert part_two("Q Q\nA Y") == 4