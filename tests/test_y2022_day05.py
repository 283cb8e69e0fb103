import pytest

from adventpuzzles.y2022.day05 import part_one, part_two

SAMPLE = "\n".join(
    [
        "    [D]    ",
        "[N] [C]    ",
        "[Z] [M] [P]",
        " 1   2   3 ",
        "",
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]
)


def test_example_input_part1():
    assert part_one(SAMPLE) == "CMZ"


def test_example_input_part2():
    assert part_two(SAMPLE) == "MCD"


def test_moving_from_empty_stack_raises():
    text = "\n".join(["[A] [B]", " 1   2 ", "", "move 2 from 1 to 2"])
    with pytest.raises(ValueError):
        part_one(text)


def test_missing_moves_section_raises():
    with pytest.raises(ValueError):
        part_one("[A]\n 1 ")