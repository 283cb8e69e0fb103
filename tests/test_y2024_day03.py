from adventpuzzles.y2024.day03 import part_one, part_two

SAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_two_example():
    assert part_two(SAMPLE) == 48


def test_part_one_counts_every_instruction():
    assert part_one(SAMPLE) == 161


def test_without_switches_both_parts_agree():
    memory = "mul(3,4)xmul(10,2]mul(6,7)"
    assert part_one(memory) == 54
    assert part_two(memory) == part_one(memory)


def test_dont_disables_until_do():
    assert part_two("don't()mul(2,3)do()mul(4,5)") == 20