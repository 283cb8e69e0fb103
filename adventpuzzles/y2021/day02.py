"""Submarine steering commands."""


def _commands(text: str):
    for line in text.split("\n"):
        try:
            direction, amount = line.split(" ", 1)
        except ValueError:
            raise ValueError(f"malformed command: {line!r}") from None
        yield direction, int(amount)


def part_one(text: str) -> int:
    """Return horizontal position times depth after applying all commands."""
    x = 0
    depth = 0
    for direction, value in _commands(text):
        if direction == "forward":
            x += value
        elif direction == "down":
            depth += value
        elif direction == "up":
            depth -= value
    return x * depth


def part_two(text: str) -> int:
    """Return horizontal position times depth, where up and down change the aim."""
    x = 0
    depth = 0
    aim = 0
    for direction, value in _commands(text):
        if direction == "forward":
            x += value
            depth += aim * value
        elif direction == "down":
            aim += value
        elif direction == "up":
            aim -= value
    return x * depth