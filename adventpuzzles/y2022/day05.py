"""Supply stacks rearranged by a crane."""

import re

_LOWERCASE = re.compile(r"[a-z]*")

Move = tuple[int, int, int]


def _create_stacks(drawing: str) -> list[list[str]]:
    first_row = drawing.split("\n", 1)[0]
    stacks: list[list[str]] = [[] for _ in range((len(first_row) + 1) // 4)]
    for row in drawing.splitlines():
        for stack_number, column in enumerate(range(1, len(row) - 1, 4)):
            if row[column].isalpha():
                stacks[stack_number].insert(0, row[column])
    return stacks


def _parse_moves(moves: str) -> list[Move]:
    parsed = []
    for line in moves.splitlines():
        numbers = _LOWERCASE.sub("", line).split()
        if len(numbers) < 3:
            raise ValueError(f"malformed move: {line!r}")
        count, source, target = (int(number) for number in numbers[:3])
        parsed.append((count, source - 1, target - 1))
    return parsed


def _parse(text: str) -> tuple[list[list[str]], list[Move]]:
    drawing, separator, moves = text.partition("\n\n")
    if not separator:
        raise ValueError("missing blank line between drawing and moves")
    return _create_stacks(drawing), _parse_moves(moves)


def _take(stack: list[str], count: int) -> list[str]:
    if count > len(stack):
        raise ValueError(f"cannot take {count} crates from a stack of {len(stack)}")
    taken = stack[len(stack) - count :]
    del stack[len(stack) - count :]
    return taken


def _tops(stacks: list[list[str]]) -> str:
    if not all(stacks):
        raise ValueError("a stack is empty")
    return "".join(stack[-1] for stack in stacks)


def part_one(text: str) -> str:
    """Return the top crates after moving crates one at a time."""
    stacks, moves = _parse(text)
    for count, source, target in moves:
        stacks[target].extend(reversed(_take(stacks[source], count)))
    return _tops(stacks)


def part_two(text: str) -> str:
    """Return the top crates after moving several crates at once, keeping their order."""
    stacks, moves = _parse(text)
    for count, source, target in moves:
        stacks[target].extend(_take(stacks[source], count))
    return _tops(stacks)