"""Rope bridge knot simulation."""

Position = tuple[int, int]

_STEPS = {"R": (1, 0), "D": (0, -1), "L": (-1, 0), "U": (0, 1)}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _is_adjacent(a: Position, b: Position) -> bool:
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def _motions(text: str):
    for line in text.splitlines():
        direction, _, count = line.partition(" ")
        try:
            step = _STEPS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        yield step, int(count)


def _run(text: str, knots: int) -> int:
    positions: list[Position] = [(0, 0)] * knots
    tail_visited = {(0, 0)}
    for (dx, dy), count in _motions(text):
        for _ in range(count):
            hx, hy = positions[0]
            positions[0] = (hx + dx, hy + dy)
            for knot in range(1, knots):
                leader, follower = positions[knot - 1], positions[knot]
                if not _is_adjacent(leader, follower):
                    positions[knot] = (
                        follower[0] + _sign(leader[0] - follower[0]),
                        follower[1] + _sign(leader[1] - follower[1]),
                    )
                    tail_visited.add(positions[-1])
    return len(tail_visited)


def part_one(text: str) -> int:
    """Count positions visited by the tail of a two-knot rope."""
    return _run(text, 2)


def part_two(text: str) -> int:
    """Count positions visited by the tail of a ten-knot rope."""
    return _run(text, 10)