"""Pipe maze: the main loop and the tiles it encloses."""

import enum
from collections.abc import Sequence

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]


class Direction(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Side(enum.Enum):
    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


_UP, _DOWN, _LEFT, _RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT

# Directions tried, in order, when leaving each kind of tile along the loop.
_PIPE_DIRECTIONS = {
    "S": (_DOWN, _RIGHT, _LEFT, _UP),
    "F": (_DOWN, _RIGHT),
    "L": (_UP, _RIGHT),
    "J": (_UP, _LEFT),
    "7": (_DOWN, _LEFT),
    "|": (_DOWN, _UP),
    "-": (_LEFT, _RIGHT),
}

_FROM_BELOW = frozenset("|JL")
_FROM_ABOVE = frozenset("|F7")
_FROM_LEFT = frozenset("-J7")
_FROM_RIGHT = frozenset("-LF")

# Tiles that continue the loop when moving from a tile in a direction.
_CONNECTIONS = {
    ("|", _UP): _FROM_ABOVE,
    ("|", _DOWN): _FROM_BELOW,
    ("-", _LEFT): _FROM_RIGHT,
    ("-", _RIGHT): _FROM_LEFT,
    ("J", _UP): _FROM_ABOVE,
    ("J", _LEFT): _FROM_RIGHT,
    ("L", _UP): _FROM_ABOVE,
    ("L", _RIGHT): _FROM_LEFT,
    ("F", _DOWN): _FROM_BELOW,
    ("F", _RIGHT): _FROM_LEFT,
    ("7", _DOWN): _FROM_BELOW,
    ("7", _LEFT): _FROM_RIGHT,
}

# Side of the pipe one ends up on when stepping from open ground onto the loop.
_ENTRY_SIDES = {
    (_DOWN, "F"): Side.ABOVE,
    (_DOWN, "7"): Side.ABOVE,
    (_UP, "J"): Side.BELOW,
    (_UP, "L"): Side.BELOW,
    (_LEFT, "7"): Side.ABOVE,
    (_LEFT, "J"): Side.BELOW,
    (_RIGHT, "L"): Side.BELOW,
    (_RIGHT, "F"): Side.ABOVE,
}

# Directions and the side one must be on to step off a bend onto open ground.
_EXITS = {
    "J": (frozenset({_RIGHT, _DOWN}), Side.BELOW),
    "L": (frozenset({_LEFT, _DOWN}), Side.BELOW),
    "F": (frozenset({_LEFT, _UP}), Side.ABOVE),
    "7": (frozenset({_RIGHT, _UP}), Side.ABOVE),
}

_NEXT_SIDE = {
    (Side.ABOVE, "F", "-"): Side.ABOVE,
    (Side.ABOVE, "F", "|"): Side.LEFT,
    (Side.BELOW, "F", "|"): Side.RIGHT,
    (Side.BELOW, "F", "L"): Side.ABOVE,
    (Side.ABOVE, "F", "L"): Side.BELOW,
    (Side.ABOVE, "7", "|"): Side.RIGHT,
    (Side.BELOW, "7", "|"): Side.LEFT,
    (Side.BELOW, "7", "J"): Side.ABOVE,
    (Side.ABOVE, "7", "J"): Side.BELOW,
    (Side.ABOVE, "J", "|"): Side.LEFT,
    (Side.BELOW, "J", "|"): Side.RIGHT,
    (Side.BELOW, "J", "7"): Side.ABOVE,
    (Side.ABOVE, "J", "7"): Side.BELOW,
    (Side.ABOVE, "L", "|"): Side.RIGHT,
    (Side.BELOW, "L", "|"): Side.LEFT,
    (Side.BELOW, "L", "F"): Side.ABOVE,
    (Side.ABOVE, "L", "F"): Side.BELOW,
    (Side.LEFT, "|", "7"): Side.BELOW,
    (Side.LEFT, "|", "J"): Side.ABOVE,
    (Side.LEFT, "|", "L"): Side.BELOW,
    (Side.LEFT, "|", "F"): Side.ABOVE,
    (Side.RIGHT, "|", "7"): Side.ABOVE,
    (Side.RIGHT, "|", "J"): Side.BELOW,
    (Side.RIGHT, "|", "L"): Side.ABOVE,
    (Side.RIGHT, "|", "F"): Side.BELOW,
}


def _parse(text: str) -> list[list[str]]:
    return [list(line) for line in text.split("\n")]


def _move(direction: Direction, position: Position) -> Position:
    dx, dy = direction.value
    return position[0] + dx, position[1] + dy


def _find_start(grid: Grid) -> Position:
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == "S":
                return x, y
    raise ValueError("no starting position found")


def _next_position(
    directions: Sequence[Direction], traversed: dict[Position, str], position: Position
) -> Position:
    for direction in directions:
        candidate = _move(direction, position)
        if candidate not in traversed or traversed[candidate] == "S":
            return candidate
    raise ValueError(f"no way onward from {position}")


def find_main_loop(grid: Grid) -> dict[Position, str]:
    """Follow the pipes from S back to S and return every loop tile with its character."""
    start = _find_start(grid)
    loop: dict[Position, str] = {}
    position = start
    while True:
        x, y = position
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            raise ValueError(f"the loop leaves the grid at {position}")
        tile = grid[y][x]
        loop[position] = tile
        directions = _PIPE_DIRECTIONS.get(tile)
        if directions is None:
            raise ValueError(f"the loop runs into {tile!r} at {position}")
        position = _next_position(directions, loop, position)
        if position == start:
            return loop


def _exit_allowed(tile: str, direction: Direction, side: Side) -> bool:
    exit_rule = _EXITS.get(tile)
    if exit_rule is None:
        return False
    directions, required_side = exit_rule
    return direction in directions and side is required_side


def is_inside_the_loop(tile: Position, grid: Grid, main_loop: dict[Position, str]) -> bool:
    """Return whether a tile is enclosed by the loop.

    Searches depth first for the grid edge, squeezing between pipes by keeping
    track of which side of the pipe the search is on.
    """
    if tile in main_loop:
        return False
    width, height = len(grid[0]), len(grid)
    visited: set[Position] = set()
    stack: list[tuple[Position, Side]] = [(tile, Side.NONE)]

    while stack:
        current, side = stack.pop()
        cx, cy = current
        if cx == 0 or cx == width - 1 or cy == 0 or cy == height - 1:
            return False
        visited.add(current)
        current_on_loop = current in main_loop

        for direction in (_UP, _DOWN, _LEFT, _RIGHT):
            following = _move(direction, current)
            if following in visited:
                continue
            next_on_loop = following in main_loop
            if not next_on_loop and not current_on_loop:
                stack.append((following, Side.NONE))
                continue

            current_tile = grid[cy][cx]
            next_tile = grid[following[1]][following[0]]

            connects = _CONNECTIONS.get((current_tile, direction), frozenset())
            if next_on_loop and next_tile in connects:
                next_side = _NEXT_SIDE.get((side, current_tile, next_tile), side)
                stack.append((following, next_side))

            if next_on_loop and not current_on_loop:
                entry_side = _ENTRY_SIDES.get((direction, next_tile))
                if entry_side is not None:
                    stack.append((following, entry_side))

            if (
                not next_on_loop
                and current_on_loop
                and _exit_allowed(current_tile, direction, side)
            ):
                stack.append((following, Side.NONE))

    return True


def part_one(text: str) -> int:
    """Return the number of steps to the point of the loop farthest from S."""
    return len(find_main_loop(_parse(text))) // 2


def part_two(text: str) -> int:
    """Return the number of tiles enclosed by the loop."""
    grid = _parse(text)
    main_loop = find_main_loop(grid)
    return sum(
        is_inside_the_loop((x, y), grid, main_loop)
        for y, row in enumerate(grid)
        for x in range(len(row))
    )