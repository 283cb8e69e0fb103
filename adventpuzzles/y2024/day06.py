"""Guard gallivant: a patrolling guard and the obstacles that trap it."""

from collections.abc import Sequence

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]

_GUARD = "<>V^"
_STEPS = {"<": (-1, 0), ">": (1, 0), "^": (0, -1), "V": (0, 1)}
_TURN_RIGHT = {"<": "^", "^": ">", ">": "V", "V": "<"}


def _parse(text: str) -> list[list[str]]:
    grid = [list(line) for line in text.splitlines()]
    if not grid or not grid[0]:
        raise ValueError("the map is empty")
    return grid


def _step(direction: str) -> tuple[int, int]:
    try:
        return _STEPS[direction]
    except KeyError:
        raise ValueError(f"invalid direction {direction!r}") from None


def _turn_right(direction: str) -> str:
    try:
        return _TURN_RIGHT[direction]
    except KeyError:
        raise ValueError(f"invalid direction {direction!r}") from None


def _on_grid(grid: Grid, position: Position) -> bool:
    x, y = position
    return 0 <= y < len(grid) and 0 <= x < len(grid[0])


def _ahead(position: Position, direction: str, distance: int = 1) -> Position:
    dx, dy = _step(direction)
    return position[0] + dx * distance, position[1] + dy * distance


def _inside_bounds(grid: Grid, position: Position, direction: str) -> bool:
    """Return whether the square ahead is still on the map."""
    return _on_grid(grid, _ahead(position, direction))


def _is_blocked(
    grid: Grid, position: Position, direction: str, obstacle: Position | None = None
) -> bool:
    x, y = _ahead(position, direction)
    return (x, y) == obstacle or grid[y][x] == "#"


def _distance_to_obstacle(
    grid: Grid, position: Position, direction: str, obstacle: Position | None
) -> int:
    """Return how many free squares lie ahead before an obstacle or the edge."""
    distance = 0
    current = position
    while True:
        current = _ahead(current, direction)
        x, y = current
        if not _on_grid(grid, current) or current == obstacle or grid[y][x] == "#":
            return distance
        distance += 1


def _start(grid: Grid) -> tuple[Position, str]:
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile in _GUARD:
                return (x, y), tile
    raise ValueError("no starting position found")


def traverse_map(
    grid: Grid, position: Position, direction: str
) -> list[tuple[Position, str]] | None:
    """Walk the guard off the map.

    Returns every visited square with the last direction it was entered in,
    row by row, or None when the guard is caught in a loop.
    """
    visited: dict[Position, str] = {position: direction}
    while _inside_bounds(grid, position, direction):
        if _is_blocked(grid, position, direction):
            direction = _turn_right(direction)
        position = _ahead(position, direction)
        if not _on_grid(grid, position):
            raise ValueError(f"the guard walks off the map after turning at {position}")
        if visited.get(position) == direction:
            return None
        visited[position] = direction
    return sorted(visited.items(), key=lambda item: (item[0][1], item[0][0]))


def fast_traverse_map_and_detect_cycle(
    grid: Grid, position: Position, direction: str, obstacle: Position
) -> bool:
    """Return whether an extra obstacle at the given square traps the guard in a loop."""
    seen = {(position, direction)}
    turns_in_place = 0
    while _inside_bounds(grid, position, direction):
        if _is_blocked(grid, position, direction, obstacle):
            direction = _turn_right(direction)
        distance = _distance_to_obstacle(grid, position, direction, obstacle)
        if distance == 0:
            turns_in_place += 1
            if turns_in_place > len(_STEPS):
                # Boxed in on every side: the guard turns forever.
                return True
            continue
        turns_in_place = 0
        position = _ahead(position, direction, distance)
        state = (position, direction)
        if state in seen:
            return True
        seen.add(state)
    return False


def _patrol(grid: Grid) -> tuple[Position, str, list[tuple[Position, str]]]:
    position, direction = _start(grid)
    visited = traverse_map(grid, position, direction)
    if visited is None:
        raise ValueError("the guard walks in a loop")
    return position, direction, visited


def part_one(text: str) -> int:
    """Count the distinct squares the guard visits before leaving the map."""
    _, _, visited = _patrol(_parse(text))
    return len(visited)


def part_two(text: str) -> int:
    """Count the squares on the guard's route where a new obstacle causes a loop."""
    grid = _parse(text)
    position, direction, visited = _patrol(grid)
    return sum(
        fast_traverse_map_and_detect_cycle(grid, position, direction, square)
        for square, _ in visited
    )