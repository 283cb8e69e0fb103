"""Hill climbing: shortest paths over an elevation map."""

from collections import deque
from collections.abc import Collection, Sequence

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]


def _parse(text: str) -> list[list[str]]:
    grid = [list(line) for line in text.splitlines()]
    if not grid or not grid[0]:
        raise ValueError("the height map is empty")
    return grid


def _all_positions(grid: Grid):
    """Yield positions column by column."""
    for x in range(len(grid[0])):
        for y in range(len(grid)):
            yield x, y


def _find(grid: Grid, char: str) -> Position:
    for x, y in _all_positions(grid):
        if grid[y][x] == char:
            return x, y
    raise ValueError(f"no {char!r} on the map")


def is_valid_direction(grid: Grid, source: Position, target: Position) -> bool:
    """Return whether one can climb from source to target (at most one step up)."""
    from_char = grid[source[1]][source[0]]
    to_char = grid[target[1]][target[0]]
    if from_char == "S":
        from_char = "a"
    if to_char == "E":
        to_char = "z"
    return ord(from_char) >= ord(to_char) - 1


def get_unvisited_neighbors(
    grid: Grid, position: Position, visited: Collection[Position]
) -> list[Position]:
    """Return reachable neighbours not yet visited, in the order left, right, up, down."""
    x, y = position
    candidates = []
    if x > 0:
        candidates.append((x - 1, y))
    if x < len(grid[0]) - 1:
        candidates.append((x + 1, y))
    if y > 0:
        candidates.append((x, y - 1))
    if y < len(grid) - 1:
        candidates.append((x, y + 1))
    return [
        candidate
        for candidate in candidates
        if is_valid_direction(grid, position, candidate) and candidate not in visited
    ]


def _shortest_path(grid: Grid, start: Position, end: Position) -> int:
    """Return the number of steps from start to end, or 0 when end is unreachable."""
    visited = {start}
    queue = deque([(start, 0)])
    while queue:
        position, steps = queue.popleft()
        for neighbor in get_unvisited_neighbors(grid, position, visited):
            queue.append((neighbor, steps + 1))
            visited.add(neighbor)
            if neighbor == end:
                return steps + 1
    return 0


def part_one(text: str) -> int:
    """Return the fewest steps from S to E."""
    grid = _parse(text)
    return _shortest_path(grid, _find(grid, "S"), _find(grid, "E"))


def part_two(text: str) -> int:
    """Return the fewest steps to E from any square of lowest elevation."""
    grid = _parse(text)
    end = _find(grid, "E")
    starts = [(x, y) for x, y in _all_positions(grid) if grid[y][x] in ("a", "S")]
    lengths = [length for length in (_shortest_path(grid, s, end) for s in starts) if length]
    if not lengths:
        raise ValueError("E cannot be reached from any lowest square")
    return min(lengths)