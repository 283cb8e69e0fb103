"""Giant squid bingo."""

from dataclasses import dataclass

BOARD_SIZE = 5

_WIN_LINES = tuple(
    frozenset(range(row * BOARD_SIZE, (row + 1) * BOARD_SIZE)) for row in range(BOARD_SIZE)
) + tuple(
    frozenset(range(column, BOARD_SIZE * BOARD_SIZE, BOARD_SIZE)) for column in range(BOARD_SIZE)
)


@dataclass(frozen=True)
class _BingoResult:
    score: int
    board_index: int


def _load(text: str) -> tuple[list[str], list[list[str]]]:
    first, *rest = text.split("\n\n")
    return first.split(","), [part.split() for part in rest]


def _has_won(marked: set[int]) -> bool:
    return any(line <= marked for line in _WIN_LINES)


def _sum_of_unmarked(board: list[str], marked: set[int]) -> int:
    total = 0
    for position, value in enumerate(board):
        if position in marked:
            continue
        try:
            total += int(value)
        except ValueError:
            continue
    return total


def _play(numbers: list[str], boards: list[list[str]]) -> _BingoResult:
    marked = [set() for _ in boards]
    for number in numbers:
        for marks, board in zip(marked, boards):
            marks.update(pos for pos, value in enumerate(board) if value == number)
        for index, (marks, board) in enumerate(zip(marked, boards)):
            if _has_won(marks):
                return _BingoResult(_sum_of_unmarked(board, marks) * int(number), index)
    raise ValueError("no board wins")


def part_one(text: str) -> int:
    """Return the score of the first board to win."""
    numbers, boards = _load(text)
    return _play(numbers, boards).score


def part_two(text: str) -> int:
    """Return the score of the last board to win."""
    numbers, boards = _load(text)
    while boards:
        result = _play(numbers, boards)
        if len(boards) == 1:
            return result.score
        boards[result.board_index] = boards[-1]
        boards.pop()
    return 0