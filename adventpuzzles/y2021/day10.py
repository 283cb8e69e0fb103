"""Syntax scoring of bracket chunks."""

_CLOSING = {"[": "]", "(": ")", "{": "}", "<": ">"}
_ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


def _first_illegal(line: str) -> str | None:
    stack = []
    for char in line:
        if char in _CLOSING:
            stack.append(char)
            continue
        if not stack:
            raise ValueError(f"unexpected closing character {char!r} in {line!r}")
        if char != _CLOSING[stack.pop()]:
            return char
    return None


def _autocomplete(line: str) -> list[str]:
    stack = []
    for char in line:
        if char in _CLOSING:
            stack.append(char)
        elif stack:
            stack.pop()
    return [_CLOSING[char] for char in reversed(stack)]


def _completion_score(chars: list[str]) -> int:
    score = 0
    for char in chars:
        score = score * 5 + _COMPLETION_SCORES[char]
    return score


def part_one(text: str) -> int:
    """Return the total syntax error score of corrupted lines."""
    illegal = (_first_illegal(line) for line in text.splitlines())
    return sum(_ERROR_SCORES[char] for char in illegal if char is not None)


def part_two(text: str) -> int:
    """Return the middle completion score of the incomplete lines."""
    scores = sorted(
        _completion_score(_autocomplete(line))
        for line in text.splitlines()
        if _first_illegal(line) is None
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[len(scores) // 2]