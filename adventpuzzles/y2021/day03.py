"""Binary diagnostic report."""

from collections import Counter
from collections.abc import Callable, Sequence


def _lines(text: str) -> list[str]:
    return text.splitlines()


def _bit_counts(bits: Sequence[str]) -> tuple[int, int]:
    """Return how many zeros and how many ones the column holds."""
    counts = Counter(bits)
    return counts["0"], counts["1"]


def _most_common_bit(bits: Sequence[str]) -> str:
    zeros, ones = _bit_counts(bits)
    if ones >= zeros:
        return "1"
    return "0"


def _least_common_bit(bits: Sequence[str]) -> str:
    zeros, ones = _bit_counts(bits)
    if ones >= zeros:
        return "0"
    return "1"


def _gamma_rate(lines: list[str]) -> int:
    return int("".join(_most_common_bit(column) for column in zip(*lines)), 2)


def _epsilon_rate(gamma: int) -> int:
    """Invert every bit of gamma up to its highest set bit."""
    mask = (1 << gamma.bit_length()) - 1
    return gamma ^ mask


def _filter_by_bit_criteria(lines: list[str], criterion: Callable[[Sequence[str]], str]) -> int:
    if not lines:
        raise ValueError("the report is empty")
    remaining = lines
    for position in range(len(lines[0])):
        wanted = criterion([line[position] for line in remaining])
        remaining = [line for line in remaining if line[position] == wanted]
        if len(remaining) == 1:
            break
    if not remaining:
        raise ValueError("no line matches the bit criteria")
    return int(remaining[0], 2)


def part_one(text: str) -> int:
    """Return the power consumption: gamma rate times epsilon rate."""
    gamma = _gamma_rate(_lines(text))
    return gamma * _epsilon_rate(gamma)


def part_two(text: str) -> int:
    """Return the life support rating: oxygen rating times CO2 rating."""
    lines = _lines(text)
    oxygen = _filter_by_bit_criteria(lines, _most_common_bit)
    co2 = _filter_by_bit_criteria(lines, _least_common_bit)
    return oxygen * co2