"""Tuning trouble: locating start markers in a datastream."""

PACKET_MARKER = 4
MESSAGE_MARKER = 14


def _marker_end(text: str, length: int) -> int:
    """Return the number of characters read when a run of distinct characters ends.

    The final window of the stream is never inspected; 0 means no marker found.
    """
    if len(text) < length:
        raise ValueError(f"stream shorter than marker length {length}")
    for start in range(len(text) - length):
        if len(set(text[start : start + length])) == length:
            return start + length
    return 0


def part_one(text: str) -> int:
    """Return the position after the first start-of-packet marker."""
    return _marker_end(text, PACKET_MARKER)


def part_two(text: str) -> int:
    """Return the position after the first start-of-message marker."""
    return _marker_end(text, MESSAGE_MARKER)