"""Mull it over: summing multiplication instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")


def part_one(text: str) -> int:
    """Sum the products of all well-formed mul(a,b) instructions."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_two(text: str) -> int:
    """Sum the products of mul instructions not disabled by a preceding don't()."""
    total = 0
    position = text.find("mul")
    while position != -1:
        prefix = text[:position]
        if prefix.rfind("do()") >= prefix.rfind("don't()"):
            match = _MUL.match(text, position)
            if match:
                total += int(match.group(1)) * int(match.group(2))
        position = text.find("mul", position + 3)
    return total