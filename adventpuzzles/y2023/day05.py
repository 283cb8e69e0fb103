"""Seed to location almanac."""

from dataclasses import dataclass

MAP_COUNT = 7

Interval = tuple[int, int]


@dataclass(frozen=True)
class _Mapping:
    dest: int
    src: int
    length: int

    @property
    def last(self) -> int:
        # The source range includes src + length itself.
        return self.src + self.length

    @property
    def offset(self) -> int:
        return self.dest - self.src

    def contains(self, value: int) -> bool:
        return self.src <= value <= self.last


def _create_map(chunk: str) -> list[_Mapping]:
    _, separator, body = chunk.partition(":\n")
    if not separator:
        raise ValueError(f"malformed map: {chunk!r}")
    mappings = []
    for line in body.splitlines():
        values = line.split()
        if len(values) < 3:
            raise ValueError(f"malformed mapping: {line!r}")
        dest, src, length = (int(value) for value in values[:3])
        mappings.append(_Mapping(dest, src, length))
    return mappings


def _parse(text: str) -> tuple[list[int], list[list[_Mapping]]]:
    chunks = text.split("\n\n")
    _, separator, seeds_text = chunks[0].partition(": ")
    if not separator:
        raise ValueError("missing seeds line")
    if len(chunks) < MAP_COUNT + 1:
        raise ValueError(f"expected {MAP_COUNT} maps, got {len(chunks) - 1}")
    seeds = [int(value) for value in seeds_text.split()]
    return seeds, [_create_map(chunk) for chunk in chunks[1 : MAP_COUNT + 1]]


def _location(seed: int, maps: list[list[_Mapping]]) -> int:
    value = seed
    for mappings in maps:
        for mapping in mappings:
            if mapping.contains(value):
                value += mapping.offset
                break
    return value


def _map_intervals(intervals: list[Interval], mappings: list[_Mapping]) -> list[Interval]:
    mapped: list[Interval] = []
    pending = intervals
    for mapping in mappings:
        remaining: list[Interval] = []
        for low, high in pending:
            start, end = max(low, mapping.src), min(high, mapping.last)
            if start > end:
                remaining.append((low, high))
                continue
            mapped.append((start + mapping.offset, end + mapping.offset))
            if low < start:
                remaining.append((low, start - 1))
            if end < high:
                remaining.append((end + 1, high))
        pending = remaining
    return mapped + pending


def part_one(text: str) -> int:
    """Return the lowest location number of any listed seed."""
    seeds, maps = _parse(text)
    if not seeds:
        raise ValueError("no seeds listed")
    return min(_location(seed, maps) for seed in seeds)


def part_two(text: str) -> int:
    """Return the lowest location number when seeds are given as ranges.

    Each pair is a start and a length; the range includes start + length.
    """
    seeds, maps = _parse(text)
    if len(seeds) % 2:
        raise ValueError("seed ranges must come in pairs")
    intervals = [
        (start, start + length)
        for start, length in zip(seeds[::2], seeds[1::2])
        if length >= 0
    ]
    if not intervals:
        raise ValueError("no seeds listed")
    for mappings in maps:
        intervals = _map_intervals(intervals, mappings)
    return min(low for low, _ in intervals)