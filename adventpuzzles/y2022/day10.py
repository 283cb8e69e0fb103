"""Cathode-ray tube signal and display."""

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6


def _x_values(text: str) -> list[int]:
    """Return the register value, one entry per cycle, starting with the initial value."""
    x = 1
    cycles = [x]
    for line in text.splitlines():
        if line == "noop":
            cycles.append(x)
            continue
        _, _, value = line.partition(" ")
        number = int(value)
        cycles.append(x)
        x += number
        cycles.append(x)
    return cycles


def part_one(text: str) -> int:
    """Return the sum of signal strengths at cycles 20, 60, ... 220."""
    cycles = _x_values(text)
    if len(cycles) < 220:
        raise ValueError("program runs for fewer than 220 cycles")
    return sum(cycles[cycle - 1] * cycle for cycle in range(20, 221, 40))


def part_two(text: str) -> str:
    """Return the rendered screen, one line of # and . per row."""
    cycles = _x_values(text)
    if len(cycles) < SCREEN_WIDTH * SCREEN_HEIGHT:
        raise ValueError("program runs for fewer cycles than the screen has pixels")
    rows = []
    for y in range(SCREEN_HEIGHT):
        pixels = []
        for x in range(SCREEN_WIDTH):
            sprite = cycles[x + y * SCREEN_WIDTH]
            pixels.append("#" if sprite - 1 <= x <= sprite + 1 else ".")
        rows.append("".join(pixels))
    return "\n".join(rows)