# adventpuzzles

Solutions to a series of daily programming puzzles from the years 2021, 2022,
2023 and 2024. Each day has two parts. Each part takes the whole puzzle input
as a string and returns the answer.

## Installation

```
pip install .
```

## Use

Every day lives in its own module, `adventpuzzles.y<year>.day<NN>`. Each
module has the functions `part_one(text)` and `part_two(text)`:

```python
from adventpuzzles.y2022 import day06

print(day06.part_one("mjqjpqmgbljsphdztnvjfqwrcgsmlb"))  # 7
```

Most answers are integers. There are two exceptions:

- `adventpuzzles.y2022.day05` returns the top crates as a string.
- `adventpuzzles.y2022.day10.part_two` returns the rendered screen as six lines of `#` and `.`.

A malformed input raises `ValueError`.

The days in the package are:

| Year | Modules |
|------|---------|
| 2021 | `day01` to `day11` |
| 2022 | `day01` to `day06`, `day08`, `day09`, `day10`, `day12` |
| 2023 | `day01` to `day05`, `day07`, `day09`, `day10`, `day11`, `day13` |
| 2024 | `day02` to `day06`, `day08` |

Some modules also make their building blocks public, for example:

- `y2021.day06.run_fish_simulation(text, iterations)`
- `y2023.day09.extrapolate(line)`
- `y2023.day11.sum_distances(text, multiplier)`
- `y2023.day13.find_reflection(pattern, ignore)`
- `y2024.day08.find_antinodes(a, b)`

## What the package does not do

The package has no command-line program. It does not read puzzle input files.
Load the input yourself and pass its text to the functions above. The package
has no way to pick a day by year and number; import the day's module directly.

## Running the tests

```
pip install .[test]
pytest
```