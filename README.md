# advent2024

Solvers for several of the 2024 Advent of Code puzzles. They can be run from
the command line or used as a small Python library. There are no
dependencies beyond the standard library.

| Day | Puzzle             | Module             | Command            |
|-----|--------------------|--------------------|--------------------|
| 1   | Historian Hysteria | `advent2024.day01` | `advent2024-day01` |
| 2   | Red-Nosed Reports  | `advent2024.day02` | `advent2024-day02` |
| 3   | Mull It Over       | `advent2024.day03` | `advent2024-day03` |
| 4   | Ceres Search       | `advent2024.day04` | `advent2024-day04` |
| 6   | Guard Gallivant    | `advent2024.day06` | `advent2024-day06` |
| 11  | Plutonian Pebbles  | `advent2024.day11` | `advent2024-day11` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Every command reads a puzzle input file, given as an optional positional
argument (default `input.txt` in the current directory). It prints
`Count: <answer>` and the time taken in microseconds. If the file cannot be
read or parsed, the command prints the error to standard error and exits with
status 1.

```
advent2024-day01 [FILE] [--part {1,2}]
advent2024-day02 [FILE] [--part {1,2}]
advent2024-day03 [FILE] [--part {1,2}]
advent2024-day04 [FILE]
advent2024-day06 [FILE] [--part {1,2}]
advent2024-day11 [FILE] [--blinks N]
```

- `day01`: part 1 gives the total distance between the sorted lists. Part 2
  gives the similarity score.
- `day02`: part 1 counts safe reports. Part 2 also counts a report as safe
  when removing one level makes it safe.
- `day03`: part 1 adds up every `mul(X,Y)` line by line. Part 2 joins the
  lines first and drops each span from `don't()` up to the next `do()`. The
  command prints each product as it goes.
- `day04`: prints the grid in colour, with the X of every XMAS in red, and
  then the count of XMAS in all eight directions.
- `day06`: part 1 prints the coloured map of the patrol and counts the cells
  the guard visits. Part 2 counts the cells where a single new obstruction
  traps the guard in a loop.
- `day11`: prints the stone count after each blink. For the first nine blinks
  it also prints the stones. The default is 75 blinks.

## Library use

```python
from advent2024 import day01, day02, day03, day11

left, right = day01.parse_lists("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
day01.total_distance(left, right)    # 11
day01.similarity_score(left, right)  # 31

reports = day02.parse_reports("7 6 4 2 1\n1 3 2 4 5\n")
day02.count_safe(reports)                  # 1
day02.count_safe(reports, dampener=True)   # 2

day03.sum_products("xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))")  # 161

day11.count_after(day11.parse_stones("125 17"), 25)  # 55312
```

Other entry points:

- `advent2024.day02`: `is_safe`, `is_safe_dampened`
- `advent2024.day03`: `find_products`, `strip_disabled`
- `advent2024.day04`: `parse_grid`, `count_xmas`, `xmas_starts`
- `advent2024.day06`: `Direction` (with `turn_right`) and `Lab` (with
  `Lab.parse`, `patrol`, `loops_with`, `render`), plus `count_loop_positions`.
  `Lab.patrol` raises `PatrolLoopError` if the guard never leaves the map.
- `advent2024.day11`: `transform`, `blink`

## What it does not do

- Only the days listed above are covered. Day 4 and day 11 have a single
  answer each: the XMAS count, and the stone count after a chosen number of
  blinks.
- The package does not fetch puzzle inputs or submit answers. Supply your
  own input file.