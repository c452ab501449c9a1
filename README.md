# advent

Solvers for a selection of Advent of Code puzzles:

- 2023: days 19, 21, 22 and 25
- 2024: days 1 to 14

Each puzzle lives in its own module, named after the year and the day
(`advent.y2023_day19`, `advent.y2024_day01`, ...). Every module has a
`solve` function that takes the puzzle input as text and returns the
answers, next to smaller functions for the individual steps of the puzzle.
The package has no dependencies outside the standard library.

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

Installing the package provides the `advent` command:

```
advent YEAR DAY INPUT [--steps N] [--rows N] [--cols N]
```

It reads the input file, runs the solver for that year and day, and prints
one line per answer, for example:

```
$ advent 2024 1 day_01.input
2024: Day 01 part 1: ...
2024: Day 01 part 2: ...
```

For 2023 day 25 the output is the listing of the graph instead.

- `--steps` sets the number of steps walked for 2023 day 21 (default 64).
- `--rows` and `--cols` set the size of the area for 2024 day 14
  (default 103 rows by 101 columns).

A year and day without a solver is a usage error. If the input file cannot
be read, or the input is malformed, a message goes to standard error and the
command exits with status 1.

## Library use

```python
from advent.parsing import read_input
from advent import y2024_day01

text = read_input("day_01.input")
print(y2024_day01.solve(text))
```

The individual steps can be used directly as well:

```python
from advent.y2024_day01 import parse_lists, total_distance, similarity_score

left, right = parse_lists(text)
print(total_distance(left, right))
print(similarity_score(left, right))
```

Some solvers take extra parameters: `advent.y2023_day21.solve(text, steps=64)`
and `advent.y2024_day14.solve(text, rows=103, cols=101)`.

Malformed input raises `ValueError`.

`advent.parsing` holds helpers shared by the solvers: `Parser`, a
forward-only cursor over text that reads numbers (`parse_number`,
`parse_signed_number`), words (`parse_word`, `parse_until_space`), matches
literal strings (`consume`) and tracks line and file ends; `read_input`,
which reads a file verbatim; `match_keyword`; and `super_fast_hash`, a
32-bit string hash.

## What is not covered

Some puzzles are answered only in part:

- 2023 day 21: only the count of plots reachable in a fixed number of steps
  on the map as given.
- 2023 day 25: the connection graph is read and listed; no answer is
  computed from it.
- 2024 day 12: only the fence price from area times perimeter; the price by
  number of sides is not computed.
- 2024 day 14: only the safety factor after 100 seconds.

Puzzle inputs are not fetched; they must be supplied as files or text.