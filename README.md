# aoc24

Solutions to Advent of Code 2024 puzzles, together with a small command-line
tool for fetching puzzle inputs, running solutions, timing them and keeping a
benchmark table in your `README.md` up to date.

Solved days: 1 to 12, 14, 17, 18, 19 and 21. Day 14 part two has no computed
answer and returns `None`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Directory layout

The tool works relative to the current directory:

| Path                      | Contents                                  |
| ------------------------- | ----------------------------------------- |
| `data/inputs/NN.txt`      | your puzzle input for day `NN`            |
| `data/examples/NN.txt`    | the example input from the puzzle text    |
| `data/examples/NN-P.txt`  | additional examples, numbered `P`         |
| `data/puzzles/NN.md`      | the puzzle description                    |
| `data/timings.json`       | stored benchmark results                  |

Day numbers are always written with two digits (`01` to `25`).

## Command line

```
aoc24 download 5          # fetch input and puzzle text for day 5
aoc24 read 5              # show the puzzle description for day 5
aoc24 solve 5             # run both parts of day 5 on data/inputs/05.txt
aoc24 solve 5 --release   # run the solution in an interpreter started with -O
aoc24 solve 5 --dhat      # run with tracemalloc and report peak traced memory
aoc24 solve 5 --submit 1  # run day 5 and submit the answer to part 1
aoc24 all                 # run every day that has a solution module
aoc24 all --release       # the same, each under -O
aoc24 time                # benchmark days that have no complete timings yet
aoc24 time --all          # benchmark every day
aoc24 time 5 --store      # benchmark day 5 and store the results
```

Each day runs in a child interpreter as `python -m aoc24.run_multi NN`; that
module can also be started directly, with `--time` to benchmark the parts and
`--submit PART` to submit one of them. Days without a solution module are
reported as "Not solved.".

`download`, `read` and `--submit` call the external `aoc` command-line client,
which must be installed and logged in. Set the `AOC_YEAR` environment
variable to pass a year other than the client's default.

`time --store` merges the new results into `data/timings.json` and rewrites the
benchmark table in `README.md`. The table is placed between two marker lines:

```
<!--- benchmarking table --->
<!--- benchmarking table --->
```

Put that pair once in your `README.md`; everything from the first marker to
the last is replaced on each run. More than two markers is an error.

## Using the solutions from Python

Every solved day lives in `aoc24.solutions` as `dayNN` and provides
`part_one(text)` and `part_two(text)`, plus `main(argv=None)` which runs both
parts on that day's input:

```python
from aoc24.day import Day
from aoc24.files import read_file
from aoc24.solutions import day01

text = read_file("examples", Day(1))
print(day01.part_one(text), day01.part_two(text))
```

`Day(n)` and `Day.parse("05")` raise `DayParseError` outside 1 to 25;
`all_days()` yields every day in order.

### Grid helper

`aoc24.grid.Grid` is a small two-dimensional tile map. It parses ASCII maps,
checks bounds, finds tiles and renders itself back to text:

```python
from aoc24.grid import Grid

grid = Grid.parse_ascii("#.\n.#", str, lambda: ".")
print(grid.height, grid.is_in_bounds(1, 1), grid[(0, 0)])
print(grid.find_tile_pos(lambda tile: tile == "."))
print(grid.render(str))
```

A grid made with `Grid.with_unknown_height(width, default_factory)` grows as
tiles are written to it.

## What it does not do

There is no command to start a new day: creating a solution module, its
empty input and example files is left to you, and a new module under
`aoc24/solutions` must also be added to the list in `aoc24/run_multi.py` to
be run by the commands. There is no command that picks the current date's
puzzle either.