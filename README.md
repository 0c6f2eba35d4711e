# aoc2024

Solutions to the 2024 season of daily programming puzzles, one module per
day, built on a few small helpers for reading input files and working with
2D grids. It uses only the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a day

Every solved day has its own command. Each takes the path of an input file
as an optional argument; without one it reads `input/inputNN.txt` relative
to the current directory (for example `input/input06.txt` for day 6). It
prints the answers to both parts.

```
aoc2024-day01
aoc2024-day06 my-input.txt
aoc2024-day17
```

Commands exist for days 1 to 21, 23 and 25.

A few commands behave differently from the rest:

- `aoc2024-day14` prints the answer to part 1, then prints 200 frames of
  the robots' positions (seconds 6901 to 7100) to be searched by eye for the
  picture, and finally a hint line instead of a number.
- `aoc2024-day17` prints `0` for part 2 when no value for register A is found.
- `aoc2024-day25` prints only a closing message for part 2.

## Using the modules

Each day module exposes `part1` and, except day 25, `part2`, taking the path
of an input file, so any file can be solved from Python:

```python
from aoc2024 import day01, day07

print(day01.part1("input/input01.txt"))
print(day07.part2("input/input07.txt"))
```

A few days take extra parameters that the puzzle fixes:

```python
from aoc2024 import day14, day15, day18, day20

day14.part1("input/input14.txt", day14.Torus(101, 103))
day15.part2("input/input15.txt", debug=True)  # prints the warehouse after each move
day18.part1("input/input18.txt", (71, 71), 1024)
day18.part2("input/input18.txt", (71, 71))    # coordinates of the blocking byte
day20.part2("input/input20.txt", 100)
```

Most modules also expose the pieces the parts are built from, for example
`day07.equation_possible`, `day09.blocks_from_string` and `day09.checksum`,
`day17.Computer`, `day19.PatternTrie`, `day21.numeric_keypad` and
`day21.directional_keypad`, or `day23.ComputerGraph`.

```python
from aoc2024.day17 import Computer

computer = Computer.from_program("5,0,5,1,5,4")
computer.a = 10
print(computer.run())  # 0,1,2
```

The building blocks are usable on their own too:

- `aoc2024.file_io`: `lines_from_file`, `two_columns_from_file`,
  `rows_from_file`
- `aoc2024.geometry`: `Vec2D`, `Position`, `Direction`, `Bounds`
- `aoc2024.grid`: `Grid`, with indexing by position, `find`,
  `contiguous_region`, `map` and `pretty`

```python
from aoc2024.grid import Grid

grid = Grid.from_lines(["AAB", "ABB"], str)
print(grid.find("B"))
```

## What is not included

There are no modules or commands for days 22 and 24. Puzzle inputs are not
shipped with the package; every command and `part` function needs an input
file supplied by you.