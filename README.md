# aoc2019

Solutions to days one to four of the 2019 Advent of Code puzzles. You can use
them as a library. There is also a small command for day four.

| Module              | Puzzle                                         |
|---------------------|------------------------------------------------|
| `aoc2019.fuel`      | Day 1: fuel for module masses                  |
| `aoc2019.intcode`   | Day 2: a small Intcode machine                 |
| `aoc2019.wires`     | Day 3: crossed wires on a grid                 |
| `aoc2019.password`  | Day 4: counting passwords in a range           |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
aoc2019 [--start N] [--stop N]
```

This solves the second part of day four. It takes every number in the
half-open range `[start, stop)` and keeps those whose digits never decrease
and that hold a run of exactly two equal digits. It prints each matching
number on its own line, then prints `Result: <count>`.

The range defaults to `109165` to `576723`. If `solve_day4b` raises an error,
for example on a negative number, the command prints `Err: <message>` to
standard error.

## Library

### Day 1: fuel for each module mass

```python
from aoc2019.fuel import simple_fuel, total_fuel, parse_masses, solve_day1a, solve_day1b

simple_fuel(1969)          # mass // 3 - 2
total_fuel(1969)           # also counts the fuel needed to carry the fuel
solve_day1a("data/input_day1a.txt")
solve_day1b("data/input_day1a.txt")
```

- `simple_fuel` raises `ValueError` for masses too small to need fuel, and for negative masses.
- `total_fuel` returns 0 for such masses.
- `parse_masses` yields the integers from an iterable of lines and skips every line that is not an unsigned integer.
- Both `solve_*` functions read `data/input_day1a.txt` relative to the working directory when no path is given.

### Day 2: an Intcode machine with add (1), multiply (2) and halt (99)

```python
from aoc2019.intcode import parse_program, run, find_noun_verb, solve_day2a

with open("data/input_day2a.txt") as handle:
    program = parse_program(handle.read())
memory = run(program, 12, 2)        # a copy of the memory after halting
find_noun_verb(program, 19690720)   # 100 * noun + verb
solve_day2a("data/input_day2a.txt")
```

- `parse_program` raises `ValueError` on any field that is not an unsigned integer.
- `IntcodeError` is raised for:
  - unknown opcodes;
  - truncated instructions;
  - addresses outside memory;
  - programs too short to hold a noun and a verb;
  - a search in which no noun and verb in `0..99` give the target.
- `Operation.parse` and `Operation.execute`, with the `OpKind` enum, decode and apply single instructions.

### Day 3: two wires, each a comma-separated list of moves such as `R8,U5,L5,D3`

```python
from aoc2019.wires import parse_wire, closest_intersection_distance, fewest_combined_steps

wire_a = parse_wire("R8,U5,L5,D3")
wire_b = parse_wire("U7,R6,D4,L4")
closest_intersection_distance(wire_a, wire_b)
fewest_combined_steps(wire_a, wire_b)
```

- Both functions ignore crossings at the origin. They return 0 when the wires do not cross.
- `intersections` yields the crossing points.
- `steps_to_point` gives the steps along a wire to a point, or `None` if the wire never reaches it.
- `Segment`, `Point` and `Direction` are the building blocks.
- `split_wires(text)` splits input into its two lines and raises `ValueError` if there is only one.
- `solve_day3a(path)` and `solve_day3b(path)` read both wires from a file. By default, `solve_day3a` reads `data/input_day3a_simple.txt` and `solve_day3b` reads `data/input_day3a.txt`.

### Day 4: passwords in a half-open range `[start, stop)`

```python
from aoc2019.password import is_valid, is_valid_strict, matching_passwords, solve_day4a, solve_day4b

is_valid(111111)           # True
is_valid_strict(111122)    # True
list(matching_passwords(111110, 111125, is_valid_strict))
solve_day4a(109165, 576723)
solve_day4b(109165, 576723)
```

- The two `solve_*` functions print every matching number and return the count.
- Negative numbers raise `ValueError`.

## What it does not do

- The `aoc2019` command only runs day four, part two. Days one to three, and day four part one, are available only through the library functions.
- No puzzle inputs are included. The file-reading functions expect you to supply the files.