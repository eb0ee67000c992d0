# advent24

Solvers for the twenty-five puzzles of a December 2024 programming advent
calendar. Every day has its own module, `advent24.day01` through
`advent24.day25`, which takes the puzzle input as plain text. The package
uses only the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## From the command line

The `advent24` command takes a day, a part (1 or 2) and the path of an input
file, and prints the answer:

```
advent24 1 2 input.txt
advent24 --help
```

When the input cannot be solved (for instance a maze without a start, or a
falling-byte list that never blocks the exit) the command prints the reason
to standard error and exits with status 1.

Day 14 part 2 does not print a single answer: it prints the robot map after
each of 10,000 seconds, followed by a blank line and the zero-based step
index, so that the picture can be found by eye. Day 25 has no part 2.

The command uses the puzzle's real-input settings: a 101 by 103 floor on
day 14, a 71 by 71 grid with 1024 fallen bytes on day 18, and a saving of at
least 100 picoseconds on day 20.

## From Python

Each day module has a `part1(text)` function and, except for day 25, a
`part2(text)` function. Both take the whole input as a string and return the
answer; they raise `ValueError` for input they cannot use.

```python
from pathlib import Path

from advent24 import day01, day11

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))

print(day11.count_stones([125, 17], 25))
```

Some days take extra parameters, with the real-input values as defaults, so
that the worked examples can be solved too:

- `day14.part1(text, width=101, height=103, steps=100)` gives the safety
  factor, the product of robot counts in the four quadrants.
  `day14.frames(text, width=101, height=103, steps=10_000)` yields
  `(step, picture)` pairs, one per second, with one picture line per x
  column and `#` where a robot stands.
- `day18.part1(text, size=71, count=1024)` gives the fewest steps to the exit
  once `count` bytes have fallen; `day18.part2(text, size=71, count=1024)`
  returns the `"x,y"` of the first later byte that cuts the exit off.
- `day20.part1(text, threshold=100)` and `day20.part2(text, threshold=100)`
  count cheats of up to 2 and up to 20 picoseconds that save at least
  `threshold`.

Other building blocks:

- `day11.count_stones(stones, blinks)`: number of stones after a number of
  blinks.
- `day17.run_program(registers, codes)`: runs a three-bit computer program
  from registers `(A, B, C)` and returns its output values as a list.
  `day17.part1` returns that output comma separated.
- `day21.complexity(codes, robots)`: total complexity of door codes with the
  given number of directional-keypad robots in the chain.
- `day22.next_secret(secret)`: the next number of a buyer's secret sequence.
- `day24.Circuit`: `Circuit.parse(text)` reads wire values and gates, and
  `circuit.evaluate(wire)` returns the bit a wire settles on, raising
  `ValueError` for an unknown wire or a loop.

## Limits

- `day17.part2` does not search for register A by running an arbitrary
  program: it assumes the program has the structure of the puzzle input it
  was written for, and only takes the program's codes from the text.
- `day24.part2` finds the misplaced wires by checking each gate against the
  shape of a ripple-carry adder; it does not try swaps and simulate them.
- `day14.frames` leaves spotting the picture to the reader; no part computes
  the step at which it appears.