"""Command line entry point that solves one day's puzzle for an input file."""

import argparse
import sys

from advent24 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)


def _print_frames(text):
    for step, picture in day14.frames(text):
        print(picture)
        print()
        print(step)


_SOLVERS = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
    5: (day05.part1, day05.part2),
    6: (day06.part1, day06.part2),
    7: (day07.part1, day07.part2),
    8: (day08.part1, day08.part2),
    9: (day09.part1, day09.part2),
    10: (day10.part1, day10.part2),
    11: (day11.part1, day11.part2),
    12: (day12.part1, day12.part2),
    13: (day13.part1, day13.part2),
    14: (day14.part1, None),
    15: (day15.part1, day15.part2),
    16: (day16.part1, day16.part2),
    17: (day17.part1, day17.part2),
    18: (day18.part1, day18.part2),
    19: (day19.part1, day19.part2),
    20: (day20.part1, day20.part2),
    21: (day21.part1, day21.part2),
    22: (day22.part1, day22.part2),
    23: (day23.part1, day23.part2),
    24: (day24.part1, day24.part2),
    25: (day25.part1, None),
}


def _parser():
    parser = argparse.ArgumentParser(
        prog="advent24", description="Solve one day's puzzle for an input file."
    )
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS), help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument("input", help="path of the puzzle input")
    return parser


def main(argv=None):
    """Parse arguments, solve the chosen puzzle and print the answer."""
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as error:
        parser.error(f"cannot read {args.input}: {error}")
    if args.day == 14 and args.part == 2:
        _print_frames(text)
        return 0
    solver = _SOLVERS[args.day][args.part - 1]
    if solver is None:
        parser.error(f"day {args.day} has no part {args.part}")
    try:
        answer = solver(text)
    except ValueError as error:
        print(f"advent24: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())