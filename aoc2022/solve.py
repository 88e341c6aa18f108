"""
Puzzle Runner

Loads a day's puzzle input, runs that day's solver and prints one
"<label>: <value>" line per answer.

CLI:
  python -m aoc2022.solve --day 9
  python -m aoc2022.solve --day 9 --input path/to/day09.txt
  python -m aoc2022.solve --all --input-dir path/to/inputs
"""

import argparse
import logging
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Tuple

from aoc2022 import day01, day02, day03, day04, day05, day06, day07, day08, day09, day10
from aoc2022.puzzle_input import INPUT_DIR, ParseError, PuzzleInput

DAYS: Dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
}


def run_day(day: int, puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    """
    Parse and solve a single day.

    Args:
        day: Day number (key of DAYS)
        puzzle_input: Unconsumed input for that day

    Returns:
        List of (label, answer) in print order

    Raises:
        ParseError: Input does not match the day's grammar
        OSError: Reading the input failed
    """
    module = DAYS[day]
    logging.debug(f"Day {day:02d}: {module.TITLE}")
    with puzzle_input:
        return module.answers(puzzle_input)


def format_answers(answers: List[Tuple[str, Any]]) -> str:
    """One "<label>: <value>" line per answer; multi-line values start on a new line."""
    lines = []
    for label, value in answers:
        text = str(value)
        if "\n" in text:
            lines.append(f"{label}:\n{text}")
        else:
            lines.append(f"{label}: {text}")
    return "\n".join(lines)


def solve_day(day: int, input_path: Optional[Path] = None, input_dir: Path = INPUT_DIR) -> None:
    """Open the input, solve and print; errors are logged and end the run."""
    try:
        if input_path is not None:
            puzzle_input = PuzzleInput(open(input_path, "r", encoding="utf-8"))
        else:
            puzzle_input = PuzzleInput.day(day, input_dir)
        answers = run_day(day, puzzle_input)
    except OSError as e:
        logging.error(f"Day {day:02d}: cannot read input: {e}")
        raise SystemExit(1)
    except ParseError as e:
        logging.error(f"Day {day:02d}: parse error: {e}")
        raise SystemExit(1)

    print(format_answers(answers))


def solve_all(input_dir: Path = INPUT_DIR) -> None:
    """Solve every day whose input file exists in input_dir."""
    solved = 0
    for day in sorted(DAYS):
        if not (Path(input_dir) / f"day{day:02d}.txt").exists():
            logging.debug(f"Day {day:02d}: no input, skipped")
            continue
        print(f"======== Day {day:02d}: {DAYS[day].TITLE} ========")
        solve_day(day, input_dir=input_dir)
        solved += 1

    logging.info(f"Solved {solved}/{len(DAYS)} days from {input_dir}")


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point with argparse."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2022 puzzle solvers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--day",
        type=int,
        choices=sorted(DAYS),
        help="Day to solve",
    )
    target.add_argument(
        "--all",
        action="store_true",
        help="Solve every day that has an input file",
    )

    parser.add_argument(
        "--input",
        type=Path,
        help="Explicit input file (default: <input-dir>/dayNN.txt)",
    )

    parser.add_argument(
        "--input-dir",
        type=Path,
        default=INPUT_DIR,
        help=f"Directory holding dayNN.txt input files (default: {INPUT_DIR})",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parse details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.all:
        if args.input is not None:
            parser.error("--input cannot be combined with --all")
        solve_all(args.input_dir)
    else:
        solve_day(args.day, input_path=args.input, input_dir=args.input_dir)


if __name__ == "__main__":
    main()
