"""
Day 1: Calorie Counting

Each elf's inventory is one block of calorie counts.
"""

from typing import Any, List, Sequence, Tuple

from aoc2022.puzzle_input import PuzzleInput

TITLE = "Calorie Counting"


def parse(puzzle_input: PuzzleInput) -> List[List[int]]:
    return list(puzzle_input.parsed_blocks(int))


def max_calories(calories: Sequence[Sequence[int]]) -> int:
    """Largest calorie total carried by a single elf (0 if there are none)."""
    return max((sum(c) for c in calories), default=0)


def top_calories(calories: Sequence[Sequence[int]], n: int) -> int:
    """Sum of the n largest per-elf calorie totals."""
    totals = sorted((sum(c) for c in calories), reverse=True)
    return sum(totals[:n])


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    calories = parse(puzzle_input)
    return [
        ("Max calories", max_calories(calories)),
        ("Top 3 calories", top_calories(calories, 3)),
    ]
