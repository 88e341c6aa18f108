"""
Day 3: Rucksack Reorganization
"""

from typing import Any, List, Optional, Sequence, Tuple

from aoc2022.puzzle_input import PuzzleInput

TITLE = "Rucksack Reorganization"

GROUP_SIZE = 3


def item_priority(item: Optional[str]) -> int:
    """a-z -> 1-26, A-Z -> 27-52, anything else (or no item) -> 0."""
    if item is None:
        return 0
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    return 0


class Rucksack:
    def __init__(self, items: str):
        self.items = items

    def __repr__(self) -> str:
        return f"Rucksack({self.items!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Rucksack) and self.items == other.items

    def compartments(self) -> Tuple[str, str]:
        half = len(self.items) // 2
        return self.items[:half], self.items[half:]

    def common_item(self) -> Optional[str]:
        """First item of the first compartment also found in the second."""
        first, second = self.compartments()
        return next((item for item in first if item in second), None)

    def common_item_priority(self) -> int:
        return item_priority(self.common_item())


def find_badge_item(rucksacks: Sequence[Rucksack]) -> Optional[str]:
    """First item of the first rucksack carried by every rucksack in the group."""
    first, rest = rucksacks[0], rucksacks[1:]
    return next(
        (item for item in first.items if all(item in r.items for r in rest)),
        None,
    )


def find_badge_item_priority(rucksacks: Sequence[Rucksack]) -> int:
    return item_priority(find_badge_item(rucksacks))


def groups(rucksacks: Sequence[Rucksack], size: int = GROUP_SIZE) -> List[Sequence[Rucksack]]:
    return [rucksacks[i:i + size] for i in range(0, len(rucksacks), size)]


def parse(puzzle_input: PuzzleInput) -> List[Rucksack]:
    return list(puzzle_input.parsed_lines(Rucksack))


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    rucksacks = parse(puzzle_input)
    return [
        ("Sum of common item priorities", sum(r.common_item_priority() for r in rucksacks)),
        ("Sum of badge item priorities", sum(find_badge_item_priority(g) for g in groups(rucksacks))),
    ]
