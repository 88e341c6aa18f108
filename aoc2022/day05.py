"""
Day 5: Supply Stacks

Input is two blocks: an ASCII drawing of crate stacks (bottom row of labels
included) and a list of crane steps "move N from A to B".

Drawing cells are 4 characters wide ("[X] "); a row is read bottom-up so
each stack is a list with its top crate last.
"""

import copy
import logging
from typing import Any, List, NamedTuple, Sequence, Tuple

from aoc2022.puzzle_input import ParseError, PuzzleInput, convert_line

TITLE = "Supply Stacks"

CELL_WIDTH = 4


class Step(NamedTuple):
    count: int
    source: int   # 1-based stack number
    target: int   # 1-based stack number

    @classmethod
    def parse(cls, line: str) -> "Step":
        words = line.split()
        if len(words) != 6 or words[0::2] != ["move", "from", "to"]:
            raise ParseError(f"expected 'move N from A to B', got {line!r}")
        step = cls(int(words[1]), int(words[3]), int(words[5]))
        if step.count < 0:
            raise ParseError(f"negative crate count in {line!r}")
        if step.source < 1 or step.target < 1:
            raise ParseError(f"stack numbers start at 1, got {line!r}")
        return step


class Supply:
    """Crate stacks; stacks[i] holds stack i+1, bottom crate first."""

    def __init__(self, stacks: List[List[str]]):
        self.stacks = stacks

    def __repr__(self) -> str:
        return f"Supply({self.stacks!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Supply) and self.stacks == other.stacks

    @classmethod
    def from_drawing(cls, drawing: Sequence[str]) -> "Supply":
        """
        Build stacks from the drawing block.

        Args:
            drawing: Drawing rows, top row first, label row ("1   2   3") last

        Returns:
            Supply with one stack per drawing column

        Raises:
            ParseError: A cell is neither blank nor "[X]"
        """
        stacks: List[List[str]] = []
        for row in reversed(drawing[:-1]):
            for i in range(0, len(row), CELL_WIDTH):
                index = i // CELL_WIDTH
                cell = row[i:i + CELL_WIDTH - 1]
                while len(stacks) <= index:
                    stacks.append([])
                if len(cell) == 3 and cell[0] == "[" and cell[2] == "]":
                    stacks[index].append(cell[1])
                elif cell.strip():
                    raise ParseError(f"invalid crate cell {cell!r} in row {row!r}")
        return cls(stacks)

    def copy(self) -> "Supply":
        return copy.deepcopy(self)

    def top_items(self) -> str:
        return "".join(stack[-1] for stack in self.stacks if stack)

    def _check_step(self, step: Step) -> None:
        """
        Reject a step the current stacks cannot carry out.

        Raises:
            ParseError: Unknown stack number or too few crates on the source
        """
        for number in (step.source, step.target):
            if not 1 <= number <= len(self.stacks):
                raise ParseError(f"{step}: no stack {number} (have {len(self.stacks)})")
        available = len(self.stacks[step.source - 1])
        if step.count > available:
            raise ParseError(f"{step}: stack {step.source} holds only {available} crates")

    def apply_steps_single(self, steps: Sequence[Step]) -> None:
        """CrateMover 9000: crates move one at a time (order reverses)."""
        for step in steps:
            self._check_step(step)
            for _ in range(step.count):
                item = self.stacks[step.source - 1].pop()
                self.stacks[step.target - 1].append(item)

    def apply_steps_multi(self, steps: Sequence[Step]) -> None:
        """CrateMover 9001: crates move together (order preserved)."""
        for step in steps:
            self._check_step(step)
            source = self.stacks[step.source - 1]
            split = len(source) - step.count
            self.stacks[step.target - 1].extend(source[split:])
            del source[split:]


def parse(puzzle_input: PuzzleInput) -> Tuple[Supply, List[Step]]:
    blocks = puzzle_input.numbered_blocks()
    try:
        drawing = next(blocks, None)
        moves = next(blocks, None)
        extra = next(blocks, None)
    finally:
        blocks.close()
    if drawing is None:
        raise ParseError("missing stack drawing")
    if moves is None:
        raise ParseError("missing crane steps")
    if extra is not None:
        raise ParseError("unexpected text after crane steps", extra[0][0], block_number=3)
    supply = Supply.from_drawing([line for _, line in drawing])
    steps = [convert_line(Step.parse, line, n, block_number=2) for n, line in moves]
    logging.debug(f"Parsed {len(supply.stacks)} stacks, {len(steps)} steps")
    return supply, steps


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    supply, steps = parse(puzzle_input)

    single = supply.copy()
    single.apply_steps_single(steps)

    multi = supply.copy()
    multi.apply_steps_multi(steps)

    return [
        ("Top items (single crate steps)", single.top_items()),
        ("Top items (multi crate steps)", multi.top_items()),
    ]
