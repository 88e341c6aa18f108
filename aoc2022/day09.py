"""
Day 9: Rope Bridge

Simulate a rope of N knots on the integer plane. The head follows the
motions one step at a time; every other knot follows the knot ahead of it.
The answer is the number of distinct positions the tail visits.

Knots are stored as an (N, 2) int array of (x, y), with R = +x and U = +y.
"""

from enum import Enum
from typing import Any, List, NamedTuple, Sequence, Set, Tuple

import numpy as np

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "Rope Bridge"


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"
    DOWN = "D"
    UP = "U"

    @property
    def delta(self) -> np.ndarray:
        return np.array(_DELTAS[self], dtype=np.int64)


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.UP: (0, 1),
}


class Motion(NamedTuple):
    direction: Direction
    distance: int

    @classmethod
    def parse(cls, line: str) -> "Motion":
        parts = line.split()
        if len(parts) != 2:
            raise ParseError(f"expected '<direction> <distance>', got {line!r}")
        try:
            direction = Direction(parts[0])
        except ValueError:
            raise ParseError(f"unknown direction: {parts[0]!r}") from None
        distance = int(parts[1])
        if distance < 0:
            raise ParseError(f"negative distance: {distance}")
        return cls(direction, distance)


class Rope:
    def __init__(self, num_knots: int):
        if num_knots < 1:
            raise ValueError(f"a rope needs at least one knot, got {num_knots}")
        self.knots = np.zeros((num_knots, 2), dtype=np.int64)
        self.visited: Set[Tuple[int, int]] = set()

    @classmethod
    def from_motions(cls, num_knots: int, motions: Sequence[Motion]) -> "Rope":
        rope = cls(num_knots)
        rope.apply(motions)
        return rope

    @property
    def tail(self) -> Tuple[int, int]:
        x, y = self.knots[-1]
        return int(x), int(y)

    def step(self, delta: np.ndarray) -> None:
        """Move the head by one unit and let every following knot catch up."""
        self.knots[0] += delta
        for k in range(1, len(self.knots)):
            gap = self.knots[k - 1] - self.knots[k]
            # Touching (including diagonally) means no movement
            if np.max(np.abs(gap)) <= 1:
                break
            self.knots[k] += np.sign(gap)
        self.visited.add(self.tail)

    def apply(self, motions: Sequence[Motion]) -> None:
        for motion in motions:
            delta = motion.direction.delta
            for _ in range(motion.distance):
                self.step(delta)


def parse(puzzle_input: PuzzleInput) -> List[Motion]:
    return list(puzzle_input.parsed_lines(Motion.parse))


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    motions = parse(puzzle_input)
    return [
        ("Positions visited (2 knots)", len(Rope.from_motions(2, motions).visited)),
        ("Positions visited (10 knots)", len(Rope.from_motions(10, motions).visited)),
    ]
