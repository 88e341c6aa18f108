"""
Day 8: Treetop Tree House

Height map of trees (digits 0-9). Coordinates are (x, y) with x the column
and y the row; the array is indexed heights[y, x].

Visibility is vectorized: a tree is visible from one side iff it is taller
than the running maximum of all trees before it on that side.
"""

import logging
from typing import Any, List, Tuple

import numpy as np

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "Treetop Tree House"


def _visible_from_left(heights: np.ndarray) -> np.ndarray:
    """Boolean mask of trees visible looking in from the left edge."""
    running_max = np.maximum.accumulate(heights, axis=1)
    # Max of everything strictly left of each tree; -1 at the edge
    before = np.full_like(heights, -1)
    before[:, 1:] = running_max[:, :-1]
    return heights > before


def visibility_mask(heights: np.ndarray) -> np.ndarray:
    """
    Boolean mask of trees visible from outside the grid.

    Args:
        heights: Height grid (H, W)

    Returns:
        Mask (H, W), True where the tree is visible from at least one edge
    """
    heights = np.asarray(heights, dtype=np.int8)
    left = _visible_from_left(heights)
    right = np.fliplr(_visible_from_left(np.fliplr(heights)))
    top = _visible_from_left(heights.T).T
    bottom = np.flipud(_visible_from_left(np.flipud(heights).T).T)
    return left | right | top | bottom


def viewing_distance(line_of_sight: np.ndarray, height: int) -> int:
    """
    Number of trees seen along a line of sight, nearest first.

    The view stops at (and includes) the first tree at least as tall, or
    at the edge.
    """
    blocking = np.flatnonzero(line_of_sight >= height)
    if blocking.size:
        return int(blocking[0]) + 1
    return int(line_of_sight.size)


class Grid:
    def __init__(self, heights: np.ndarray):
        self.heights = np.asarray(heights, dtype=np.int8)

    def __eq__(self, other) -> bool:
        return isinstance(other, Grid) and np.array_equal(self.heights, other.heights)

    @classmethod
    def from_lines(cls, lines: List[str]) -> "Grid":
        """
        Build the grid from rows of digits.

        Raises:
            ParseError: Empty input, a non-digit character or ragged rows
        """
        rows = []
        for y, line in enumerate(lines, 1):
            line = line.strip()
            if not line.isdigit() or not line.isascii():
                raise ParseError(f"expected a row of digits, got {line!r}", y)
            if rows and len(line) != len(rows[0]):
                raise ParseError(f"row length {len(line)} differs from {len(rows[0])}", y)
            rows.append([int(ch) for ch in line])
        if not rows:
            raise ParseError("empty height map")
        return cls(np.array(rows, dtype=np.int8))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.heights.shape

    def is_visible(self, x: int, y: int) -> bool:
        return bool(visibility_mask(self.heights)[y, x])

    def count_visible(self) -> int:
        return int(np.count_nonzero(visibility_mask(self.heights)))

    def scenic_score(self, x: int, y: int) -> int:
        """Product of the viewing distances left, right, up and down."""
        h = self.heights
        height = h[y, x]
        left = viewing_distance(h[y, :x][::-1], height)
        right = viewing_distance(h[y, x + 1:], height)
        up = viewing_distance(h[:y, x][::-1], height)
        down = viewing_distance(h[y + 1:, x], height)
        return left * right * up * down

    def find_best_scenic_score(self) -> int:
        H, W = self.shape
        return max(self.scenic_score(x, y) for y in range(H) for x in range(W))


def parse(puzzle_input: PuzzleInput) -> Grid:
    grid = Grid.from_lines(list(puzzle_input.lines()))
    logging.debug(f"Parsed height map of shape {grid.shape}")
    return grid


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    grid = parse(puzzle_input)
    return [
        ("Number of visible trees", grid.count_visible()),
        ("Best scenic score", grid.find_best_scenic_score()),
    ]
