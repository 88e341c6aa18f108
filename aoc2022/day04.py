"""
Day 4: Camp Cleanup

Each line is a pair of inclusive section ranges, e.g. "2-4,6-8".
"""

from typing import Any, List, NamedTuple, Tuple

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "Camp Cleanup"


class SectionRange(NamedTuple):
    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> "SectionRange":
        bounds = text.split("-")
        if len(bounds) != 2:
            raise ParseError(f"expected '<start>-<end>', got {text!r}")
        return cls(int(bounds[0]), int(bounds[1]))

    def __contains__(self, section: int) -> bool:
        return self.start <= section <= self.end

    def covers(self, other: "SectionRange") -> bool:
        return other.start in self and other.end in self


class Pair(NamedTuple):
    first: SectionRange
    second: SectionRange

    @classmethod
    def parse(cls, line: str) -> "Pair":
        ranges = line.split(",")
        if len(ranges) != 2:
            raise ParseError(f"expected two comma-separated ranges, got {line!r}")
        return cls(SectionRange.parse(ranges[0]), SectionRange.parse(ranges[1]))

    def fully_contained(self) -> bool:
        return self.first.covers(self.second) or self.second.covers(self.first)

    def overlap(self) -> bool:
        return self.first.start <= self.second.end and self.second.start <= self.first.end


def parse(puzzle_input: PuzzleInput) -> List[Pair]:
    return list(puzzle_input.parsed_lines(Pair.parse))


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    pairs = parse(puzzle_input)
    return [
        ("Number of fully contained pairs", sum(1 for p in pairs if p.fully_contained())),
        ("Number of overlapping pairs", sum(1 for p in pairs if p.overlap())),
    ]
