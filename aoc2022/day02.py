"""
Day 2: Rock Paper Scissors

Strategy guide scoring. Each round is "<opponent> <response>", where the
opponent plays A/B/C (rock/paper/scissors) and the response column X/Y/Z is
read two ways:
  - naive: X/Y/Z are the hands rock/paper/scissors
  - smart: X/Y/Z are the desired outcome lose/draw/win
"""

from enum import Enum
from typing import Any, List, NamedTuple, Tuple

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "Rock Paper Scissors"

LOSS, DRAW, WIN = 0, 3, 6


class Hand(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self) -> int:
        return self.value

    def beats(self) -> "Hand":
        """The hand this one defeats."""
        return _BEATS[self]

    def beaten_by(self) -> "Hand":
        """The hand that defeats this one."""
        return _BEATEN_BY[self]

    def score_against(self, opponent: "Hand") -> int:
        if self.beats() is opponent:
            outcome = WIN
        elif self is opponent:
            outcome = DRAW
        else:
            outcome = LOSS
        return self.score + outcome

    @classmethod
    def parse(cls, code: str) -> "Hand":
        try:
            return _OPPONENT_CODES[code]
        except KeyError:
            raise ParseError(f"unknown opponent hand: {code!r}") from None


_BEATS = {Hand.ROCK: Hand.SCISSORS, Hand.PAPER: Hand.ROCK, Hand.SCISSORS: Hand.PAPER}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}
_OPPONENT_CODES = {"A": Hand.ROCK, "B": Hand.PAPER, "C": Hand.SCISSORS}


class Strategy(Enum):
    LOSE = "X"
    DRAW = "Y"
    WIN = "Z"

    def select_naive(self) -> Hand:
        # X -> rock, Y -> paper, Z -> scissors
        return _NAIVE_HANDS[self]

    def select_smart(self, opponent: Hand) -> Hand:
        if self is Strategy.LOSE:
            return opponent.beats()
        if self is Strategy.WIN:
            return opponent.beaten_by()
        return opponent

    @classmethod
    def parse(cls, code: str) -> "Strategy":
        try:
            return cls(code)
        except ValueError:
            raise ParseError(f"unknown strategy: {code!r}") from None


_NAIVE_HANDS = {Strategy.LOSE: Hand.ROCK, Strategy.DRAW: Hand.PAPER, Strategy.WIN: Hand.SCISSORS}


class Round(NamedTuple):
    opponent: Hand
    strategy: Strategy

    @classmethod
    def parse(cls, line: str) -> "Round":
        parts = line.split()
        if len(parts) != 2:
            raise ParseError(f"expected '<hand> <strategy>', got {line!r}")
        return cls(Hand.parse(parts[0]), Strategy.parse(parts[1]))

    def score_naive(self) -> int:
        return self.strategy.select_naive().score_against(self.opponent)

    def score_smart(self) -> int:
        return self.strategy.select_smart(self.opponent).score_against(self.opponent)


def parse(puzzle_input: PuzzleInput) -> List[Round]:
    return list(puzzle_input.parsed_lines(Round.parse))


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    rounds = parse(puzzle_input)
    return [
        ("Total score (naive)", sum(r.score_naive() for r in rounds)),
        ("Total score (smart)", sum(r.score_smart() for r in rounds)),
    ]
