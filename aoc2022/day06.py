"""
Day 6: Tuning Trouble

A marker is the first window of N pairwise-distinct characters in the
datastream; the answer is how many characters were read up to its end.
"""

from typing import Any, List, Tuple

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "Tuning Trouble"

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def detect(size: int, signal: str) -> str:
    """
    Prefix of signal up to and including the first marker.

    Args:
        size: Marker length (number of distinct characters)
        signal: Datastream

    Returns:
        signal[:end] where end is just past the first marker, or "" if the
        signal has no marker
    """
    for i in range(len(signal) - size + 1):
        if len(set(signal[i:i + size])) == size:
            return signal[:i + size]
    return ""


def parse(puzzle_input: PuzzleInput) -> str:
    lines = puzzle_input.lines()
    try:
        signal = next(lines, None)
    finally:
        lines.close()
    if signal is None:
        raise ParseError("missing datastream")
    return signal.strip()


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    signal = parse(puzzle_input)
    return [
        ("Packet marker position", len(detect(PACKET_MARKER_SIZE, signal))),
        ("Message marker position", len(detect(MESSAGE_MARKER_SIZE, signal))),
    ]
