"""
Advent of Code 2022 Solvers
One independent parse + solve module per puzzle day.

Modules:
- puzzle_input: single-pass line/block reader with explicit conversion
- day01 .. day10: per-day parser and part 1 / part 2 solvers
- solve: CLI runner wiring input -> parse -> solve -> printed answers
"""

__version__ = "0.1.0"
