"""
Day 10: Cathode-Ray Tube

A tiny CPU with one register (x, starting at 1) and two instructions:
  - noop      takes 1 cycle
  - addx V    takes 2 cycles, then x += V

The register value *during* each cycle drives both answers:
  - signal strength: sum of cycle * x for cycles 20, 60, 100, ...
  - CRT: a 40-pixel-wide raster, pixel lit when the 3-wide sprite centred
    on x covers the column being drawn
"""

from typing import Any, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "Cathode-Ray Tube"

CRT_WIDTH = 40
FIRST_SAMPLE_CYCLE = 20
SAMPLE_INTERVAL = 40
LIT, DARK = "#", " "


class Instruction(NamedTuple):
    op: str
    arg: Optional[int] = None

    @classmethod
    def parse(cls, line: str) -> "Instruction":
        parts = line.split()
        if parts == ["noop"]:
            return cls("noop")
        if len(parts) == 2 and parts[0] == "addx":
            return cls("addx", int(parts[1]))
        raise ParseError(f"unknown instruction: {line!r}")

    @property
    def cycles(self) -> int:
        return 2 if self.op == "addx" else 1


class Cpu:
    def __init__(self, instructions: Sequence[Instruction]):
        self.instructions = instructions
        self.pc = 0
        self.cycles = 0
        self.x = 1

    def next_instruction(self) -> Optional[Instruction]:
        if self.pc < len(self.instructions):
            return self.instructions[self.pc]
        return None

    def step(self) -> int:
        """
        Execute the next instruction.

        Returns:
            Cycles consumed, or 0 once the program has finished
        """
        instruction = self.next_instruction()
        if instruction is None:
            return 0
        if instruction.op == "addx":
            self.x += instruction.arg
        self.pc += 1
        self.cycles += instruction.cycles
        return instruction.cycles

    def trace(self) -> Iterator[int]:
        """Yield the value of x during every cycle until the program ends."""
        while True:
            instruction = self.next_instruction()
            if instruction is None:
                return
            x = self.x
            for _ in range(instruction.cycles):
                yield x
            self.step()

    def run(self) -> Tuple[int, str]:
        """
        Run the program to completion.

        Returns:
            (signal_strength, crt) where crt is the rendered raster, one
            line per completed 40-pixel row
        """
        xs = np.fromiter(self.trace(), dtype=np.int64)
        cycles = np.arange(1, xs.size + 1, dtype=np.int64)

        sampled = (cycles - FIRST_SAMPLE_CYCLE) % SAMPLE_INTERVAL == 0
        signal_strength = int(np.sum(cycles[sampled] * xs[sampled]))

        columns = (cycles - 1) % CRT_WIDTH
        lit = np.abs(xs - columns) <= 1
        return signal_strength, render_crt(lit)


def render_crt(lit: np.ndarray) -> str:
    """Render lit pixels row by row; only full rows end with a newline."""
    pixels = np.where(lit, LIT, DARK)
    rows = []
    for start in range(0, pixels.size, CRT_WIDTH):
        row = "".join(pixels[start:start + CRT_WIDTH].tolist())
        if len(row) == CRT_WIDTH:
            row += "\n"
        rows.append(row)
    return "".join(rows)


def parse(puzzle_input: PuzzleInput) -> List[Instruction]:
    return list(puzzle_input.parsed_lines(Instruction.parse))


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    instructions = parse(puzzle_input)
    signal_strength, crt = Cpu(instructions).run()
    return [
        ("Sum of signal strengths", signal_strength),
        ("CRT output", crt.rstrip("\n")),
    ]
