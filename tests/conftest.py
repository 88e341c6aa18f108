"""Shared pytest fixtures for aoc2022 tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from aoc2022.puzzle_input import PuzzleInput


@pytest.fixture
def puzzle_input() -> Callable[[str], PuzzleInput]:
    """Build an in-memory PuzzleInput from (dedented) sample text."""

    def _make(text: str) -> PuzzleInput:
        return PuzzleInput.from_string(textwrap.dedent(text))

    return _make


@pytest.fixture
def input_dir(tmp_path: Path) -> Callable[..., Path]:
    """Write dayNN.txt files into a temporary input directory."""

    def _write(**days: str) -> Path:
        for name, text in days.items():
            (tmp_path / f"{name}.txt").write_text(textwrap.dedent(text), encoding="utf-8")
        return tmp_path

    return _write
