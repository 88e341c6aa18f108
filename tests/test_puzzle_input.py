"""Tests for the line/block puzzle input reader."""

import io
from pathlib import Path

import pytest

from aoc2022.puzzle_input import ParseError, PuzzleInput

INPUT_NUMBERS = "11\n22\n33\n44\n55\n"
INPUT_BLOCKS = "11\n22\n\n33\n44\n\n55\n66\n"


class TestLines:
    def test_lines(self) -> None:
        lines = list(PuzzleInput.from_string(INPUT_NUMBERS).lines())
        assert lines == ["11", "22", "33", "44", "55"]

    def test_missing_final_newline(self) -> None:
        assert list(PuzzleInput.from_string("a\nb").lines()) == ["a", "b"]

    def test_crlf_line_endings(self) -> None:
        assert list(PuzzleInput.from_string("a\r\nb\r\n").lines()) == ["a", "b"]

    def test_leading_whitespace_kept(self) -> None:
        """Leading spaces are significant (e.g. crate drawings)."""
        assert list(PuzzleInput.from_string("    [D]\n").lines()) == ["    [D]"]

    def test_empty_input(self) -> None:
        assert list(PuzzleInput.from_string("").lines()) == []

    def test_binary_stream(self) -> None:
        puzzle = PuzzleInput(io.BytesIO(b"1\n2\n"))
        assert list(puzzle.parsed_lines(int)) == [1, 2]

    def test_parsed_lines(self) -> None:
        numbers = list(PuzzleInput.from_string(INPUT_NUMBERS).parsed_lines(int))
        assert numbers == [11, 22, 33, 44, 55]

    def test_parse_failure_fails_collection(self) -> None:
        puzzle = PuzzleInput.from_string("1\n2\nthree\n4\n")
        with pytest.raises(ParseError) as excinfo:
            list(puzzle.parsed_lines(int))
        assert excinfo.value.line_number == 3
        assert str(excinfo.value).startswith("line 3: ")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_parse_failure_stops_iteration(self) -> None:
        """Good lines before the failure are produced, nothing after it."""
        seen = []
        with pytest.raises(ParseError):
            for value in PuzzleInput.from_string("1\nx\n3\n").parsed_lines(int):
                seen.append(value)
        assert seen == [1]


class TestBlocks:
    def test_blocks(self) -> None:
        blocks = list(PuzzleInput.from_string(INPUT_BLOCKS).blocks())
        assert blocks == [["11", "22"], ["33", "44"], ["55", "66"]]

    def test_parsed_blocks(self) -> None:
        blocks = list(PuzzleInput.from_string(INPUT_BLOCKS).parsed_blocks(int))
        assert blocks == [[11, 22], [33, 44], [55, 66]]

    def test_extra_blank_lines(self) -> None:
        """Leading, repeated and trailing blank lines never yield empty blocks."""
        text = "\n\n11\n  \n\n\n22\n33\n\n\n"
        blocks = list(PuzzleInput.from_string(text).parsed_blocks(int))
        assert blocks == [[11], [22, 33]]

    def test_empty_input(self) -> None:
        assert list(PuzzleInput.from_string("\n\n").blocks()) == []

    def test_parse_failure_reports_block(self) -> None:
        puzzle = PuzzleInput.from_string("1\n2\n\n3\nfour\n")
        with pytest.raises(ParseError) as excinfo:
            list(puzzle.parsed_blocks(int))
        assert excinfo.value.block_number == 2
        assert excinfo.value.line_number == 5
        assert str(excinfo.value).startswith("block 2, line 5: ")

    def test_no_partial_block(self) -> None:
        blocks = []
        with pytest.raises(ParseError):
            for block in PuzzleInput.from_string("1\n\n2\nx\n3\n").parsed_blocks(int):
                blocks.append(block)
        assert blocks == [[1]]


class TestLifecycle:
    def test_single_pass(self) -> None:
        puzzle = PuzzleInput.from_string(INPUT_NUMBERS)
        list(puzzle.lines())
        with pytest.raises(RuntimeError):
            puzzle.lines()

    def test_stream_closed_after_read(self) -> None:
        stream = io.StringIO(INPUT_NUMBERS)
        list(PuzzleInput(stream).lines())
        assert stream.closed

    def test_context_manager_closes(self) -> None:
        stream = io.StringIO(INPUT_NUMBERS)
        with PuzzleInput(stream) as puzzle:
            next(puzzle.lines())
        assert stream.closed

    def test_idempotent_parse(self) -> None:
        first = list(PuzzleInput.from_string(INPUT_BLOCKS).parsed_blocks(int))
        second = list(PuzzleInput.from_string(INPUT_BLOCKS).parsed_blocks(int))
        assert first == second


class TestOpen:
    def test_day(self, tmp_path: Path) -> None:
        (tmp_path / "day01.txt").write_text(INPUT_NUMBERS, encoding="utf-8")
        lines = list(PuzzleInput.day(1, tmp_path).lines())
        assert lines[0] == "11"

    def test_open_by_name(self, tmp_path: Path) -> None:
        (tmp_path / "sample.txt").write_text("x\n", encoding="utf-8")
        assert list(PuzzleInput.open("sample", tmp_path).lines()) == ["x"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            PuzzleInput.day(25, tmp_path)


class TestNumberedBlocks:
    def test_line_numbers(self) -> None:
        blocks = list(PuzzleInput.from_string("\n11\n22\n\n\n33\n").numbered_blocks())
        assert blocks == [[(2, "11"), (3, "22")], [(6, "33")]]


class TestInvalidEncoding:
    def test_bad_utf8_is_parse_error(self) -> None:
        puzzle = PuzzleInput(io.BytesIO(b"1000\n\xff\xfe\n"))
        with pytest.raises(ParseError) as excinfo:
            list(puzzle.parsed_blocks(int))
        assert "not valid UTF-8" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
