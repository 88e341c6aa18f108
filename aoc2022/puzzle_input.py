"""
Puzzle Input Reader

Single-pass access to a day's puzzle text, either line by line or in
blank-line-separated blocks, with optional per-line conversion.

Conversion is explicit: callers pass a callable (``int``, a classmethod
parser, ...) and any ``ValueError`` it raises is re-raised as a
``ParseError`` pinned to the offending line.
"""

import io
from pathlib import Path
from typing import IO, Callable, Iterator, List, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

# Puzzle input files live in <repo>/input/dayNN.txt
INPUT_DIR = Path(__file__).resolve().parent.parent / "input"


class ParseError(ValueError):
    """
    Puzzle text does not match the expected grammar.

    Args:
        message: What was wrong
        line_number: 1-based line within the input (if known)
        block_number: 1-based block within the input (if known)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        block_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.block_number = block_number

    def __str__(self) -> str:
        location = []
        if self.block_number is not None:
            location.append(f"block {self.block_number}")
        if self.line_number is not None:
            location.append(f"line {self.line_number}")
        if not location:
            return self.message
        return f"{', '.join(location)}: {self.message}"


def _is_blank(line: str) -> bool:
    return not line.strip()


class PuzzleInput:
    """
    Puzzle input wrapping a text (or UTF-8 binary) stream.

    Every consuming method (lines, parsed_lines, blocks, parsed_blocks,
    numbered_blocks) may be called once; the underlying stream is closed as
    soon as the returned iterator is exhausted or closed.
    """

    def __init__(self, stream: Union[IO[str], IO[bytes]]):
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream = io.TextIOWrapper(stream, encoding="utf-8")
        self._stream = stream
        self._consumed = False

    @classmethod
    def from_string(cls, text: str) -> "PuzzleInput":
        """Puzzle input backed by an in-memory string."""
        return cls(io.StringIO(text))

    @classmethod
    def open(cls, name: str, input_dir: Path = INPUT_DIR) -> "PuzzleInput":
        """
        Open puzzle input with the given name.

        Args:
            name: File stem, e.g. "day01"
            input_dir: Directory holding the input files

        Returns:
            PuzzleInput over <input_dir>/<name>.txt

        Raises:
            OSError: File missing or unreadable
        """
        path = Path(input_dir) / f"{name}.txt"
        return cls(open(path, "r", encoding="utf-8"))

    @classmethod
    def day(cls, day: int, input_dir: Path = INPUT_DIR) -> "PuzzleInput":
        """Open puzzle input for the given day (input_dir/dayNN.txt)."""
        return cls.open(f"day{day:02d}", input_dir)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self._stream.close()

    def _take_stream(self) -> IO[str]:
        if self._consumed:
            raise RuntimeError("PuzzleInput already consumed (iterators are single-pass)")
        self._consumed = True
        return self._stream

    def lines(self) -> Iterator[str]:
        """Iterator over lines of this input, line endings removed."""
        return self._iter_lines(self._take_stream())

    @staticmethod
    def _iter_lines(stream: IO[str]) -> Iterator[str]:
        line_number = 0
        with stream:
            try:
                for line in stream:
                    line_number += 1
                    yield line.rstrip("\r\n")
            except UnicodeDecodeError as e:
                # Decoding runs ahead in chunks, so only the last good line is known
                raise ParseError(f"input is not valid UTF-8 after line {line_number}: {e.reason}") from e

    def parsed_lines(self, convert: Callable[[str], T]) -> Iterator[T]:
        """
        Iterator over lines of this input, each passed through convert.

        Args:
            convert: Conversion callback; raises ValueError on bad text

        Yields:
            Converted lines, in order

        Raises:
            ParseError: On the first line convert rejects
        """
        for line_number, line in enumerate(self.lines(), 1):
            yield convert_line(convert, line, line_number)

    def blocks(self) -> Iterator[List[str]]:
        """Iterator over blocks (runs of non-blank lines) of this input."""
        return self.parsed_blocks(str)

    def parsed_blocks(self, convert: Callable[[str], T]) -> Iterator[List[T]]:
        """
        Iterator over blocks of this input, each line passed through convert.

        Blocks are separated by one or more blank (empty or whitespace-only)
        lines. Leading blank lines are skipped and trailing blank lines never
        produce an empty block.

        Args:
            convert: Conversion callback; raises ValueError on bad text

        Yields:
            One fully converted list per block

        Raises:
            ParseError: On the first line convert rejects (no partial block
                is yielded)
        """
        for block_number, block in enumerate(self.numbered_blocks(), 1):
            yield [convert_line(convert, line, n, block_number) for n, line in block]

    def numbered_blocks(self) -> Iterator[List[Tuple[int, str]]]:
        """Iterator over blocks of (1-based line number, line) pairs."""
        block: List[Tuple[int, str]] = []
        for line_number, line in enumerate(self.lines(), 1):
            if _is_blank(line):
                if block:
                    yield block
                    block = []
                continue
            block.append((line_number, line))
        if block:
            yield block


def convert_line(
    convert: Callable[[str], T],
    line: str,
    line_number: int,
    block_number: Optional[int] = None,
) -> T:
    """Apply convert to one line, pinning any ValueError to its location."""
    try:
        return convert(line)
    except ParseError as e:
        raise ParseError(e.message, line_number, block_number) from e
    except ValueError as e:
        raise ParseError(str(e), line_number, block_number) from e
