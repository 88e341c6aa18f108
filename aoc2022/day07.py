"""
Day 7: No Space Left On Device

Rebuild a directory tree from a terminal transcript of `cd` / `ls` commands
and answer disk usage questions about it.

The tree is stored as an arena: entries[id] is either a directory (dict of
name -> entry id) or a file (int size). Entry 0 is the root directory.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple, Union

from aoc2022.puzzle_input import ParseError, PuzzleInput

TITLE = "No Space Left On Device"

ROOT = 0
SMALL_DIR_LIMIT = 100_000
DISK_SIZE = 70_000_000
SPACE_NEEDED = 30_000_000

Entry = Union[Dict[str, int], int]


class Filesystem:
    def __init__(self):
        self.entries: List[Entry] = [{}]
        self.stack: List[int] = []
        self.cwd = ROOT

    def _directory(self, entry_id: int) -> Dict[str, int]:
        entry = self.entries[entry_id]
        if not isinstance(entry, dict):
            raise ValueError(f"entry {entry_id} is not a directory")
        return entry

    def cd(self, name: str) -> None:
        """
        Change directory.

        Args:
            name: "/" (root), ".." (parent) or the name of a subdirectory

        Raises:
            ValueError: No parent (at root) or no such subdirectory
        """
        if name == "/":
            self.stack.clear()
            self.cwd = ROOT
        elif name == "..":
            if not self.stack:
                raise ValueError("cd ..: already at root")
            self.cwd = self.stack.pop()
        else:
            entry_id = self._directory(self.cwd).get(name)
            if entry_id is None or not isinstance(self.entries[entry_id], dict):
                raise ValueError(f"cd {name}: no such directory")
            self.stack.append(self.cwd)
            self.cwd = entry_id

    def _mknode(self, name: str, entry: Entry) -> None:
        cwd = self._directory(self.cwd)
        # Listing the same directory twice must not duplicate entries
        if name in cwd:
            return
        self.entries.append(entry)
        cwd[name] = len(self.entries) - 1

    def mkdir(self, name: str) -> None:
        self._mknode(name, {})

    def mkfile(self, name: str, size: int) -> None:
        self._mknode(name, size)

    def du_id(self, entry_id: int) -> int:
        """Total size of an entry (recursive for directories)."""
        entry = self.entries[entry_id]
        if isinstance(entry, dict):
            return sum(self.du_id(child) for child in entry.values())
        return entry

    def du(self) -> int:
        """Total size of the current directory."""
        return self.du_id(self.cwd)

    def dir_sizes(self) -> Iterator[int]:
        for entry_id, entry in enumerate(self.entries):
            if isinstance(entry, dict):
                yield self.du_id(entry_id)

    def sum_of_dir_sizes(self, max_dir_size: int) -> int:
        """Sum of the sizes of all directories of at most max_dir_size."""
        return sum(size for size in self.dir_sizes() if size <= max_dir_size)

    def size_of_dir_to_delete(self, total_size: int, desired_free_size: int) -> int:
        """
        Size of the smallest directory whose deletion frees enough space.

        Args:
            total_size: Disk capacity
            desired_free_size: Free space required afterwards

        Returns:
            Smallest directory size >= the space still missing (0 if none)
        """
        free_size = total_size - self.du_id(ROOT)
        size_to_free_up = desired_free_size - free_size
        return min((size for size in self.dir_sizes() if size >= size_to_free_up), default=0)


def parse(puzzle_input: PuzzleInput) -> Filesystem:
    fs = Filesystem()
    for line_number, line in enumerate(puzzle_input.lines(), 1):
        parts = line.split()
        if not parts:
            continue
        try:
            if len(parts) == 3 and parts[:2] == ["$", "cd"]:
                fs.cd(parts[2])
            elif parts == ["$", "ls"]:
                pass
            elif len(parts) == 2 and parts[0] == "dir":
                fs.mkdir(parts[1])
            elif len(parts) == 2:
                fs.mkfile(parts[1], int(parts[0]))
            else:
                raise ValueError(f"unrecognized terminal line {line!r}")
        except ValueError as e:
            raise ParseError(str(e), line_number) from e
    fs.cd("/")
    logging.debug(f"Parsed filesystem with {len(fs.entries)} entries")
    return fs


def answers(puzzle_input: PuzzleInput) -> List[Tuple[str, Any]]:
    fs = parse(puzzle_input)
    return [
        ("Sum of dir sizes at most 100k", fs.sum_of_dir_sizes(SMALL_DIR_LIMIT)),
        ("Size of dir to delete to free up 30M", fs.size_of_dir_to_delete(DISK_SIZE, SPACE_NEEDED)),
    ]
