"""Tests for day 3: rucksack reorganization."""

import pytest

from aoc2022 import day03
from aoc2022.day03 import Rucksack, find_badge_item_priority, groups, item_priority

SAMPLE = (
    "vJrwpWtwJgWrhcsFMMfFFhFp\n"
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
    "PmmdzqPrVvPwwTWBwg\n"
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
    "ttgJtRGJQctTZtZT\n"
    "CrZsJsPPZsGzwwsLwLmpwMDw\n"
)


@pytest.fixture
def rucksacks(puzzle_input):
    return day03.parse(puzzle_input(SAMPLE))


class TestRucksacks:
    @pytest.mark.parametrize(
        "item, priority",
        [("p", 16), ("L", 38), ("P", 42), ("v", 22), ("t", 20), ("s", 19), ("a", 1), ("Z", 52), ("!", 0)],
    )
    def test_item_priority(self, item: str, priority: int) -> None:
        assert item_priority(item) == priority

    def test_compartments(self) -> None:
        assert Rucksack("abcdef").compartments() == ("abc", "def")

    def test_part_1(self, rucksacks) -> None:
        assert [r.common_item_priority() for r in rucksacks] == [16, 38, 42, 22, 20, 19]

    def test_part_2(self, rucksacks) -> None:
        assert [find_badge_item_priority(g) for g in groups(rucksacks)] == [18, 52]

    def test_no_common_item(self) -> None:
        assert Rucksack("abcd").common_item() is None
        assert Rucksack("abcd").common_item_priority() == 0

    def test_answers(self, puzzle_input) -> None:
        assert day03.answers(puzzle_input(SAMPLE)) == [
            ("Sum of common item priorities", 157),
            ("Sum of badge item priorities", 70),
        ]
