# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for the harness.

Both types are frozen dataclasses: entries are fixed for the lifetime of the
process and a result is never edited after the part that produced it ran.
"""

from dataclasses import dataclass
from typing import Callable

SolveFn = Callable[[str], str]


@dataclass(frozen=True)
class SolutionEntry:
    """
    A registered puzzle: one (year, day) and its two solution functions.

    Each function takes the raw input text and returns the answer as text.
    They must be pure. The harness calls them with the same string it read
    from the cache and expects nothing else to change.
    """

    year: int
    day: int
    part1: SolveFn
    part2: SolveFn

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.day)

    def solver(self, part: int) -> SolveFn:
        if part == 1:
            return self.part1
        if part == 2:
            return self.part2
        raise ValueError(f"Puzzles have parts 1 and 2, got {part}")


@dataclass(frozen=True)
class ExecutionResult:
    """The answer and wall-clock cost of running one part once."""

    year: int
    day: int
    part: int
    answer: str
    elapsed_ms: float
