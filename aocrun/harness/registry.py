# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Solution registry.

A plain, ordered table of SolutionEntry records keyed by (year, day). Entries
are added by explicit `register` calls at startup (see
`aocrun.solutions.build_registry`) and the registry is sealed before the run
starts. There is no discovery by module scanning: if a day is not registered,
it does not exist.

Iteration order is registration order, and that is the order the runner
executes and reports in.
"""

import logging
from typing import Iterator

from aocrun.harness.models import SolutionEntry, SolveFn

logger = logging.getLogger(__name__)


class SolutionRegistry:
    """Append-only, then read-only, table of registered solutions."""

    def __init__(self) -> None:
        self._entries: dict[tuple[int, int], SolutionEntry] = {}
        self._sealed = False

    def register(self, year: int, day: int, part1: SolveFn, part2: SolveFn) -> SolutionEntry:
        """
        Add the solutions for one (year, day).

        Raises:
            RuntimeError: If the registry has been sealed.
            ValueError: If (year, day) is already registered.
        """
        if self._sealed:
            raise RuntimeError(f"Registry is sealed, cannot register {year} day {day}")
        key = (year, day)
        if key in self._entries:
            raise ValueError(f"Year {year} day {day} is already registered")

        entry = SolutionEntry(year=year, day=day, part1=part1, part2=part2)
        self._entries[key] = entry
        logger.debug("Registered solution", extra={"year": year, "day": day})
        return entry

    def seal(self) -> "SolutionRegistry":
        """Freeze the registry. Returns self for chaining."""
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, year: int, day: int) -> SolutionEntry:
        """
        Look up one entry.

        Raises:
            KeyError: If (year, day) is not registered.
        """
        key = (year, day)
        if key not in self._entries:
            available = [f"{y}/{d}" for y, d in self._entries]
            raise KeyError(f"No solution registered for {year} day {day}. Available: {available}")
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[SolutionEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def years(self) -> list[int]:
        """Sorted list of years with at least one registered day."""
        return sorted({year for year, _ in self._entries})

    def days(self, year: int) -> list[int]:
        """Sorted list of registered days for a year."""
        return sorted(day for y, day in self._entries if y == year)
