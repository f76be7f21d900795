# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Selection runner: the heart of the harness.

For every registered entry, in registration order:
  1. Skip it unless it matches the selected year (and day, if one was given)
  2. Get its input through the cache, downloading on first use
  3. Run part 1 and/or part 2, timing each call on its own

A day whose input can't be obtained is skipped with a warning, and a
solution that raises is logged and skipped. Neither stops the run: partial
results always beat no results.
"""

import logging
import time
from pathlib import Path
from typing import Iterable, Optional, Protocol

from aocrun.config.schema import SelectionCriteria
from aocrun.harness.models import ExecutionResult, SolutionEntry, SolveFn

logger = logging.getLogger(__name__)

PARTS = (1, 2)


class InputSource(Protocol):
    """What the runner needs from the input cache."""

    def path_for(self, year: int, day: int) -> Path: ...

    def ensure(self, year: int, day: int, path: Optional[Path] = None) -> tuple[str, bool]: ...


def time_part(year: int, day: int, part: int, solve: SolveFn, puzzle_input: str) -> ExecutionResult:
    """
    Call one solution function and measure it.

    Only the call itself is inside the timed region. perf_counter is
    monotonic and has the best resolution available, which matters for the
    many solutions that finish in well under a millisecond.
    """
    start = time.perf_counter()
    answer = solve(puzzle_input)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return ExecutionResult(year=year, day=day, part=part, answer=str(answer), elapsed_ms=elapsed_ms)


def run_entry(entry: SolutionEntry, criteria: SelectionCriteria, puzzle_input: str) -> list[ExecutionResult]:
    """Run the selected parts of one entry. Part 1 always comes before part 2."""
    results: list[ExecutionResult] = []

    for part in PARTS:
        if not criteria.includes_part(part):
            continue
        try:
            result = time_part(entry.year, entry.day, part, entry.solver(part), puzzle_input)
        except Exception as err:
            logger.error(
                "Solution raised an exception",
                extra={"year": entry.year, "day": entry.day, "part": part, "error": str(err)},
                exc_info=True,
            )
            continue

        logger.debug(
            "Part complete",
            extra={"year": entry.year, "day": entry.day, "part": part, "elapsed_ms": result.elapsed_ms},
        )
        results.append(result)

    return results


def run_selection(
    criteria: SelectionCriteria,
    registry: Iterable[SolutionEntry],
    inputs: InputSource,
) -> list[ExecutionResult]:
    """
    Run every registered solution that falls inside the selection.

    Args:
        criteria: Which year/day/part to run.
        registry: Entries in execution order (a SolutionRegistry or any iterable).
        inputs: Where puzzle inputs come from, normally an InputCache.

    Returns:
        One ExecutionResult per part that ran, in registry order.
    """
    all_results: list[ExecutionResult] = []

    for entry in registry:
        if not criteria.matches(entry.year, entry.day):
            continue

        path = inputs.path_for(entry.year, entry.day)
        puzzle_input, ok = inputs.ensure(entry.year, entry.day, path)
        if not ok:
            logger.warning(
                f"Skipping year {entry.year} day {entry.day}: input unavailable",
                extra={"year": entry.year, "day": entry.day, "path": str(path)},
            )
            continue

        logger.info("Running solution", extra={"year": entry.year, "day": entry.day})
        all_results.extend(run_entry(entry, criteria, puzzle_input))

    return all_results
