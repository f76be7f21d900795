# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Results table.

Renders the timed results as a bordered, fixed-column table:

    +=======+======+======+==================+===============+
    | Year  | Day  | Part |      Answer      |   Time (ms)   |
    +=======+======+======+==================+===============+
    |  2025 |    1 |    1 |             1031 |         0.412 |
    ...
    +=======+======+======+==================+===============+
    | Total time:         0.873 ms                            |
    +=======+======+======+==================+===============+

Pure string building; the caller decides where the text goes.
"""

from typing import Sequence

from aocrun.harness.models import ExecutionResult

NOTHING_RAN = "No solutions were run. Check your input files or filters."

_TIME_DECIMALS = 3
_MIN_ANSWER_WIDTH = 16
# Content widths for Year, Day, Part, Answer, Time.
_FIXED_WIDTHS = (5, 4, 4, None, 13)
_HEADERS = ("Year", "Day", "Part", "Answer", "Time (ms)")


def _rounded_ms(value: float) -> float:
    return round(value, _TIME_DECIMALS)


def total_ms(results: Sequence[ExecutionResult]) -> float:
    """
    Sum of the per-row times as they are printed.

    Each row is rounded to the displayed precision before summing, so the
    printed rows always add up to the printed total.
    """
    return _rounded_ms(sum(_rounded_ms(result.elapsed_ms) for result in results))


def _border(widths: Sequence[int]) -> str:
    return "+" + "+".join("=" * (width + 2) for width in widths) + "+"


def _row(cells: Sequence[str], widths: Sequence[int], center: bool = False) -> str:
    if center:
        padded = [cell.center(width) for cell, width in zip(cells, widths)]
    else:
        padded = [cell.rjust(width) for cell, width in zip(cells, widths)]
    return "| " + " | ".join(padded) + " |"


def render_table(results: Sequence[ExecutionResult]) -> str:
    """
    Format results as a table with a total-time footer.

    Returns the "nothing ran" notice instead when there are no results.
    """
    if not results:
        return NOTHING_RAN + "\n"

    answer_width = max([_MIN_ANSWER_WIDTH, *(len(result.answer) for result in results)])
    widths = [answer_width if width is None else width for width in _FIXED_WIDTHS]
    border = _border(widths)

    lines = [border, _row(_HEADERS, widths, center=True), border]
    for result in results:
        cells = (
            str(result.year),
            str(result.day),
            str(result.part),
            result.answer,
            f"{result.elapsed_ms:.{_TIME_DECIMALS}f}",
        )
        lines.append(_row(cells, widths))
    lines.append(border)

    inner_width = len(border) - 4
    footer = f"Total time: {total_ms(results):13.{_TIME_DECIMALS}f} ms"
    lines.append("| " + footer.ljust(inner_width) + " |")
    lines.append(border)

    return "\n".join(lines) + "\n"
