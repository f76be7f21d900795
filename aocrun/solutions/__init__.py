# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Puzzle solutions and their registration.

Each day lives in `y<year>/day<NN>.py` and exposes `part1(text) -> str` and
`part2(text) -> str`. Adding a day means writing that module and adding one
`registry.register(...)` line below; nothing is discovered automatically.
"""

from aocrun.harness.registry import SolutionRegistry
from aocrun.solutions.y2025 import day01 as y2025_day01


def register_builtins(registry: SolutionRegistry) -> None:
    """Register every shipped solution, in execution order."""
    # Year 2025
    registry.register(2025, 1, y2025_day01.part1, y2025_day01.part2)


def build_registry() -> SolutionRegistry:
    """A sealed registry holding every shipped solution."""
    registry = SolutionRegistry()
    register_builtins(registry)
    return registry.seal()
