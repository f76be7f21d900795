# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
2025 day 1: Secret Entrance.

A dial numbered 0-99 starts at 50. Each input line is a rotation, `L` or `R`
followed by a click count. Part 1 counts rotations that leave the dial on 0;
part 2 counts every click that lands on 0, including those mid-rotation.
"""

DIAL_SIZE = 100
START = 50


def _rotations(text: str) -> list[tuple[str, int]]:
    rotations = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        direction, distance = line[0], int(line[1:])
        if direction not in ("L", "R"):
            raise ValueError(f"Bad rotation: {line!r}")
        rotations.append((direction, distance))
    return rotations


def _zero_hits(position: int, direction: str, distance: int) -> int:
    """How many clicks of this rotation land on 0."""
    if direction == "R":
        return (position + distance) // DIAL_SIZE
    # Moving left from p, the first 0 is reached after p clicks (100 if p is 0).
    first = position if position else DIAL_SIZE
    if distance < first:
        return 0
    return 1 + (distance - first) // DIAL_SIZE


def _step(position: int, direction: str, distance: int) -> int:
    delta = distance if direction == "R" else -distance
    return (position + delta) % DIAL_SIZE


def part1(text: str) -> str:
    position = START
    stops = 0
    for direction, distance in _rotations(text):
        position = _step(position, direction, distance)
        if position == 0:
            stops += 1
    return str(stops)


def part2(text: str) -> str:
    position = START
    hits = 0
    for direction, distance in _rotations(text):
        hits += _zero_hits(position, direction, distance)
        position = _step(position, direction, distance)
    return str(hits)
