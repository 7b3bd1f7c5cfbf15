"""Guard Gallivant: follow a lab guard's patrol and find loop-making obstacles."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]

_RED = "\x1b[31m"
_BLUE = "\x1b[34m"
_RESET = "\x1b[0m"


class PatrolLoopError(RuntimeError):
    """Raised when the guard's patrol never leaves the mapped area."""


class Direction(Enum):
    """Facing of the guard as a (row, column) step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def turn_right(self) -> Direction:
        """Return the direction 90 degrees clockwise from this one."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]

    def step(self, position: Position) -> Position:
        d_row, d_col = self.value
        return position[0] + d_row, position[1] + d_col


@dataclass(frozen=True)
class Lab:
    """A rectangular lab map with obstructions and the guard's start."""

    height: int
    width: int
    obstacles: frozenset[Position]
    start: Position

    @classmethod
    def parse(cls, text: str) -> Lab:
        """Read a map of '.', '#' and one '^' marking the guard facing north."""
        rows = [line for line in text.splitlines() if line]
        if not rows:
            raise ValueError("empty map")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("map rows must all have the same width")
        obstacles: set[Position] = set()
        guards: list[Position] = []
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                if cell == "#":
                    obstacles.add((r, c))
                elif cell == "^":
                    guards.append((r, c))
        if len(guards) != 1:
            raise ValueError(f"expected exactly one guard, found {len(guards)}")
        return cls(len(rows), width, frozenset(obstacles), guards[0])

    def contains(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def _run(self, obstacles: frozenset[Position] | set[Position]) -> tuple[set[Position], bool]:
        """Walk the guard; return visited cells and whether the walk loops."""
        position = self.start
        facing = Direction.NORTH
        visited = {position}
        turns: set[tuple[Position, Direction]] = set()
        while True:
            ahead = facing.step(position)
            if not self.contains(ahead):
                return visited, False
            if ahead in obstacles:
                facing = facing.turn_right()
                state = (position, facing)
                if state in turns:
                    return visited, True
                turns.add(state)
                continue
            position = ahead
            visited.add(position)

    def patrol(self) -> frozenset[Position]:
        """Return every position the guard visits before leaving the map."""
        visited, looped = self._run(self.obstacles)
        if looped:
            raise PatrolLoopError("the guard never leaves the mapped area")
        return frozenset(visited)

    def loops_with(self, obstacle: Position) -> bool:
        """Return True if an extra obstruction at ``obstacle`` traps the guard.

        Cells already obstructed and the guard's start cannot take one, so
        they give False.
        """
        if not self.contains(obstacle):
            raise ValueError(f"position {obstacle} is outside the map")
        if obstacle in self.obstacles or obstacle == self.start:
            return False
        _, looped = self._run(self.obstacles | {obstacle})
        return looped

    def render(self, visited: Sequence[Position] | set[Position] | frozenset[Position]) -> str:
        """Draw the map with '#' for obstructions, 'X' for visited cells and '.' elsewhere."""
        seen = set(visited)
        lines = []
        for r in range(self.height):
            cells = []
            for c in range(self.width):
                if (r, c) in self.obstacles:
                    cells.append("#")
                elif (r, c) in seen:
                    cells.append("X")
                else:
                    cells.append(".")
            lines.append("".join(cells))
        return "\n".join(lines)


def count_loop_positions(lab: Lab) -> int:
    """Count the cells where one new obstruction makes the guard loop forever."""
    visited, looped = lab._run(lab.obstacles)
    if looped:
        candidates = {
            (r, c) for r in range(lab.height) for c in range(lab.width)
        }
    else:
        # An obstruction off the original path cannot change the walk.
        candidates = visited
    return sum(1 for cell in candidates if lab.loops_with(cell))


def _colourise(board: str) -> str:
    colours = {"#": _RED, "X": _BLUE}
    return "\n".join(
        "".join(colours.get(cell, _RESET) + cell for cell in line) + _RESET
        for line in board.splitlines()
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Predict a lab guard's patrol.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        with open(args.filename, encoding="utf-8") as handle:
            lab = Lab.parse(handle.read())
        if args.part == 1:
            visited = lab.patrol()
            print(_colourise(lab.render(visited)))
            print(_RESET)
            count = len(visited)
        else:
            count = count_loop_positions(lab)
    except (OSError, ValueError, PatrolLoopError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Count: {count}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())