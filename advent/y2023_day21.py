"""Counting garden plots reachable in an exact number of steps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

DEFAULT_STEPS = 64

ROCK = "#"
PLOT = "."
START = "S"
STEP_MARK = "O"

Position = tuple[int, int]

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Garden:
    """A rectangular map of garden plots and rocks with a starting plot."""

    rows: int
    cols: int
    rocks: frozenset[Position]
    start: Position

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, position: Position) -> bool:
        return self.in_bounds(position) and position not in self.rocks

    def neighbours(self, position: Position) -> Iterator[Position]:
        """Yield the open plots one step up, down, left and right."""
        row, col = position
        for d_row, d_col in _MOVES:
            step = (row + d_row, col + d_col)
            if self.is_open(step):
                yield step


def parse_garden(text: str) -> Garden:
    """Read a garden map made of '.', '#' and a single 'S'."""
    lines = text.splitlines()
    rocks: set[Position] = set()
    start: Position | None = None
    for row, line in enumerate(lines):
        for col, ch in enumerate(line):
            if ch == ROCK:
                rocks.add((row, col))
            elif ch == START:
                if start is not None:
                    raise ValueError("garden has more than one start position")
                start = (row, col)
            elif ch != PLOT:
                raise ValueError(f"unexpected character {ch!r} at row {row}, column {col}")
    if start is None:
        raise ValueError("garden has no start position")
    cols = max(len(line) for line in lines)
    return Garden(len(lines), cols, frozenset(rocks), start)


def reachable_positions(garden: Garden, steps: int) -> frozenset[Position]:
    """Return the plots on which a walk of exactly ``steps`` steps can end."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    current: frozenset[Position] = frozenset({garden.start})
    for _ in range(steps):
        current = frozenset(step for position in current for step in garden.neighbours(position))
    return current


def render(garden: Garden, positions: Iterable[Position]) -> str:
    """Draw the garden with the given positions marked as 'O'."""
    marked = set(positions)
    for position in marked:
        if not garden.in_bounds(position):
            raise ValueError(f"position {position} is outside the garden")
        if position in garden.rocks:
            raise ValueError(f"position {position} is a rock")
    lines = []
    for row in range(garden.rows):
        chars = []
        for col in range(garden.cols):
            position = (row, col)
            if position in garden.rocks:
                chars.append(ROCK)
            elif position in marked:
                chars.append(STEP_MARK)
            else:
                chars.append(PLOT)
        lines.append("".join(chars))
    return "".join(line + "\n" for line in lines)


def solve(text: str, steps: int = DEFAULT_STEPS) -> int:
    """Return how many plots can be reached in exactly ``steps`` steps."""
    return len(reachable_positions(parse_garden(text), steps))