"""A patrolling guard: where it walks, and where a new obstacle traps it in a loop."""

from __future__ import annotations

from enum import Enum

Position = tuple[int, int]

ROCK = "#"


class Direction(Enum):
    """Facing of the guard, valued by its (row, col) step."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def turn_right(self) -> Direction:
        members = list(Direction)
        return members[(members.index(self) + 1) % len(members)]


_GUARD_SYMBOLS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


class Lab:
    """A lab floor with rocks and a guard's starting position and facing."""

    def __init__(self, text: str) -> None:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("lab map is empty")
        self.rows = len(lines)
        self.cols = len(lines[0])
        self.rocks: frozenset[Position] = frozenset(
            (row, col)
            for row, line in enumerate(lines)
            for col, ch in enumerate(line[: self.cols])
            if ch == ROCK
        )
        start = next(
            (
                ((row, col), _GUARD_SYMBOLS[ch])
                for row, line in enumerate(lines)
                for col, ch in enumerate(line[: self.cols])
                if ch in _GUARD_SYMBOLS
            ),
            None,
        )
        if start is None:
            raise ValueError("lab map has no guard")
        self.start, self.start_direction = start

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _step(
        self, position: Position, direction: Direction, rocks: frozenset[Position]
    ) -> tuple[Position, Direction]:
        row, col = position
        for _ in range(len(Direction)):
            d_row, d_col = direction.value
            ahead = (row + d_row, col + d_col)
            if ahead not in rocks:
                return ahead, direction
            direction = direction.turn_right()
        raise ValueError(f"guard at {position} is boxed in")

    def next_move(self, position: Position, direction: Direction) -> tuple[Position, Direction]:
        """Turn right until the way ahead is clear, then take one step."""
        return self._step(position, direction, self.rocks)

    def visited(self) -> set[Position]:
        """Every in-bounds position the guard walks on before leaving the lab."""
        position, direction = self.start, self.start_direction
        seen_positions = {position}
        states = {(position, direction)}
        while self.in_bounds(position):
            position, direction = self.next_move(position, direction)
            if (position, direction) in states:
                raise ValueError("guard never leaves the lab")
            states.add((position, direction))
            if self.in_bounds(position):
                seen_positions.add(position)
        return seen_positions

    def has_loop(self, obstruction: Position | None = None) -> bool:
        """Whether the guard walks forever, optionally with one extra rock added."""
        rocks = self.rocks
        if obstruction is not None:
            if obstruction == self.start:
                raise ValueError("cannot place an obstruction on the guard")
            if not self.in_bounds(obstruction):
                raise ValueError(f"obstruction {obstruction} is outside the lab")
            rocks = rocks | {obstruction}
        position, direction = self.start, self.start_direction
        states = {(position, direction)}
        while self.in_bounds(position):
            position, direction = self._step(position, direction, rocks)
            if (position, direction) in states:
                return True
            states.add((position, direction))
        return False


def solve(text: str) -> tuple[int, int]:
    """Return the number of visited positions and of loop-making obstructions."""
    lab = Lab(text)
    path = lab.visited()
    # A rock placed off the original path is never reached, so it cannot cause a loop.
    loops = sum(1 for position in path if position != lab.start and lab.has_loop(position))
    return len(path), loops