"""Robots patrolling a wrapping rectangular area, and the safety factor after a while."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from math import prod

ROWS = 103
COLS = 101
SECONDS = 100

_ROBOT_RE = re.compile(r"\s*p=(\d+),(\d+)\s+v=(-?\d+),(-?\d+)\s*")

Vector = tuple[int, int]


@dataclass(frozen=True)
class Robot:
    """A robot's starting (x, y) position and its per-second (x, y) velocity."""

    position: Vector
    velocity: Vector


def parse_robots(text: str) -> list[Robot]:
    """Read lines of the form 'p=x,y v=dx,dy'."""
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROBOT_RE.fullmatch(line)
        if not match:
            raise ValueError(f"malformed robot {line!r}")
        x, y, dx, dy = (int(value) for value in match.groups())
        robots.append(Robot((x, y), (dx, dy)))
    return robots


def _check_area(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise ValueError("the area must have at least one row and one column")


def final_position(robot: Robot, rows: int, cols: int, seconds: int) -> Vector:
    """Where the robot is after ``seconds``, wrapping around the area's edges."""
    _check_area(rows, cols)
    x, y = robot.position
    dx, dy = robot.velocity
    return (x + seconds * dx) % cols, (y + seconds * dy) % rows


def quadrant_counts(positions: Iterable[Vector], rows: int, cols: int) -> tuple[int, int, int, int]:
    """Count positions in each quadrant: top-left, top-right, bottom-left, bottom-right.

    Positions on the middle row or the middle column belong to no quadrant.
    """
    _check_area(rows, cols)
    mid_row, mid_col = rows // 2, cols // 2
    top_left = top_right = bottom_left = bottom_right = 0
    for x, y in positions:
        if not (0 <= x < cols and 0 <= y < rows):
            raise ValueError(f"position {(x, y)} is outside the area")
        left = x < mid_col
        right = x > mid_col
        if y < mid_row:
            top_left += left
            top_right += right
        elif y > mid_row and (left or right):
            bottom_left += left
            bottom_right += right
    return top_left, top_right, bottom_left, bottom_right


def safety_factor(robots: Iterable[Robot], rows: int, cols: int, seconds: int = SECONDS) -> int:
    """Multiply together the robot counts of the four quadrants after ``seconds``."""
    positions = [final_position(robot, rows, cols, seconds) for robot in robots]
    return prod(quadrant_counts(positions, rows, cols))


def solve(text: str, rows: int = ROWS, cols: int = COLS) -> int:
    """Return the safety factor after 100 seconds."""
    return safety_factor(parse_robots(text), rows, cols)