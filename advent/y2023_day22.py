"""Falling sand bricks: which can be removed, and how many others fall."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

Point = tuple[int, int, int]

_BRICK_RE = re.compile(r"\s*(\d+),(\d+),(\d+)~(\d+),(\d+),(\d+)\s*")


@dataclass(frozen=True)
class Brick:
    """A straight run of cubes between two corner points."""

    id: int
    start: Point
    stop: Point

    @property
    def bottom(self) -> int:
        return min(self.start[2], self.stop[2])

    @property
    def top(self) -> int:
        return max(self.start[2], self.stop[2])

    def footprint(self) -> list[tuple[int, int]]:
        """The (x, y) columns the brick covers."""
        xs = range(min(self.start[0], self.stop[0]), max(self.start[0], self.stop[0]) + 1)
        ys = range(min(self.start[1], self.stop[1]), max(self.start[1], self.stop[1]) + 1)
        return [(x, y) for x in xs for y in ys]

    def cells(self) -> Iterator[Point]:
        for x, y in self.footprint():
            for z in range(self.bottom, self.top + 1):
                yield (x, y, z)

    def lowered(self, drop: int) -> Brick:
        sx, sy, sz = self.start
        ex, ey, ez = self.stop
        return replace(self, start=(sx, sy, sz - drop), stop=(ex, ey, ez - drop))


class BrickStack:
    """Bricks resting in space, indexed by id and by the cells they fill."""

    def __init__(self, bricks: Iterable[Brick] = ()) -> None:
        self.bricks: dict[int, Brick] = {}
        self.occupied: dict[Point, int] = {}
        for brick in bricks:
            self.add(brick)

    def drop_position(self, brick: Brick) -> Brick:
        """Return the brick moved down until it rests on ground or another brick."""
        footprint = brick.footprint()
        z = brick.bottom
        while z > 1 and not any((x, y, z - 1) in self.occupied for x, y in footprint):
            z -= 1
        return brick.lowered(brick.bottom - z)

    def add(self, brick: Brick) -> None:
        for cell in brick.cells():
            owner = self.occupied.get(cell)
            if owner is not None and owner != brick.id:
                raise ValueError(f"brick {brick.id} overlaps brick {owner} at {cell}")
        for cell in brick.cells():
            self.occupied[cell] = brick.id
        self.bricks[brick.id] = brick

    def remove(self, brick: Brick) -> None:
        """Clear the brick's cells; it stays known by id."""
        for cell in brick.cells():
            self.occupied.pop(cell, None)

    def supported_above(self, brick: Brick) -> set[int]:
        """Ids of bricks directly on top of ``brick``."""
        z = brick.top + 1
        return {
            self.occupied[(x, y, z)]
            for x, y in brick.footprint()
            if (x, y, z) in self.occupied
        }

    def can_remove(self, brick: Brick) -> bool:
        """Whether taking ``brick`` away leaves every brick above it in place."""
        for neighbour_id in sorted(self.supported_above(brick)):
            neighbour = self.bricks[neighbour_id]
            self.remove(brick)
            moved = self.drop_position(neighbour)
            self.add(brick)
            if moved != neighbour:
                return False
        return True

    def total_fall(self, brick: Brick, fallen: set[int]) -> int:
        """Count the falls caused by removing ``brick``, recording the ids in ``fallen``.

        The stack is left as it was found.
        """
        neighbours = sorted(self.supported_above(brick))
        self.remove(brick)

        falling = []
        for neighbour_id in neighbours:
            neighbour = self.bricks[neighbour_id]
            if self.drop_position(neighbour) != neighbour:
                falling.append(neighbour_id)
                fallen.add(neighbour_id)

        for neighbour_id in falling:
            self.remove(self.bricks[neighbour_id])
        total = sum(self.total_fall(self.bricks[neighbour_id], fallen) for neighbour_id in falling)
        for neighbour_id in falling:
            self.add(self.bricks[neighbour_id])

        self.add(brick)
        return total + len(falling)


def parse_bricks(text: str) -> list[Brick]:
    """Read lines of the form 'x,y,z~x,y,z', numbering bricks from 1."""
    bricks = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _BRICK_RE.fullmatch(line)
        if not match:
            raise ValueError(f"malformed brick {line!r}")
        values = tuple(int(value) for value in match.groups())
        bricks.append(Brick(len(bricks) + 1, values[:3], values[3:]))
    return bricks


def settle(bricks: Iterable[Brick]) -> BrickStack:
    """Let the bricks fall, lowest first, renumbering them from 1 in that order."""
    stack = BrickStack()
    for new_id, brick in enumerate(sorted(bricks, key=lambda b: b.bottom), start=1):
        stack.add(stack.drop_position(replace(brick, id=new_id)))
    return stack


def solve(text: str) -> tuple[int, int]:
    """Return the count of removable bricks and the summed fall counts."""
    stack = settle(parse_bricks(text))
    bricks = [stack.bricks[brick_id] for brick_id in sorted(stack.bricks)]
    removable = sum(1 for brick in bricks if stack.can_remove(brick))
    fallen: set[int] = set()
    falls = sum(stack.total_fall(brick, fallen) for brick in bricks)
    return removable, falls