"""Antinodes produced by pairs of same-frequency antennas."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import combinations

Position = tuple[int, int]

EMPTY = "."


class AntennaMap:
    """A rectangular map of antennas, grouped by frequency character."""

    def __init__(self, text: str) -> None:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("antenna map is empty")
        self.rows = len(lines)
        self.cols = len(lines[0])
        self.antennas: dict[str, list[Position]] = {}
        for row, line in enumerate(lines):
            for col, ch in enumerate(line):
                if ch == EMPTY:
                    continue
                if not self.in_bounds((row, col)):
                    raise ValueError(f"antenna {ch!r} at {(row, col)} is outside the map")
                self.antennas.setdefault(ch, []).append((row, col))

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _pairs(self) -> Iterator[tuple[Position, Position]]:
        for positions in self.antennas.values():
            yield from combinations(positions, 2)

    def _ray(self, origin: Position, step: Position) -> Iterator[Position]:
        row, col = origin
        d_row, d_col = step
        row, col = row + d_row, col + d_col
        while self.in_bounds((row, col)):
            yield (row, col)
            row, col = row + d_row, col + d_col

    def antinodes(self) -> set[Position]:
        """Points twice as far from one antenna of a pair as from the other."""
        found: set[Position] = set()
        for (r1, c1), (r2, c2) in self._pairs():
            d_row, d_col = r1 - r2, c1 - c2
            for candidate in ((r1 + d_row, c1 + d_col), (r2 - d_row, c2 - d_col)):
                if self.in_bounds(candidate):
                    found.add(candidate)
        return found

    def resonant_antinodes(self) -> set[Position]:
        """Every in-bounds point on the line through a pair, at whole multiples of their gap."""
        found: set[Position] = set()
        for first, second in self._pairs():
            d_row, d_col = first[0] - second[0], first[1] - second[1]
            found.update(self._ray(first, (d_row, d_col)))
            found.update(self._ray(second, (-d_row, -d_col)))
            found.update((first, second))
        return found


def solve(text: str) -> tuple[int, int]:
    """Return the counts of antinodes and of resonant antinodes."""
    antenna_map = AntennaMap(text)
    return len(antenna_map.antinodes()), len(antenna_map.resonant_antinodes())