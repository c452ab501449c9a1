"""Hiking trails that climb a topographic map from height 0 to height 9."""

from __future__ import annotations

from collections.abc import Iterator

Position = tuple[int, int]

TRAILHEAD = 0
SUMMIT = 9

_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))


class TopoMap:
    """A rectangular height map; cells that are not digits cannot be walked on."""

    def __init__(self, text: str) -> None:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("topographic map is empty")
        self.rows = len(lines)
        self.cols = len(lines[0])
        self.heights: dict[Position, int] = {}
        for row, line in enumerate(lines):
            if len(line) != self.cols:
                raise ValueError(f"row {row} has {len(line)} columns, expected {self.cols}")
            for col, ch in enumerate(line):
                if "0" <= ch <= "9":
                    self.heights[(row, col)] = int(ch)

    def trailheads(self) -> Iterator[Position]:
        """Yield every height-0 position, row by row."""
        for position, height in self.heights.items():
            if height == TRAILHEAD:
                yield position

    def trail_summary(self, head: Position) -> tuple[int, int]:
        """Return (score, rating) of a trailhead.

        The score is the number of distinct summits reachable by climbing one
        step at a time; the rating is the number of distinct such trails.
        """
        if self.heights.get(head) != TRAILHEAD:
            raise ValueError(f"{head} is not a trailhead")
        paths: dict[Position, int] = {head: 1}
        for height in range(TRAILHEAD + 1, SUMMIT + 1):
            reached: dict[Position, int] = {}
            for (row, col), count in paths.items():
                for d_row, d_col in _MOVES:
                    step = (row + d_row, col + d_col)
                    if self.heights.get(step) == height:
                        reached[step] = reached.get(step, 0) + count
            paths = reached
        return len(paths), sum(paths.values())


def solve(text: str) -> tuple[int, int]:
    """Return the summed scores and the summed ratings of all trailheads."""
    topo = TopoMap(text)
    summaries = [topo.trail_summary(head) for head in topo.trailheads()]
    return sum(score for score, _ in summaries), sum(rating for _, rating in summaries)