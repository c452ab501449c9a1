"""Garden regions and the cost of fencing them."""

from __future__ import annotations

Position = tuple[int, int]

_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))


def parse_grid(text: str) -> list[str]:
    """Read the garden as rows of plant letters of equal width."""
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("garden is empty")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {index} has {len(row)} columns, expected {width}")
    return rows


def _plant(grid: list[str], position: Position) -> str | None:
    row, col = position
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def find_regions(grid: list[str]) -> list[list[Position]]:
    """Group orthogonally connected cells of the same plant, in row-major discovery order."""
    seen: set[Position] = set()
    regions: list[list[Position]] = []
    for row, line in enumerate(grid):
        for col, plant in enumerate(line):
            if (row, col) in seen:
                continue
            region: list[Position] = []
            stack = [(row, col)]
            seen.add((row, col))
            while stack:
                current = stack.pop()
                region.append(current)
                r, c = current
                for d_row, d_col in _MOVES:
                    step = (r + d_row, c + d_col)
                    if step not in seen and _plant(grid, step) == plant:
                        seen.add(step)
                        stack.append(step)
            regions.append(region)
    return regions


def perimeter(grid: list[str], region: list[Position]) -> int:
    """Count the cell edges of a region that face another plant or the outside."""
    total = 0
    for row, col in region:
        plant = _plant(grid, (row, col))
        total += sum(
            1 for d_row, d_col in _MOVES if _plant(grid, (row + d_row, col + d_col)) != plant
        )
    return total


def solve(text: str) -> int:
    """Return the total fence price: each region's area times its perimeter."""
    grid = parse_grid(text)
    return sum(len(region) * perimeter(grid, region) for region in find_regions(grid))