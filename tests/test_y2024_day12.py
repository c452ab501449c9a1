import pytest

from advent.y2024_day12 import find_regions, parse_grid, perimeter, solve

EXAMPLE = (
    "RRRRIICCFF\n"
    "RRRRIICCCF\n"
    "VVRRRCCFFF\n"
    "VVRCCCJFFF\n"
    "VVVVCJJCJF\n"
    "VVVVCCJJEE\n"
    "VVIVCJJEEE\n"
    "MIIIIIJJEE\n"
    "MIIISIJEEE\n"
    "MMMISSJEEE\n"
)


def test_example_price():
    assert solve(EXAMPLE) == 1930


def test_regions_partition_the_grid():
    grid = parse_grid(EXAMPLE)
    regions = find_regions(grid)
    cells = [cell for region in regions for cell in region]
    assert len(cells) == len(set(cells)) == len(grid) * len(grid[0])


def test_regions_hold_one_plant():
    grid = parse_grid(EXAMPLE)
    for region in find_regions(grid):
        assert len({grid[row][col] for row, col in region}) == 1


def test_first_region_starts_at_origin():
    grid = parse_grid(EXAMPLE)
    assert (0, 0) in find_regions(grid)[0]


def test_single_cell():
    assert solve("A\n") == 4


def test_checkerboard():
    grid = parse_grid("AB\nBA\n")
    regions = find_regions(grid)
    assert len(regions) == 4
    assert solve("AB\nBA\n") == 16


def test_uniform_grid_is_one_region():
    grid = parse_grid("CCC\nCCC\n")
    regions = find_regions(grid)
    assert len(regions) == 1
    assert perimeter(grid, regions[0]) == 2 * (len(grid) + len(grid[0]))


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        parse_grid("AAA\nAA\n")


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        parse_grid("")