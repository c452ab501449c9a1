import pytest

from advent.y2023_day21 import parse_garden, reachable_positions, render, solve

EXAMPLE = (
    "...........\n"
    ".....###.#.\n"
    ".###.##..#.\n"
    "..#.#...#..\n"
    "....#.#....\n"
    ".##..S####.\n"
    ".##..#...#.\n"
    ".......##..\n"
    ".##.#.####.\n"
    ".##..##.##.\n"
    "...........\n"
)


def test_example_six_steps():
    assert solve(EXAMPLE, 6) == 16


def test_parse_dimensions_and_start():
    garden = parse_garden(EXAMPLE)
    lines = EXAMPLE.splitlines()
    assert garden.rows == len(lines)
    assert garden.cols == len(lines[0])
    row, col = garden.start
    assert lines[row][col] == "S"
    assert all(lines[r][c] == "#" for r, c in garden.rocks)
    assert len(garden.rocks) == EXAMPLE.count("#")


def test_zero_steps_is_start_only():
    garden = parse_garden(EXAMPLE)
    assert reachable_positions(garden, 0) == {garden.start}


@pytest.mark.parametrize("steps", [1, 2, 5, 6, 9])
def test_positions_are_open_and_have_matching_parity(steps):
    garden = parse_garden(EXAMPLE)
    start_parity = sum(garden.start) % 2
    positions = reachable_positions(garden, steps)
    assert positions
    for position in positions:
        assert garden.is_open(position)
        assert sum(position) % 2 == (start_parity + steps) % 2


def test_two_steps_can_return_to_start():
    garden = parse_garden(EXAMPLE)
    assert garden.start in reachable_positions(garden, 2)


def test_small_open_grid():
    garden = parse_garden("...\n.S.\n...\n")
    assert len(reachable_positions(garden, 1)) == 4
    assert len(reachable_positions(garden, 2)) == 5


def test_render_without_positions_round_trips():
    garden = parse_garden(EXAMPLE)
    assert render(garden, []) == EXAMPLE.replace("S", ".")


def test_render_marks_each_position():
    garden = parse_garden(EXAMPLE)
    positions = reachable_positions(garden, 6)
    drawing = render(garden, positions)
    assert drawing.count("O") == len(positions)
    lines = drawing.splitlines()
    assert all(lines[r][c] == "O" for r, c in positions)


def test_render_rejects_rock():
    garden = parse_garden(EXAMPLE)
    rock = next(iter(garden.rocks))
    with pytest.raises(ValueError):
        render(garden, [rock])


def test_unknown_character_rejected():
    with pytest.raises(ValueError):
        parse_garden("..x\n.S.\n")


def test_missing_start_rejected():
    with pytest.raises(ValueError):
        parse_garden("...\n...\n")


def test_negative_steps_rejected():
    with pytest.raises(ValueError):
        reachable_positions(parse_garden(EXAMPLE), -1)