import pytest

from advent.y2024_day04 import WordGrid, solve

EXAMPLE = """\
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_example_answers():
    assert solve(EXAMPLE) == (18, 9)


def test_dimensions_and_lookup():
    grid = WordGrid(EXAMPLE)
    assert (grid.rows, grid.cols) == (10, 10)
    assert grid.char_at(0, 4) == "X"
    assert grid.char_at(9, 9) == "X"


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (10, 0), (0, 10)])
def test_out_of_bounds_is_empty(row, col):
    assert WordGrid(EXAMPLE).char_at(row, col) == ""


def test_word_read_both_ways():
    forward = WordGrid("XMAS\n")
    backward = WordGrid("SAMX\n")
    assert forward.count_xmas_at(0, 0) == 1
    assert backward.count_xmas_at(0, 3) == forward.count_xmas_at(0, 0)
    assert forward.count_xmas_at(0, 1) == 0


def test_cross_detected_only_on_centre():
    grid = WordGrid("M.S\n.A.\nM.S\n")
    assert grid.is_x_mas_at(1, 1)
    assert not grid.is_x_mas_at(0, 0)


def test_cross_needs_both_diagonals():
    grid = WordGrid("M.M\n.A.\nM.S\n")
    assert not grid.is_x_mas_at(1, 1)


def test_grid_needs_newline():
    with pytest.raises(ValueError):
        WordGrid("XMAS")