"""Word search for XMAS and crossed MAS shapes."""

from __future__ import annotations

WORD_TAIL = "MAS"

_DIRECTIONS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))
_DIAGONALS = (((1, -1), (-1, 1)), ((-1, -1), (1, 1)))


class WordGrid:
    """A grid of letters laid out as newline-terminated rows of equal width."""

    def __init__(self, text: str) -> None:
        width = text.find("\n")
        if width < 0:
            raise ValueError("grid rows must end with a newline")
        self.text = text
        self.cols = width
        self.rows = len(text) // (width + 1)

    def char_at(self, row: int, col: int) -> str:
        """The letter at a position, or an empty string outside the grid."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return ""
        index = row * (self.cols + 1) + col
        return self.text[index] if index < len(self.text) else ""

    def count_xmas_at(self, row: int, col: int) -> int:
        """How many times XMAS is spelled starting from this position."""
        if self.char_at(row, col) != "X":
            return 0
        return sum(
            all(
                self.char_at(row + step * d_row, col + step * d_col) == letter
                for step, letter in enumerate(WORD_TAIL, start=1)
            )
            for d_col, d_row in _DIRECTIONS
        )

    def is_x_mas_at(self, row: int, col: int) -> bool:
        """Whether two diagonal MAS words cross at this 'A'."""
        if self.char_at(row, col) != "A":
            return False
        for (dr1, dc1), (dr2, dc2) in _DIAGONALS:
            ends = {self.char_at(row + dr1, col + dc1), self.char_at(row + dr2, col + dc2)}
            if ends != {"M", "S"}:
                return False
        return True


def solve(text: str) -> tuple[int, int]:
    """Return the number of XMAS words and of X-MAS crosses."""
    grid = WordGrid(text)
    positions = [(row, col) for row in range(grid.rows) for col in range(grid.cols)]
    return (
        sum(grid.count_xmas_at(row, col) for row, col in positions),
        sum(1 for row, col in positions if grid.is_x_mas_at(row, col)),
    )