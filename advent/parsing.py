"""Cursor-based text scanning helpers shared by the puzzle solvers."""

from __future__ import annotations

from os import PathLike

_MASK32 = 0xFFFFFFFF


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alnum(ch: str) -> bool:
    return _is_digit(ch) or "A" <= ch <= "Z" or "a" <= ch <= "z"


class Parser:
    """A forward-only cursor over a block of puzzle input."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.offset = 0

    @property
    def size(self) -> int:
        return len(self.text)

    @property
    def current(self) -> str:
        """The character under the cursor, or an empty string at the end."""
        return self.text[self.offset] if self.offset < self.size else ""

    def _parse_number(self, allow_sign: bool) -> int:
        number: int | None = None
        negative = False
        while not self.at_end_of_file():
            ch = self.text[self.offset]
            if _is_digit(ch):
                number = int(ch) if number is None else number * 10 + int(ch)
            elif ch == "-":
                if allow_sign:
                    negative = True
            else:
                if number is not None:
                    return -number if negative else number
                negative = False
            self.offset += 1
        if number is None:
            return 0
        return -number if negative else number

    def parse_number(self) -> int:
        """Skip to the next run of digits and return its value.

        The cursor is left on the first character after the digits. If no
        digits remain, the input is consumed and 0 is returned.
        """
        return self._parse_number(allow_sign=False)

    def parse_signed_number(self) -> int:
        """Like parse_number, but a '-' directly before the digits negates it."""
        return self._parse_number(allow_sign=True)

    def parse_word(self) -> str:
        """Skip to the next run of ASCII letters and digits and return it."""
        while not self.at_end_of_file() and not _is_alnum(self.text[self.offset]):
            self.offset += 1
        start = self.offset
        while not self.at_end_of_file() and _is_alnum(self.text[self.offset]):
            self.offset += 1
        return self.text[start:self.offset]

    def parse_until_space(self) -> str:
        """Return the text up to the next space, leaving the cursor on it.

        If there is no space before the end of input, the input is consumed
        and an empty string is returned.
        """
        index = self.text.find(" ", self.offset)
        if index < 0:
            self.offset = self.size
            return ""
        word = self.text[self.offset:index]
        self.offset = index
        return word

    def consume(self, match: str) -> bool:
        """Advance past ``match`` if it starts at the cursor.

        The match must end strictly before the end of input; otherwise, and
        on any mismatch, the cursor does not move.
        """
        if self.offset + len(match) < self.size and self.text.startswith(match, self.offset):
            self.offset += len(match)
            return True
        return False

    def at_end_of_line(self) -> bool:
        return self.offset < self.size and self.text[self.offset] == "\n"

    def at_end_of_file(self) -> bool:
        return self.offset >= self.size

    def advance(self, by: int = 1) -> None:
        """Move the cursor forward, never past the end of input."""
        self.offset = min(self.offset + by, self.size)


def super_fast_hash(data: bytes | str) -> int:
    """Paul Hsieh's 32-bit SuperFastHash of ``data``."""
    if isinstance(data, str):
        data = data.encode()
    length = len(data)
    if length == 0:
        return 0

    def get16(pos: int) -> int:
        return data[pos] | (data[pos + 1] << 8)

    def signed(byte: int) -> int:
        return byte - 256 if byte >= 128 else byte

    h = length
    rem = length & 3
    pos = 0
    for _ in range(length >> 2):
        h = (h + get16(pos)) & _MASK32
        tmp = ((get16(pos + 2) << 11) ^ h) & _MASK32
        h = ((h << 16) ^ tmp) & _MASK32
        pos += 4
        h = (h + (h >> 11)) & _MASK32

    if rem == 3:
        h = (h + get16(pos)) & _MASK32
        h ^= (h << 16) & _MASK32
        h ^= (signed(data[pos + 2]) << 18) & _MASK32
        h = (h + (h >> 11)) & _MASK32
    elif rem == 2:
        h = (h + get16(pos)) & _MASK32
        h ^= (h << 11) & _MASK32
        h = (h + (h >> 17)) & _MASK32
    elif rem == 1:
        h = (h + signed(data[pos])) & _MASK32
        h ^= (h << 10) & _MASK32
        h = (h + (h >> 1)) & _MASK32

    h ^= (h << 3) & _MASK32
    h = (h + (h >> 5)) & _MASK32
    h ^= (h << 4) & _MASK32
    h = (h + (h >> 17)) & _MASK32
    h ^= (h << 25) & _MASK32
    h = (h + (h >> 6)) & _MASK32
    return h


def match_keyword(line: str, index: int, keyword: str) -> bool:
    """Return whether ``keyword`` appears in ``line`` starting at ``index``."""
    return line.startswith(keyword, index)


def read_input(path: str | PathLike[str]) -> str:
    """Read a puzzle input file verbatim, keeping its line endings."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()