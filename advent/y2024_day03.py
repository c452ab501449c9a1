"""Scanning corrupted memory for multiplication instructions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from advent.parsing import Parser


class TokenType(Enum):
    DO = "do"
    DONT = "don't"
    MUL = "mul"


@dataclass(frozen=True)
class Token:
    """A recognised instruction; multiplications carry their two operands."""

    type: TokenType
    left: int = 0
    right: int = 0

    @property
    def product(self) -> int:
        return self.left * self.right


def _at_digit(parser: Parser) -> bool:
    return "0" <= parser.current <= "9" and parser.current != ""


def _match_mul(parser: Parser) -> Token | None:
    # A failed match leaves the cursor wherever scanning stopped.
    if not parser.consume("mul"):
        return None
    if parser.current != "(":
        return None
    parser.advance()
    if not _at_digit(parser):
        return None
    left = parser.parse_number()
    if parser.current != ",":
        return None
    parser.advance()
    if not _at_digit(parser):
        return None
    right = parser.parse_number()
    if parser.current != ")":
        return None
    return Token(TokenType.MUL, left, right)


def _match_do_dont(parser: Parser) -> Token | None:
    # Only the "don't" and "do" prefixes are required; the parentheses are not.
    if parser.consume("don't"):
        return Token(TokenType.DONT)
    if parser.consume("do"):
        return Token(TokenType.DO)
    return None


def tokenize(text: str, with_conditionals: bool = False) -> list[Token]:
    """Find the instructions in ``text``, optionally including do/don't."""
    parser = Parser(text)
    tokens = []
    while not parser.at_end_of_file():
        if with_conditionals:
            current = parser.current
            if current == "d":
                token = _match_do_dont(parser)
            elif current == "m":
                token = _match_mul(parser)
            else:
                token = None
        else:
            token = _match_mul(parser)
        if token is None:
            parser.advance()
        else:
            tokens.append(token)
    return tokens


def sum_products(text: str) -> int:
    """Add up every multiplication."""
    return sum(token.product for token in tokenize(text))


def sum_enabled_products(text: str) -> int:
    """Add up multiplications not switched off by a preceding don't."""
    enabled = True
    total = 0
    for token in tokenize(text, with_conditionals=True):
        if token.type is TokenType.DO:
            enabled = True
        elif token.type is TokenType.DONT:
            enabled = False
        elif enabled:
            total += token.product
    return total


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts of the puzzle."""
    return sum_products(text), sum_enabled_products(text)