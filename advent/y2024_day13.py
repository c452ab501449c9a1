"""Claw machines: the fewest tokens needed to reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass

PRIZE_OFFSET = 10_000_000_000_000
A_COST = 3
B_COST = 1

_MACHINE_RE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\s*\n"
    r"Button B: X\+(\d+), Y\+(\d+)\s*\n"
    r"Prize: X=(\d+), Y=(\d+)"
)
_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")

Vector = tuple[int, int]


@dataclass(frozen=True)
class Machine:
    """The claw movement of each button and where the prize lies."""

    button_a: Vector
    button_b: Vector
    prize: Vector


def parse_machines(text: str) -> list[Machine]:
    """Read blank-line separated blocks of button and prize descriptions."""
    machines = []
    stripped = text.strip()
    if not stripped:
        return machines
    for block in _BLANK_LINE_RE.split(stripped):
        match = _MACHINE_RE.fullmatch(block.strip())
        if not match:
            raise ValueError(f"malformed machine {block!r}")
        ax, ay, bx, by, px, py = (int(value) for value in match.groups())
        machines.append(Machine((ax, ay), (bx, by), (px, py)))
    return machines


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def min_tokens(machine: Machine, offset: int = 0) -> int | None:
    """Tokens needed to win the prize (moved by ``offset`` on both axes), or None.

    The presses come from the unique solution of the two linear equations;
    machines whose buttons are parallel, or whose solution is not whole, give None.
    """
    ax, ay = machine.button_a
    bx, by = machine.button_b
    px, py = machine.prize[0] + offset, machine.prize[1] + offset
    determinant = ax * by - ay * bx
    if determinant == 0:
        return None
    a_presses = _div_toward_zero(px * by - py * bx, determinant)
    b_presses = _div_toward_zero(ax * py - ay * px, determinant)
    if a_presses * ax + b_presses * bx == px and a_presses * ay + b_presses * by == py:
        return A_COST * a_presses + B_COST * b_presses
    return None


def solve(text: str) -> tuple[int, int]:
    """Return the total tokens for the prizes as given and moved far away."""
    machines = parse_machines(text)
    near = (min_tokens(machine) for machine in machines)
    far = (min_tokens(machine, PRIZE_OFFSET) for machine in machines)
    return sum(t for t in near if t is not None), sum(t for t in far if t is not None)