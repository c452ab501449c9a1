"""Calibration equations solved by inserting operators."""

from __future__ import annotations

import re
from collections.abc import Sequence

_EQUATION_RE = re.compile(r"\s*(\d+):((?:\s+\d+)+)\s*")


def concatenate(a: int, b: int) -> int:
    """Join the decimal digits of ``a`` and ``b``."""
    return a * 10 ** len(str(b)) + b


def can_produce(target: int, numbers: Sequence[int], use_concatenate: bool = False) -> bool:
    """Whether +, * (and optionally ||), applied left to right, can reach ``target``."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    values = {numbers[0]}
    for number in numbers[1:]:
        next_values = set()
        for value in values:
            next_values.add(value + number)
            next_values.add(value * number)
            if use_concatenate:
                next_values.add(concatenate(value, number))
        values = next_values
    return target in values


def parse_equations(text: str) -> list[tuple[int, list[int]]]:
    """Read lines of the form 'target: n n n'."""
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _EQUATION_RE.fullmatch(line)
        if not match:
            raise ValueError(f"malformed equation {line!r}")
        equations.append((int(match.group(1)), [int(n) for n in match.group(2).split()]))
    return equations


def solve(text: str) -> tuple[int, int]:
    """Sum the targets reachable without and with concatenation."""
    part_one = 0
    part_two = 0
    for target, numbers in parse_equations(text):
        if can_produce(target, numbers):
            part_one += target
            part_two += target
        elif can_produce(target, numbers, use_concatenate=True):
            part_two += target
    return part_one, part_two