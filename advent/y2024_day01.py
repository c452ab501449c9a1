"""Comparing two lists of location ids."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence

_NUMBER_RE = re.compile(r"\d+")


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Read two columns of numbers, stopping at the first blank line."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            break
        numbers = _NUMBER_RE.findall(line)
        if len(numbers) != 2:
            raise ValueError(f"expected two numbers in {line!r}")
        left.append(int(numbers[0]))
        right.append(int(numbers[1]))
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum the distances between the lists once both are sorted."""
    if len(left) != len(right):
        raise ValueError("lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left value times the number of times it appears on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def solve(text: str) -> tuple[int, int]:
    """Return the total distance and the similarity score."""
    left, right = parse_lists(text)
    return total_distance(left, right), similarity_score(left, right)