"""Checking reactor reports for safe level changes."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

MAX_STEP = 3


def parse_reports(text: str) -> list[list[int]]:
    """Read one report per line, each a list of whitespace-separated levels."""
    reports = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        try:
            reports.append([int(field) for field in fields])
        except ValueError:
            raise ValueError(f"malformed report {line!r}") from None
    return reports


def is_safe(report: Sequence[int]) -> bool:
    """A report is safe when levels move steadily in one direction by 1 to 3."""
    if not report:
        raise ValueError("a report needs at least one level")
    diffs = [b - a for a, b in pairwise(report)]
    if not diffs:
        return True
    increasing = diffs[0] > 0
    return all(1 <= abs(diff) <= MAX_STEP and (diff > 0) == increasing for diff in diffs)


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """Safe as it stands, or safe once any single level is removed."""
    if is_safe(report):
        return True
    return any(
        is_safe([*report[:index], *report[index + 1:]]) for index in range(len(report))
    )


def solve(text: str) -> tuple[int, int]:
    """Return the counts of safe reports without and with the dampener."""
    reports = parse_reports(text)
    return (
        sum(1 for report in reports if is_safe(report)),
        sum(1 for report in reports if is_safe_with_dampener(report)),
    )