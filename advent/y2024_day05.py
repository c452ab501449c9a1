"""Validating and repairing print-queue page orders."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set

MAX_PAGE = 99

Rules = dict[int, set[int]]


def _page(value: str, line: str) -> int:
    try:
        page = int(value)
    except ValueError:
        raise ValueError(f"malformed page in {line!r}") from None
    if not 0 <= page <= MAX_PAGE:
        raise ValueError(f"page {page} out of range 0..{MAX_PAGE}")
    return page


def parse_input(text: str) -> tuple[Rules, list[list[int]]]:
    """Read 'a|b' ordering rules, a blank line, then comma-separated updates.

    The rules map each page to the set of pages that must come after it.
    """
    rule_block, _, update_block = text.partition("\n\n")
    rules: Rules = {}
    for line in rule_block.splitlines():
        if not line.strip():
            continue
        before, sep, after = line.strip().partition("|")
        if not sep:
            raise ValueError(f"malformed rule {line!r}")
        rules.setdefault(_page(before, line), set()).add(_page(after, line))
    updates = [
        [int(value) for value in line.strip().split(",")]
        for line in update_block.splitlines()
        if line.strip()
    ]
    return rules, updates


def is_correct(pages: Sequence[int], rules: Mapping[int, Set[int]]) -> bool:
    """Whether no page appears after a page it must precede."""
    seen: set[int] = set()
    for page in pages:
        if rules.get(page, set()) & seen:
            return False
        seen.add(page)
    return True


def reorder(pages: Sequence[int], rules: Mapping[int, Set[int]]) -> list[int]:
    """Put the pages in an order that respects the rules."""
    remaining = list(pages)
    ordered = []
    while remaining:
        for index, page in enumerate(remaining):
            if not any(
                page in rules.get(other, set())
                for other_index, other in enumerate(remaining)
                if other_index != index
            ):
                break
        else:
            raise ValueError(f"rules form a cycle among pages {remaining}")
        ordered.append(remaining.pop(index))
    return ordered


def solve(text: str) -> tuple[int, int]:
    """Sum middle pages of correct updates, then of repaired incorrect ones."""
    rules, updates = parse_input(text)
    correct_total = 0
    repaired_total = 0
    for pages in updates:
        if is_correct(pages, rules):
            correct_total += pages[len(pages) // 2]
        else:
            fixed = reorder(pages, rules)
            repaired_total += fixed[len(fixed) // 2]
    return correct_total, repaired_total