"""Part sorting through chains of workflows."""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import prod

ATTRIBUTES = "xmas"
MIN_RATING = 1
MAX_RATING = 4000
START = "in"
ACCEPT = "A"
REJECT = "R"

_WORKFLOW_RE = re.compile(r"([A-Za-z0-9]+)\{(.*)\}")
_CONDITION_RE = re.compile(r"([A-Za-z])([<>])(\d+):([A-Za-z0-9]+)")
_TARGET_RE = re.compile(r"[A-Za-z0-9]+")

Workflows = dict[str, list["Rule"]]
Part = dict[str, int]


@dataclass(frozen=True)
class Rule:
    """One step of a workflow: an optional comparison and where to go next."""

    target: str
    attribute: str | None = None
    comparison: str | None = None
    value: int = 0

    @property
    def is_conditional(self) -> bool:
        return self.comparison is not None

    def matches(self, part: Part) -> bool:
        if self.attribute is None:
            return True
        rating = part[self.attribute]
        if self.comparison == "<":
            return rating < self.value
        return rating > self.value


def _parse_rule(item: str) -> Rule:
    condition = _CONDITION_RE.fullmatch(item)
    if condition:
        attribute, comparison, value, target = condition.groups()
        if attribute not in ATTRIBUTES:
            raise ValueError(f"unknown attribute {attribute!r} in rule {item!r}")
        return Rule(target, attribute, comparison, int(value))
    if _TARGET_RE.fullmatch(item):
        return Rule(item)
    raise ValueError(f"malformed rule {item!r}")


def _parse_part(line: str) -> Part:
    if not (line.startswith("{") and line.endswith("}")):
        raise ValueError(f"malformed part {line!r}")
    part: Part = {}
    for field in line[1:-1].split(","):
        name, sep, value = field.partition("=")
        if not sep or name not in ATTRIBUTES or not value.isdigit():
            raise ValueError(f"malformed part {line!r}")
        part[name] = int(value)
    if set(part) != set(ATTRIBUTES):
        raise ValueError(f"part {line!r} must rate each of {ATTRIBUTES}")
    return part


def parse_input(text: str) -> tuple[Workflows, list[Part]]:
    """Split the puzzle input into its workflows and its parts."""
    workflow_block, _, part_block = text.partition("\n\n")
    workflows: Workflows = {}
    for line in workflow_block.splitlines():
        if not line.strip():
            continue
        match = _WORKFLOW_RE.fullmatch(line.strip())
        if not match:
            raise ValueError(f"malformed workflow {line!r}")
        name, body = match.groups()
        workflows[name] = [_parse_rule(item) for item in body.split(",")]
    parts = [_parse_part(line.strip()) for line in part_block.splitlines() if line.strip()]
    return workflows, parts


def _workflow(workflows: Workflows, name: str) -> list[Rule]:
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"unknown workflow {name!r}") from None


def is_accepted(workflows: Workflows, part: Part) -> bool:
    """Run a part through the workflows starting at 'in'."""
    name = START
    while name not in (ACCEPT, REJECT):
        rules = _workflow(workflows, name)
        next_name = next((rule.target for rule in rules if rule.matches(part)), None)
        if next_name is None:
            raise ValueError(f"workflow {name!r} has no rule matching {part}")
        name = next_name
    return name == ACCEPT


def accepted_rating_sum(workflows: Workflows, parts: list[Part]) -> int:
    """Sum all ratings of the parts that end up accepted."""
    return sum(sum(part.values()) for part in parts if is_accepted(workflows, part))


def _count(workflows: Workflows, name: str, index: int, ranges: dict[str, tuple[int, int]]) -> int:
    if name == ACCEPT:
        return prod(high - low + 1 for low, high in ranges.values())
    if name == REJECT:
        return 0
    rules = _workflow(workflows, name)
    if index >= len(rules):
        raise ValueError(f"workflow {name!r} has no fallback rule")
    rule = rules[index]
    if not rule.is_conditional:
        return _count(workflows, rule.target, 0, ranges)

    assert rule.attribute is not None
    low, high = ranges[rule.attribute]
    if rule.comparison == "<":
        passing = (low, min(high, rule.value - 1))
        failing = (max(low, rule.value), high)
    else:
        passing = (max(low, rule.value + 1), high)
        failing = (low, min(high, rule.value))

    total = 0
    if passing[0] <= passing[1]:
        total += _count(workflows, rule.target, 0, {**ranges, rule.attribute: passing})
    if failing[0] <= failing[1]:
        total += _count(workflows, name, index + 1, {**ranges, rule.attribute: failing})
    return total


def count_accepted_combinations(workflows: Workflows) -> int:
    """Count rating combinations in 1..4000 for each attribute that are accepted."""
    ranges = {attribute: (MIN_RATING, MAX_RATING) for attribute in ATTRIBUTES}
    return _count(workflows, START, 0, ranges)


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts of the puzzle."""
    workflows, parts = parse_input(text)
    return accepted_rating_sum(workflows, parts), count_accepted_combinations(workflows)