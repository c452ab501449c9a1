"""Stones that change and split every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MULTIPLIER = 2024
SHORT_BLINKS = 25
LONG_BLINKS = 75


def split_number(number: int) -> tuple[int, int]:
    """Split a number with an even count of digits into its left and right halves."""
    if number < 0:
        raise ValueError("number must not be negative")
    digits = str(number)
    if len(digits) % 2:
        raise ValueError(f"{number} has an odd number of digits")
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


def parse_stones(text: str) -> list[int]:
    """Read the whitespace-separated stone numbers on the first line."""
    line = text.split("\n", 1)[0]
    try:
        return [int(field) for field in line.split()]
    except ValueError:
        raise ValueError(f"malformed stone list {line!r}") from None


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """How many stones there are after blinking ``blinks`` times."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    counts = Counter(stones)
    for _ in range(blinks):
        changed: Counter[int] = Counter()
        for stone, count in counts.items():
            if stone == 0:
                changed[1] += count
            elif len(str(stone)) % 2 == 0:
                left, right = split_number(stone)
                changed[left] += count
                changed[right] += count
            else:
                changed[stone * MULTIPLIER] += count
        counts = changed
    return sum(counts.values())


def solve(text: str) -> tuple[int, int]:
    """Return the stone counts after 25 and after 75 blinks."""
    stones = parse_stones(text)
    return count_stones(stones, SHORT_BLINKS), count_stones(stones, LONG_BLINKS)