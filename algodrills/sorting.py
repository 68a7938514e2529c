"""Sorting, searching and descriptive statistics exercises."""

from __future__ import annotations

import bisect
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from fractions import Fraction
from itertools import combinations

DWARF_COUNT = 7
DWARF_TOTAL = 100


def _require(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def sort_members(members: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Sort (age, name) pairs by age, keeping the order of joining on equal ages."""
    return sorted(members, key=lambda member: member[0])


def sort_words(words: Iterable[str]) -> list[str]:
    """Distinct words, shorter first, then in dictionary order."""
    return sorted(set(words), key=lambda word: (len(word), word))


def binary_search(sorted_values: Sequence[int], target: int) -> bool:
    """Tell whether target occurs in an ascending sequence."""
    index = bisect.bisect_left(sorted_values, target)
    return index < len(sorted_values) and sorted_values[index] == target


def membership(values: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it occurs among values."""
    ordered = sorted(values)
    return [binary_search(ordered, query) for query in queries]


def sort_ascending(values: Iterable[int]) -> list[int]:
    """Values in ascending order."""
    return sorted(values)


def sort_chars_desc(text: str) -> str:
    """The characters of text in descending order."""
    return "".join(sorted(text, reverse=True))


def sort_points(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Points ordered by x, then by y."""
    return sorted(points, key=lambda point: (point[0], point[1]))


def mean_rounded(values: Iterable[int]) -> int:
    """Arithmetic mean rounded to the nearest integer, halves away from zero."""
    items = _require(values)
    mean = Fraction(sum(items), len(items))
    magnitude = math.floor(abs(mean) + Fraction(1, 2))
    return magnitude if mean >= 0 else -magnitude


def median(values: Iterable[int]) -> int:
    """Middle value; for an even count, the upper of the two middle values."""
    items = sorted(_require(values))
    return items[len(items) // 2]


def mode(values: Iterable[int]) -> int:
    """Most frequent value; on a tie, the second smallest of the tied values."""
    counts = Counter(_require(values))
    highest = max(counts.values())
    tied = sorted(value for value, count in counts.items() if count == highest)
    return tied[1] if len(tied) > 1 else tied[0]


def value_range(values: Iterable[int]) -> int:
    """Difference between the largest and the smallest value."""
    items = _require(values)
    return max(items) - min(items)


@dataclass(frozen=True)
class Summary:
    """Mean, median, mode and range of a set of integers."""

    mean: int
    median: int
    mode: int
    spread: int


def summarize(values: Iterable[int]) -> Summary:
    """Compute all four statistics at once."""
    items = _require(values)
    return Summary(
        mean=mean_rounded(items),
        median=median(items),
        mode=mode(items),
        spread=value_range(items),
    )


def smallest_seven(heights: Iterable[int]) -> list[int]:
    """The seven smallest heights in ascending order."""
    return sorted(heights)[:DWARF_COUNT]


def find_seven_dwarfs(heights: Iterable[int]) -> list[int]:
    """Drop the two heights whose removal leaves a total of 100, keeping input order.

    Raises ValueError when no such pair exists.
    """
    items = list(heights)
    excess = sum(items) - DWARF_TOTAL
    for first, second in combinations(range(len(items)), 2):
        if items[first] + items[second] == excess:
            return [height for position, height in enumerate(items) if position not in (first, second)]
    raise ValueError("no two heights can be removed to leave the required total")