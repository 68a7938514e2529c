"""Stack and queue exercises over sequences of values."""

from __future__ import annotations

import heapq
import re
from collections import deque
from collections.abc import Iterable, Sequence

_NUMBER = re.compile(r"\d+")
_CLOSERS = {")": "(", "]": "["}


class EmptyArrayError(IndexError):
    """Raised when a delete is applied to an empty array."""


def parse_int_array(text: str) -> list[int]:
    """Parse an array written like "[1,2,3]" into its integers."""
    return [int(match) for match in _NUMBER.findall(text)]


def apply_ac(program: str, values: Iterable[int]) -> list[int]:
    """Apply R (reverse) and D (drop first) instructions to an array."""
    items = deque(values)
    reversed_view = False
    for instruction in program:
        if instruction == "R":
            reversed_view = not reversed_view
        elif instruction == "D":
            if not items:
                raise EmptyArrayError("delete from empty array")
            if reversed_view:
                items.pop()
            else:
                items.popleft()
    result = list(items)
    if reversed_view:
        result.reverse()
    return result


def format_int_array(values: Iterable[int]) -> str:
    """Format integers as "[a,b,c]"."""
    return "[" + ",".join(str(value) for value in values) + "]"


def is_balanced(line: str) -> bool:
    """Tell whether the round and square brackets in a line are balanced."""
    stack: list[str] = []
    for char in line:
        if char in "([":
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[char]:
                return False
            stack.pop()
    return not stack


def is_vps(text: str) -> bool:
    """Tell whether text is a valid parenthesis string; any other character fails."""
    stack: list[str] = []
    for char in text:
        if stack and stack[-1] == "(" and char == ")":
            stack.pop()
        else:
            stack.append(char)
    return not stack


def next_greater(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and values[pending[-1]] < value:
            result[pending.pop()] = value
        pending.append(index)
    return result


def stack_sequence(targets: Iterable[int]) -> list[str]:
    """Push 1, 2, 3, ... and pop to produce targets; return the "+"/"-" operations.

    Raises ValueError when a stack cannot produce the sequence.
    """
    stack: list[int] = []
    operations: list[str] = []
    next_value = 1
    for target in targets:
        while next_value <= target:
            stack.append(next_value)
            operations.append("+")
            next_value += 1
        if not stack or stack[-1] != target:
            raise ValueError("sequence cannot be produced with a stack")
        stack.pop()
        operations.append("-")
    return operations


def tower_receivers(heights: Iterable[int]) -> list[int]:
    """For each tower, the 1-based position of the nearest taller-or-equal tower to the left, or 0."""
    stack: list[tuple[int, int]] = []
    receivers: list[int] = []
    for position, height in enumerate(heights, start=1):
        while stack and stack[-1][0] < height:
            stack.pop()
        receivers.append(stack[-1][1] if stack else 0)
        stack.append((height, position))
    return receivers


def josephus(n: int, k: int) -> list[int]:
    """Order in which people 1..n are removed when every k-th one leaves."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    circle = deque(range(1, n + 1))
    order: list[int] = []
    count = 1
    while len(circle) > 1:
        person = circle.popleft()
        if count % k == 0:
            order.append(person)
        else:
            circle.append(person)
        count += 1
    order.append(circle[0])
    return order


def zero_sum(values: Iterable[int]) -> int:
    """Sum the values, where each 0 cancels the most recent remaining value."""
    stack: list[int] = []
    for value in values:
        if value == 0 and stack:
            stack.pop()
        else:
            stack.append(value)
    return sum(stack)


def last_card(n: int) -> int:
    """Last card left after repeatedly discarding the top and moving the next to the bottom."""
    if n < 1:
        raise ValueError("n must be positive")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        if len(cards) == 1:
            break
        cards.rotate(-1)
    return cards[0]


def print_order(priorities: Sequence[int], target: int) -> int:
    """1-based turn at which document `target` is printed by a priority printer queue."""
    if not 0 <= target < len(priorities):
        raise ValueError("target is not a document in the queue")
    if any(not 1 <= priority <= 9 for priority in priorities):
        raise ValueError("priorities must lie between 1 and 9")
    queue = deque(enumerate(priorities))
    printed: list[int] = []
    for level in range(9, 0, -1):
        scanned = 0
        while scanned < len(queue):
            if queue[0][1] == level:
                printed.append(queue.popleft()[0])
                scanned = 0
            else:
                queue.rotate(-1)
                scanned += 1
    return printed.index(target) + 1


def is_palindrome(word: str) -> bool:
    """Tell whether a word reads the same both ways."""
    return word == word[::-1]


def running_medians(values: Iterable[int]) -> list[int]:
    """Median of each prefix; for even lengths the smaller middle value."""
    lower: list[int] = []
    upper: list[int] = []
    medians: list[int] = []
    for value in values:
        if lower and value > -lower[0]:
            heapq.heappush(upper, value)
        else:
            heapq.heappush(lower, -value)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        medians.append(-lower[0])
    return medians