"""Small arithmetic and brute-force puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations, count, islice

_BOARD = 8
_PAPER = 10
_SWITCHES_PER_LINE = 20


def warp_moves(x: int, y: int) -> int:
    """Estimate the number of warp moves needed to travel from x to y."""
    distance = y - x
    if distance < 0:
        raise ValueError("y must not lie before x")
    span = distance + distance % 2
    half = span // 2
    steps = 0
    triangle = 0
    for size in count(1):
        triangle += size
        if half <= triangle:
            break
        steps += 1
    moves = steps * 2
    if span < triangle * 2 - moves:
        moves -= 1
    return moves


def add_big(a: str, b: str) -> str:
    """Add two non-negative decimal numbers given as digit strings."""
    for operand in (a, b):
        if not (operand.isascii() and operand.isdigit()):
            raise ValueError(f"not a decimal number: {operand!r}")
    width = max(len(a), len(b))
    digits: list[str] = []
    carry = 0
    for left, right in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        carry, digit = divmod(int(left) + int(right) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def blackjack(cards: Iterable[int], limit: int) -> int:
    """Largest sum of three cards not exceeding limit, or 0 if none qualifies."""
    totals = (sum(trio) for trio in combinations(cards, 3))
    return max((total for total in totals if total <= limit), default=0)


def body_ranks(people: Sequence[tuple[int, int]]) -> list[int]:
    """Rank each (weight, height) by how many others are larger in both, plus one."""
    return [
        1 + sum(1 for other_w, other_h in people if weight < other_w and height < other_h)
        for weight, height in people
    ]


def min_repaint(board: Sequence[str]) -> int:
    """Fewest squares to repaint so some 8x8 window of W/B squares becomes a chessboard."""
    rows = len(board)
    cols = min((len(row) for row in board), default=0)
    if rows < _BOARD or cols < _BOARD:
        raise ValueError("board must be at least 8 by 8")
    cells = _BOARD * _BOARD
    best = cells
    for top in range(rows - _BOARD + 1):
        for left in range(cols - _BOARD + 1):
            mismatches = sum(
                board[top + i][left + j] != ("W" if (i + j) % 2 == 0 else "B")
                for i in range(_BOARD)
                for j in range(_BOARD)
            )
            best = min(best, mismatches, cells - mismatches)
    return best


def paper_area(corners: Iterable[tuple[int, int]]) -> int:
    """Area covered by 10x10 sheets placed with their corners at the given points."""
    covered = {
        (x + dx, y + dy)
        for x, y in corners
        for dx in range(_PAPER)
        for dy in range(_PAPER)
    }
    return len(covered)


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def smallest_generator(n: int) -> int:
    """Smallest m with m plus its digit sum equal to n, or 0 if there is none."""
    return next((m for m in range(n) if m + _digit_sum(m) == n), 0)


def apocalypse_number(n: int) -> int:
    """The n-th smallest number whose decimal form contains 666."""
    if n < 1:
        raise ValueError("n must be positive")
    matches = (number for number in count(666) if "666" in str(number))
    return next(islice(matches, n - 1, None))


def factorial(n: int) -> int:
    """n factorial."""
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, counting from fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def sugar_bags(n: int) -> int:
    """Fewest 3 kg and 5 kg bags holding exactly n kg.

    Raises ValueError when n cannot be made up exactly.
    """
    for threes in range(n // 3 + 1):
        rest = n - 3 * threes
        if rest % 5 == 0:
            return threes + rest // 5
    raise ValueError(f"{n} kg cannot be packed exactly")


def _toggle(lights: list[int], index: int) -> None:
    """Switch the light at index on if it is off, off otherwise."""
    lights[index] = 0 if lights[index] else 1


def toggle_switches(states: Iterable[int], students: Iterable[tuple[int, int]]) -> list[int]:
    """Apply each student's (sex, number) action to a row of switches.

    Sex 1 toggles every multiple of number; any other sex toggles the switch at
    number and the widest symmetric run around it.
    """
    lights = list(states)
    for sex, number in students:
        if not 1 <= number <= len(lights):
            raise ValueError(f"switch {number} does not exist")
        if sex == 1:
            for index in range(number - 1, len(lights), number):
                _toggle(lights, index)
            continue
        centre = number - 1
        _toggle(lights, centre)
        reach = 1
        while (
            centre - reach >= 0
            and centre + reach < len(lights)
            and lights[centre - reach] == lights[centre + reach]
        ):
            _toggle(lights, centre - reach)
            _toggle(lights, centre + reach)
            reach += 1
    return lights


def format_switches(states: Iterable[int]) -> str:
    """Render switch states space-separated, twenty to a line."""
    return "".join(
        f"{state} " + ("\n" if position % _SWITCHES_PER_LINE == 0 else "")
        for position, state in enumerate(states, start=1)
    )


def _hanoi(n: int, start: int, target: int, spare: int) -> Iterator[tuple[int, int]]:
    if n == 0:
        return
    yield from _hanoi(n - 1, start, spare, target)
    yield start, target
    yield from _hanoi(n - 1, spare, target, start)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Moves (from, to) carrying n disks from peg 1 to peg 3."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_hanoi(n, 1, 3, 2))


def last_computer(a: int, b: int) -> int:
    """Computer (1 to 10) that processes the last of a**b jobs handed out in turn."""
    if b < 1:
        raise ValueError("b must be positive")
    return pow(a, b, 10) or 10


def verification_digit(digits: Iterable[int]) -> int:
    """Sum of the squares of the digits, modulo 10."""
    return sum(digit * digit for digit in digits) % 10


def primes_between(m: int, n: int) -> list[int]:
    """Primes p with m <= p <= n, in ascending order."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for candidate in range(2, math.isqrt(n) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate :: candidate] = bytes(len(range(candidate * candidate, n + 1, candidate)))
    return [number for number in range(max(m, 2), n + 1) if sieve[number]]


def divide_money(total: int, people: int) -> tuple[int, int]:
    """Share each person receives and the amount left over."""
    return divmod(total, people)