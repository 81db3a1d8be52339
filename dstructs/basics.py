"""Introductory routines: sums, averages, timing, factorial and the towers of Hanoi."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass
class StudentRecord:
    """A student's identifier and score."""

    student_id: str
    score: int


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n (0 when n < 1)."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def _truncating_div(total: int, count: int) -> int:
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def average(scores: Iterable[int]) -> int:
    """Return the integer average of the scores, truncated toward zero."""
    values = list(scores)
    if not values:
        raise ValueError("cannot average an empty collection of scores")
    return _truncating_div(sum(values), len(values))


def class_average(records: Iterable[StudentRecord]) -> int:
    """Return the integer average score of the student records."""
    return average(record.score for record in records)


def difference_of_squares(x: int, y: int) -> int:
    """Return (x + y) * (x - y)."""
    return (x + y) * (x - y)


def scaled_sequence(x: int, n: int) -> list[int]:
    """Return the n values i * x * 10 for i = 0 .. n-1."""
    factor = 10
    return [i * x * factor for i in range(n)]


def time_call(func: Callable[[], object]) -> float:
    """Call func once and return the elapsed wall time in seconds."""
    start = time.perf_counter()
    func()
    return time.perf_counter() - start


def counted_sum(n: int) -> tuple[int, int]:
    """Sum 0 .. n-1 while counting the loop steps; return (sum, steps)."""
    total = 0
    steps = 0
    for i in range(n):
        total += i
        steps += 1
    return total, steps


def factorial(n: int) -> int:
    """Return n! computed recursively; negative n is an error."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def factorial_step_count(n: int) -> int:
    """Return the number of program steps the recursive factorial takes for n."""
    steps = 0
    while True:
        steps += 1  # the call itself
        if n < 0:
            return steps + 1  # return statement
        steps += 1  # the zero test
        if n == 0:
            return steps + 1  # return statement
        steps += 1  # the recursive return
        n -= 1


def hanoi(n: int, source: str, spare: str, target: str) -> list[tuple[str, str]]:
    """Return the moves (from peg, to peg) that carry n discs from source to target."""
    if n < 1:
        raise ValueError("the number of discs must be at least 1")
    moves: list[tuple[str, str]] = []

    def _move(count: int, frm: str, via: str, to: str) -> None:
        if count == 1:
            moves.append((frm, to))
            return
        _move(count - 1, frm, to, via)
        moves.append((frm, to))
        _move(count - 1, via, frm, to)

    _move(n, source, spare, target)
    return moves