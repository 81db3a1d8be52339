"""Searching records by key, and optimal binary search tree tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class Record:
    """A record with a search key and its data."""

    key: int
    data: Any = None


def sequential_search(records: Sequence[Record], key: int) -> int | None:
    """Return the index of the first record with key, or None."""
    return next((i for i, record in enumerate(records) if record.key == key), None)


def binary_search(records: Sequence[Record], key: int) -> int | None:
    """Return the index of a record with key in records sorted by key, or None."""
    left, right = 0, len(records) - 1
    while left <= right:
        middle = (left + right) // 2
        probe = records[middle].key
        if key == probe:
            return middle
        if key > probe:
            left = middle + 1
        else:
            right = middle - 1
    return None


def interpolation_search(records: Sequence[Record], key: int) -> int | None:
    """Return the index of a record with key in records sorted by key, or None.

    The probe position is interpolated from the keys at both ends of the range.
    """
    n = len(records)
    if n == 0:
        return None
    low, high = 0, n - 1
    while low <= high and records[low].key < key <= records[high].key:
        low_key, high_key = records[low].key, records[high].key
        mid = low + (key - low_key) * (high - low) // (high_key - low_key)
        probe = records[mid].key
        if probe == key:
            return mid
        if probe < key:
            low = mid + 1
        else:
            high = mid - 1
    if low < n and records[low].key == key:
        return low
    return None


def fibonacci_numbers(count: int) -> list[int]:
    """Return the first count Fibonacci numbers, starting 0, 1."""
    if count < 0:
        raise ValueError("count cannot be negative")
    numbers = [0, 1][:count]
    while len(numbers) < count:
        numbers.append(numbers[-1] + numbers[-2])
    return numbers


def fibonacci_search(records: Sequence[Record], key: int) -> int | None:
    """Return the index of a record with key in records sorted by key, or None.

    The probes follow a Fibonacci tree, shifted when the key lies beyond its root.
    """
    n = len(records)
    if n == 0:
        return None
    if n == 1:
        return 0 if records[0].key == key else None

    def key_at(position: int) -> int:
        return records[position - 1].key

    fib = [0, 1]
    while fib[-1] <= n:
        fib.append(fib[-1] + fib[-2])
    root = len(fib) - 2

    i = fib[root - 1]
    p = fib[root - 2]
    q = fib[root - 3]
    if key_at(i) < key:
        i += n + 1 - fib[root]

    while i > 0:
        probe = key_at(i)
        if probe == key:
            return i - 1
        if probe < key:
            if p == 1:
                i = 0
            else:
                i += q
                p -= q
                q -= p
        else:
            if q == 0:
                i = 0
            else:
                i -= q
                p, q = q, p - q
    return None


_RULE = "-" * 74


@dataclass
class OptimalBST:
    """Weight, cost and root tables of an optimal binary search tree.

    Entry [i][j] describes the tree over keys i+1..j; only j >= i is meaningful.
    """

    weight: list[list[int]]
    cost: list[list[int]]
    root: list[list[int]]

    def render(self) -> str:
        """Lay out the tables diagonal by diagonal."""
        n = len(self.weight)
        lines = []
        for x in range(n):
            pairs = [(i, i + x) for i in range(n - x)]
            lines.append("".join(f" W{i}{j}={self.weight[i][j]}\t| " for i, j in pairs))
            lines.append("".join(f" C{i}{j}={self.cost[i][j]}\t| " for i, j in pairs))
            lines.append("".join(f" R{i}{j}=a{self.root[i][j]}\t| " for i, j in pairs))
            lines.append(_RULE)
        return "\n".join(lines) + "\n"


def _find_min(cost: list[list[int]], i: int, j: int) -> int:
    best = cost[i][i + 1] + cost[i + 1][j]
    choice = 0
    for m in range(i + 1, j + 1):
        candidate = cost[i][m - 1] + cost[m][j]
        if best >= candidate:
            best = candidate
            choice = m
    return choice


def optimal_bst(success: Sequence[int], fail: Sequence[int]) -> OptimalBST:
    """Build the optimal search tree tables.

    ``success[k-1]`` is how often key k is sought; ``fail[i]`` how often a
    search ends between key i and key i+1. There is one more fail than success.
    """
    if len(fail) != len(success) + 1:
        raise ValueError("there must be exactly one more fail frequency than success")
    p = [0, *success]
    q = list(fail)
    n = len(q)
    weight = [[0] * n for _ in range(n)]
    cost = [[0] * n for _ in range(n)]
    root = [[0] * n for _ in range(n)]
    for i in range(n):
        weight[i][i] = q[i]
    for i in range(n - 1):
        weight[i][i + 1] = q[i] + q[i + 1] + p[i + 1]
        cost[i][i + 1] = weight[i][i + 1]
        root[i][i + 1] = i + 1
    for x in range(2, n):
        for i in range(n - x):
            j = i + x
            weight[i][j] = weight[i][j - 1] + p[j] + q[j]
            k = _find_min(cost, i, j)
            cost[i][j] = weight[i][j] + cost[i][k - 1] + cost[k][j]
            root[i][j] = k
    return OptimalBST(weight, cost, root)