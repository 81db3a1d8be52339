"""Comparison sorts, merging, heap sort and LSD radix sort on lists of keys."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by bubble sort.

    Each pass ends at the position of the last swap of the previous pass.
    """
    items = list(values)
    bound = len(items) - 1
    while bound > 0:
        last_swap = 0
        for i in range(bound):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                last_swap = i
        bound = last_swap
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by repeatedly selecting the smallest remaining one."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _insertion_steps(items: list[Any]) -> Iterable[list[Any]]:
    for j in range(1, len(items)):
        current = items[j]
        i = j - 1
        while i >= 0 and current < items[i]:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = current
        yield items[: j + 1]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by insertion sort."""
    items = list(values)
    for _ in _insertion_steps(items):
        pass
    return items


def insertion_sort_steps(values: Iterable[Any]) -> list[list[Any]]:
    """Return the sorted prefix after each insertion step (one per element after the first)."""
    return list(_insertion_steps(list(values)))


def merge_lists(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list; ties take from first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_ranges(values: Sequence[Any], left: int, middle: int, right: int) -> list[Any]:
    """Merge the sorted runs values[left..middle] and values[middle+1..right].

    The bounds are inclusive; the merged run of length right-left+1 is returned.
    """
    if not 0 <= left <= middle + 1 <= right + 1 <= len(values):
        raise IndexError(
            f"ranges [{left}..{middle}] and [{middle + 1}..{right}] "
            f"do not fit a sequence of length {len(values)}"
        )
    return merge_lists(values[left : middle + 1], values[middle + 1 : right + 1])


def merge_pass(values: Sequence[Any], length: int) -> list[Any]:
    """Merge neighbouring sorted runs of the given length; return the new list."""
    if length < 1:
        raise ValueError("run length must be at least 1")
    n = len(values)
    result: list[Any] = []
    start = 0
    while start <= n - 2 * length:
        result.extend(merge_ranges(values, start, start + length - 1, start + 2 * length - 1))
        start += 2 * length
    if start + length < n:
        result.extend(merge_ranges(values, start, start + length - 1, n - 1))
    else:
        result.extend(values[start:])
    return result


def merge_sort_iterative(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by bottom-up merge passes of doubling run length."""
    items = list(values)
    length = 1
    while length < len(items):
        items = merge_pass(items, length)
        length *= 2
    return items


def _merge_in_place(items: list[Any], left: int, middle: int, right: int) -> None:
    i = left
    j = middle + 1
    while j != right + 1 and i != j:
        if items[j] <= items[i]:
            items.insert(i, items.pop(j))
            j += 1
        i += 1


def merge_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by recursive merge sort with in-place shifting merges."""
    items = list(values)

    def _sort(left: int, middle: int, right: int) -> None:
        if left >= right:
            return
        _sort(left, (left + middle) // 2, middle)
        _sort(middle + 1, (middle + 1 + right) // 2, right)
        _merge_in_place(items, left, middle, right)

    if items:
        last = len(items) - 1
        _sort(0, last // 2, last)
    return items


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by quick sort using the first key of each range as pivot."""
    items = list(values)

    def _sort(left: int, right: int) -> None:
        while left < right:
            pivot = items[left]
            i, j = left + 1, right
            while True:
                while i <= right and items[i] < pivot:
                    i += 1
                while items[j] > pivot:
                    j -= 1
                if i < j:
                    items[i], items[j] = items[j], items[i]
                    i += 1
                    j -= 1
                else:
                    break
            items[left], items[j] = items[j], items[left]
            if j - left < right - j:
                _sort(left, j - 1)
                left = j + 1
            else:
                _sort(j + 1, right)
                right = j - 1

    _sort(0, len(items) - 1)
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by shell sort with increments n/2, n/4, ..., 1."""
    items = list(values)
    increment = len(items) // 2
    while increment > 0:
        for i in range(increment, len(items)):
            j = i - increment
            while j >= 0 and items[j] > items[j + increment]:
                items[j], items[j + increment] = items[j + increment], items[j]
                j -= increment
        increment //= 2
    return items


def _adjust_to_heap(heap: list[Any], root: int, n: int) -> None:
    key = heap[root]
    parent, child = root, 2 * root
    while child <= n:
        if child < n and heap[child] < heap[child + 1]:
            child += 1
        if key >= heap[child]:
            break
        heap[parent] = heap[child]
        parent = child
        child *= 2
    heap[parent] = key


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted by building a max heap and removing its root repeatedly."""
    heap: list[Any] = [None, *values]
    n = len(heap) - 1
    for root in range(n // 2, 0, -1):
        _adjust_to_heap(heap, root, n)
    for size in range(n - 1, 0, -1):
        heap[1], heap[size + 1] = heap[size + 1], heap[1]
        _adjust_to_heap(heap, 1, size)
    return heap[1:]


def lsd_radix_sort(values: Iterable[int], digits: int) -> list[int]:
    """Sort non-negative integers on their lowest ``digits`` decimal digits, stably."""
    if digits < 0:
        raise ValueError("the number of digits cannot be negative")
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("radix sort needs non-negative integers")
    scale = 1
    for _ in range(digits):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // scale) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        scale *= 10
    return items