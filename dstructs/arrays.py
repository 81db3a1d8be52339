"""Array, string and matrix operations, including sparse matrix transpose."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_NUL = "\0"


@dataclass
class SparseTerm:
    """One entry of a sparse matrix in triple form.

    The first term of a list is a header holding (rows, columns, count).
    """

    row: int
    column: int
    value: float


def decrement_all(values: Sequence[int]) -> list[int]:
    """Return the values each reduced by one."""
    return [v - 1 for v in values]


def decrement_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix with every element reduced by one."""
    return [decrement_all(row) for row in matrix]


def _check_index(location: int, length: int) -> None:
    if not 0 <= location < length:
        raise IndexError(f"location {location} outside array of length {length}")


def insert_element(value: int, location: int, values: Sequence[int]) -> list[int]:
    """Insert value at location in a fixed-length array; the last element falls off."""
    _check_index(location, len(values))
    items = list(values)
    return items[:location] + [value] + items[location:-1]


def delete_element(location: int, values: Sequence[int]) -> list[int]:
    """Delete the element at location in a fixed-length array; the end is filled with 0."""
    _check_index(location, len(values))
    items = list(values)
    return items[:location] + items[location + 1:] + [0]


def _terminated(text: str) -> str:
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def string_length(text: str) -> int:
    """Return the number of characters before the first NUL (or the whole length)."""
    return len(_terminated(text))


def string_copy(text: str) -> str:
    """Return a copy of the string up to its first NUL."""
    return "".join(ch for ch in _terminated(text))


def string_concat(first: str, second: str) -> str:
    """Return first followed by second, each taken up to its first NUL."""
    return _terminated(first) + _terminated(second)


def string_compare(first: str, second: str) -> int:
    """Compare two strings character by character: 0 if equal, 1 if first is greater, else -1."""
    a = _terminated(first) + _NUL
    b = _terminated(second) + _NUL
    for ca, cb in zip(a, b):
        if ca != cb:
            return 1 if ca > cb else -1
        if ca == _NUL:
            return 0
    return 0


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def matrix_add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def matrix_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the product of an m-by-n and an n-by-p matrix."""
    _, n = _shape(a)
    rows_b, _ = _shape(b)
    if n != rows_b:
        raise ValueError("inner dimensions do not agree")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def sparse_transpose(terms: Sequence[SparseTerm]) -> list[SparseTerm]:
    """Transpose a sparse matrix in triple form (header first, 1-based columns)."""
    if not terms:
        raise ValueError("a sparse matrix needs a header term")
    header = terms[0]
    count = int(header.value)
    if count > len(terms) - 1:
        raise ValueError("header counts more terms than are given")
    entries = terms[1:count + 1]
    result = [SparseTerm(header.column, header.row, header.value)]
    for column in range(1, header.column + 1):
        result.extend(
            SparseTerm(term.column, term.row, term.value)
            for term in entries
            if term.column == column
        )
    return result