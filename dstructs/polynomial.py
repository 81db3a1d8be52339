"""Polynomials as ordered lists of terms, with addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term coef * x^exponent."""

    coef: float
    exponent: int


class Polynomial:
    """A polynomial whose terms are kept in strictly descending exponent order."""

    def __init__(self, terms: Iterable[Term | tuple[float, int]] = ()) -> None:
        self._terms: list[Term] = []
        for term in terms:
            if not isinstance(term, Term):
                term = Term(*term)
            if self._terms and term.exponent >= self._terms[-1].exponent:
                raise ValueError("terms must be in strictly descending exponent order")
            self._terms.append(term)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result: list[Term] = []
        a, b = self._terms, other._terms
        i = j = 0
        while i < len(a) and j < len(b):
            p, q = a[i], b[j]
            if p.exponent > q.exponent:
                result.append(p)
                i += 1
            elif p.exponent < q.exponent:
                result.append(q)
                j += 1
            else:
                total = p.coef + q.coef
                if total != 0:
                    result.append(Term(total, p.exponent))
                i += 1
                j += 1
        result.extend(a[i:])
        result.extend(b[j:])
        return Polynomial(result)

    def __str__(self) -> str:
        parts = []
        for term in self._terms:
            if term.exponent != 0:
                parts.append(f"{term.coef:.0f}x^{term.exponent}+")
            else:
                parts.append(f"{term.coef:.0f}")
        return "".join(parts)

    def clear(self) -> None:
        """Remove every term."""
        self._terms.clear()