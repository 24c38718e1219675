"""Polynomials kept as terms ordered by descending exponent."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator, Optional, Sequence

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Term:
    """A single coefficient·x^exponent term."""

    coefficient: int
    exponent: int

    def __str__(self) -> str:
        return f"({self.coefficient}x^{self.exponent})"


class Polynomial:
    """Terms ordered by descending exponent; equal exponents are not merged."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._terms: list[Term] = []
        for term in terms:
            self.insert(term.coefficient, term.exponent)

    def insert(self, coefficient: int, exponent: int) -> None:
        """Insert a term, keeping exponents in descending order."""
        term = Term(coefficient, exponent)
        terms = self._terms
        if not terms or exponent > terms[0].exponent:
            position = 0
        else:
            position = next(
                (
                    index
                    for index, existing in enumerate(terms[1:], start=1)
                    if existing.exponent <= exponent
                ),
                len(terms),
            )
        terms.insert(position, term)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        first = deque(self._terms)
        second = deque(other._terms)
        while first and second:
            a, b = first[0], second[0]
            if a.exponent == b.exponent:
                result.insert(a.coefficient + b.coefficient, a.exponent)
                first.popleft()
                second.popleft()
            elif a.exponent > b.exponent:
                result.insert(a.coefficient, a.exponent)
                first.popleft()
            else:
                result.insert(b.coefficient, b.exponent)
                second.popleft()
        for term in chain(first, second):
            result.insert(term.coefficient, term.exponent)
        return result

    def __str__(self) -> str:
        if not self._terms:
            return "No polynomial"
        return "+".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"


def parse_polynomial(text: str) -> Polynomial:
    """Parse text such as ``3x^2+2x^1+5`` into a polynomial.

    Digits before ``^`` form the coefficient, digits after it the exponent;
    letters and spaces are ignored and ``+`` separates terms.
    """
    polynomial = Polynomial()
    coefficient = exponent = 0
    reading_exponent = False
    for char in text:
        if char in _DIGITS:
            if reading_exponent:
                exponent = exponent * 10 + int(char)
            else:
                coefficient = coefficient * 10 + int(char)
            continue
        reading_exponent = False
        if char == "^":
            reading_exponent = True
        elif char == "+":
            polynomial.insert(coefficient, exponent)
            coefficient = exponent = 0
    polynomial.insert(coefficient, exponent)
    return polynomial


def add_polynomials(first: Polynomial, second: Polynomial) -> Polynomial:
    """Return the sum of two polynomials."""
    return first + second


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read two polynomials and print their sum."""
    parser = argparse.ArgumentParser(
        prog="structkit-polynomial", description="Add two polynomials."
    )
    parser.add_argument("first", nargs="?", help="first polynomial")
    parser.add_argument("second", nargs="?", help="second polynomial")
    args = parser.parse_args(argv)
    first = args.first if args.first is not None else input("Enter the polynomial 1:\n")
    second = (
        args.second if args.second is not None else input("Enter the polynomial 2:\n")
    )
    result = add_polynomials(parse_polynomial(first), parse_polynomial(second))
    print("Addition of polynomials:")
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())