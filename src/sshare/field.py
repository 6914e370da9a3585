"""Arithmetic over the prime field GF(p).

The heavy lifting is delegated to Python's arbitrary-precision integers and to
``sympy`` for primality. :class:`FieldContext` only pins the modulus so that
every operation receives it explicitly instead of reading global state.
"""
from __future__ import annotations

from dataclasses import dataclass

from sympy import isprime, nextprime


def is_prime(value: int) -> bool:
    return bool(isprime(value))


def next_prime(value: int) -> int:
    """Return the smallest prime strictly greater than *value*."""

    return int(nextprime(value))


@dataclass(frozen=True)
class FieldContext:
    """Immutable handle on GF(*modulus*)."""

    modulus: int

    def __post_init__(self) -> None:
        if self.modulus < 2 or not is_prime(self.modulus):
            raise ValueError(f"field modulus must be prime, got {self.modulus}")

    def element(self, value: int) -> int:
        return value % self.modulus

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.modulus

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def neg(self, a: int) -> int:
        return -a % self.modulus

    def inverse(self, a: int) -> int:
        """Multiplicative inverse of *a*; zero has none."""

        a %= self.modulus
        if a == 0:
            raise ZeroDivisionError("zero has no inverse in the field")
        return pow(a, -1, self.modulus)


__all__ = ["FieldContext", "is_prime", "next_prime"]
