"""Random polynomials over GF(p) whose constant term hides the secret."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .entropy import SecureRandom
from .errors import InvalidThreshold
from .field import FieldContext


@dataclass(frozen=True)
class Polynomial:
    """Coefficients in ascending order: ``coefficients[0]`` is ``f(0)``."""

    coefficients: Tuple[int, ...]
    field: FieldContext

    @property
    def degree(self) -> int:
        for power in range(len(self.coefficients) - 1, 0, -1):
            if self.coefficients[power]:
                return power
        return 0

    @property
    def constant_term(self) -> int:
        return self.coefficients[0]

    def __call__(self, x: int) -> int:
        return evaluate(self, x, self.field.modulus)


def random_polynomial(
    degree_bound: int,
    constant_term: int,
    modulus: int,
    *,
    rng: Optional[SecureRandom] = None,
) -> Polynomial:
    """Build a polynomial with *degree_bound* coefficients and ``f(0) = constant_term``.

    Coefficients ``1 .. degree_bound - 2`` are uniform over the field. The
    leading coefficient is drawn from the non-zero elements only, so the
    realised degree is exactly ``degree_bound - 1``.
    Without an explicit *rng* a generator seeded from fresh OS entropy is used.
    """

    if degree_bound < 1:
        raise InvalidThreshold(f"threshold must be at least 1, got {degree_bound}")
    field = FieldContext(modulus)
    if rng is None:
        rng = SecureRandom()

    coefficients = [field.element(constant_term)]
    for _ in range(1, degree_bound - 1):
        coefficients.append(rng.randbelow(modulus))
    if degree_bound > 1:
        coefficients.append(rng.randrange_nonzero(modulus))
    return Polynomial(tuple(coefficients), field)


def evaluate(polynomial: Polynomial, x: int, modulus: int) -> int:
    """Evaluate *polynomial* at *x* with Horner's rule, reducing at each step."""

    result = 0
    for coefficient in reversed(polynomial.coefficients):
        result = (result * x + coefficient) % modulus
    return result


__all__ = ["Polynomial", "random_polynomial", "evaluate"]
