"""Closed-form curve formulas reconstructed from solver reports."""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import ClassVar, Dict, Any, Sequence, Tuple

from numpy.polynomial import polynomial as P


@dataclass(frozen=True)
class PolynomialFormula:
    """Base for formulas of the form c0 + c1*x + c2*x^2 + ..."""

    kind: ClassVar[str] = "polynomial"

    @property
    def coefficients(self) -> Tuple[float, ...]:
        raise NotImplementedError

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def evaluate(self, x: float) -> float:
        return float(P.polyval(float(x), self.coefficients))

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def is_unbounded_above(self) -> bool:
        """Whether the curve grows without limit as x increases."""
        for c in reversed(self.coefficients[1:]):
            if c != 0:
                return c > 0
        return False

    def max_over_indices(self) -> float:
        """Largest value the formula takes at any integer index >= 0."""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class LinearFormula(PolynomialFormula):
    a: float
    b: float

    kind: ClassVar[str] = "linear"

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return (self.a, self.b)

    def max_over_indices(self) -> float:
        if self.is_unbounded_above():
            return math.inf
        return self.evaluate(0)

    def __str__(self) -> str:
        return f"{self.a} + {self.b} * (x)"


@dataclass(frozen=True)
class QuadraticFormula(PolynomialFormula):
    a: float
    b: float
    c: float

    kind: ClassVar[str] = "quadratic"

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return (self.a, self.b, self.c)

    def max_over_indices(self) -> float:
        if self.is_unbounded_above():
            return math.inf
        if self.c == 0:
            return self.evaluate(0)
        # downward parabola, the best integer index sits next to the vertex
        vertex = -self.b / (2 * self.c)
        candidates = {0, max(0, math.floor(vertex)), max(0, math.ceil(vertex))}
        return max(self.evaluate(x) for x in candidates)

    def __str__(self) -> str:
        return f"{self.a} + {self.b}*(x) + {self.c}*(x)^2"


_BY_TERM_COUNT = {
    2: LinearFormula,
    3: QuadraticFormula,
}


def formula_from_coefficients(coefficients: Sequence[float]) -> PolynomialFormula:
    """Build the formula variant matching the number of coefficients given."""
    try:
        formula_type = _BY_TERM_COUNT[len(coefficients)]
    except KeyError:
        raise ValueError(
            f"No formula with {len(coefficients)} coefficients"
        ) from None
    return formula_type(*(float(c) for c in coefficients))
