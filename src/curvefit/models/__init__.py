"""Curve formula and shape models."""

from .formulas import (
    PolynomialFormula,
    LinearFormula,
    QuadraticFormula,
    formula_from_coefficients,
)
from .shapes import (
    Shape,
    LinearShape,
    QuadraticShape,
    register_shape,
    get_shape,
    available_shapes,
)

__all__ = [
    "PolynomialFormula",
    "LinearFormula",
    "QuadraticFormula",
    "formula_from_coefficients",
    "Shape",
    "LinearShape",
    "QuadraticShape",
    "register_shape",
    "get_shape",
    "available_shapes",
]
