"""Curve shapes the solver can be asked to guess."""

from __future__ import annotations

import logging
from abc import ABC
from typing import Dict, List, Mapping, Tuple, Type

from curvefit.domain.exceptions import InvalidInput, ReportParseError
from .formulas import LinearFormula, PolynomialFormula, QuadraticFormula

logger = logging.getLogger(__name__)

ErrorMargins = Mapping[int, Tuple[float, float]]


class Shape(ABC):
    """A curve family. Coefficients are numbered from 1 (intercept first)."""

    name: str
    formula_type: Type[PolynomialFormula]
    term_count: int

    def formula_from(self, coefficients) -> PolynomialFormula:
        return self.formula_type(*(float(c) for c in coefficients))

    def derive_confidence_bounds(
        self, errors: ErrorMargins
    ) -> Tuple[PolynomialFormula, PolynomialFormula]:
        """
        Worst-case envelope: every coefficient shifted by +error for the top
        curve and by -error for the bottom curve, independently per term.
        """
        pairs = []
        for index in range(1, self.term_count + 1):
            if index not in errors:
                raise ReportParseError(
                    f"No error reported for parameter $_{index} of {self.name} fit",
                    shape=self.name,
                    missing=f"$_{index}",
                )
            pairs.append(errors[index])

        top = self.formula_from([value + error for value, error in pairs])
        bottom = self.formula_from([value - error for value, error in pairs])
        return top, bottom

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LinearShape(Shape):
    name = "Linear"
    formula_type = LinearFormula
    term_count = 2


class QuadraticShape(Shape):
    name = "Quadratic"
    formula_type = QuadraticFormula
    term_count = 3


_REGISTRY: Dict[str, Shape] = {}


def register_shape(shape: Shape) -> Shape:
    """Make a shape available by name to fits and the CLI."""
    if shape.name in _REGISTRY:
        logger.debug("Replacing registered shape %s", shape.name)
    _REGISTRY[shape.name] = shape
    return shape


def get_shape(name: str) -> Shape:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise InvalidInput(
            f"Unknown shape: {name}",
            field_name="shapes",
            field_value=name,
        ).add_suggestion(f"Use one of: {', '.join(available_shapes())}") from None


def available_shapes() -> List[str]:
    return list(_REGISTRY)


register_shape(LinearShape())
register_shape(QuadraticShape())
