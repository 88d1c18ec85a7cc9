"""Core value objects passed between the fitting stages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from curvefit.models.formulas import PolynomialFormula

SeriesPoint = Tuple[Any, Optional[float]]


class Observation(NamedTuple):
    """An (X, Y) pair. X is carried along but never fitted against."""
    x: Any
    y: float


@dataclass(frozen=True)
class SolverOutput:
    """Everything one solver run produced for a single shape."""
    shape: str
    returncode: Optional[int]
    lines: Tuple[str, ...] = ()
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ShapeCandidate:
    """One attempted fit, with its trend and confidence formulas."""
    shape: str
    r_squared: float
    curve_formula: "PolynomialFormula"
    top_confidence_formula: "PolynomialFormula"
    bottom_confidence_formula: "PolynomialFormula"
    coefficient_error_margins: Tuple[Tuple[int, Tuple[float, float]], ...] = ()

    def __post_init__(self):
        # stored as (index, (value, error)) pairs sorted by index
        margins = self.coefficient_error_margins
        if isinstance(margins, Mapping):
            margins = margins.items()
        object.__setattr__(
            self,
            "coefficient_error_margins",
            tuple(sorted((int(i), (float(v), float(e))) for i, (v, e) in margins)),
        )

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return self.curve_formula.coefficients

    @property
    def is_exact(self) -> bool:
        """R-squared of exactly 1, where reported errors are not trusted."""
        return self.r_squared == 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shape": self.shape,
            "r_squared": self.r_squared,
            "curve_formula": self.curve_formula.to_dict(),
            "top_confidence_formula": self.top_confidence_formula.to_dict(),
            "bottom_confidence_formula": self.bottom_confidence_formula.to_dict(),
            "coefficient_error_margins": {
                str(k): list(v) for k, v in self.coefficient_error_margins
            },
        }


@dataclass(frozen=True)
class FitResult:
    """
    Public result of a fit.

    ``data`` holds the caller's observations untouched, X values included.
    The derived series are labelled by fitted index (0..N-1 and beyond) or by
    whatever the caller's label function maps those indices to.
    """
    data: Tuple[Any, ...]
    trend: Tuple[SeriesPoint, ...]
    top_confidence: Tuple[SeriesPoint, ...]
    bottom_confidence: Tuple[SeriesPoint, ...]
    ceiling: Tuple[SeriesPoint, ...]
    r_squared: float
    guess: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "data": [list(point) for point in self.data],
            "trend": [list(point) for point in self.trend],
            "top_confidence": [list(point) for point in self.top_confidence],
            "bottom_confidence": [list(point) for point in self.bottom_confidence],
            "ceiling": [list(point) for point in self.ceiling],
            "r_squared": self.r_squared,
            "guess": self.guess,
        }
