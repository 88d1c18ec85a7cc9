"""
Classify single lines of solver output.

Each recognised line maps to one typed record; anything else yields None.
The parser keeps no state, callers accumulate the records themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

from curvefit.models.formulas import PolynomialFormula, formula_from_coefficients

_FLOAT = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

R_SQUARED_RE = re.compile(rf"R-squared\s*=\s*({_FLOAT})")

# 1019.43 + 9.543*(x) + 0.202086*(x)^2
QUADRATIC_RE = re.compile(
    rf"^(?:.*?\s)?({_FLOAT})\s*\+\s*({_FLOAT})\s*\*\s*\(x\)"
    rf"\s*\+\s*({_FLOAT})\s*\*\s*\(x\)\^2\s*$"
)

# 692.1 + 30.633 * (x); never matches a line carrying an (x)^2 term
LINEAR_RE = re.compile(
    rf"^(?!.*\(x\)\^2)(?:.*?\s)?({_FLOAT})\s*\+\s*({_FLOAT})\s*\*\s*\(x\)\s*$"
)

# $_1 = 692.1 +- 32.0558
PARAMETER_ERROR_RE = re.compile(
    rf"\$_(\d+)\s*=\s*({_FLOAT})\s*\+-\s*({_FLOAT})"
)


@dataclass(frozen=True)
class RSquaredLine:
    value: float


@dataclass(frozen=True)
class FormulaLine:
    formula: PolynomialFormula

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return self.formula.coefficients


@dataclass(frozen=True)
class ParameterErrorLine:
    index: int
    value: float
    error: float


ParsedLine = Union[RSquaredLine, FormulaLine, ParameterErrorLine]


def parse_line(line: str) -> Optional[ParsedLine]:
    """Return what a single solver output line reports, or None."""
    line = line.rstrip("\r\n")

    m = R_SQUARED_RE.search(line)
    if m:
        return RSquaredLine(float(m.group(1)))

    m = QUADRATIC_RE.match(line)
    if m:
        return FormulaLine(formula_from_coefficients(m.groups()))

    m = LINEAR_RE.match(line)
    if m:
        return FormulaLine(formula_from_coefficients(m.groups()))

    m = PARAMETER_ERROR_RE.search(line)
    if m:
        return ParameterErrorLine(
            index=int(m.group(1)),
            value=float(m.group(2)),
            error=float(m.group(3)),
        )

    return None


def parse_lines(lines: Iterable[str]) -> Iterator[Tuple[str, Optional[ParsedLine]]]:
    """Yield each line together with what it parsed to."""
    for line in lines:
        yield line, parse_line(line)
