"""Build one candidate fit per shape from a solver run."""

import logging
import os
from typing import Dict, Optional, Sequence, Tuple, Union

from curvefit.data.xyfile import write_xy_file
from curvefit.domain.models import Observation, ShapeCandidate, SolverOutput
from curvefit.domain.exceptions import ReportParseError, SolverFailure
from curvefit.models.formulas import PolynomialFormula
from curvefit.models.shapes import Shape, get_shape
from curvefit.parsing.report import (
    FormulaLine,
    ParameterErrorLine,
    RSquaredLine,
    parse_lines,
)
from curvefit.solver.base import SolverClient

logger = logging.getLogger(__name__)


class CandidateBuilder:
    """Turns a shape and re-indexed observations into a ShapeCandidate."""

    def __init__(self, solver: SolverClient):
        self.solver = solver

    def build(
        self,
        shape: Union[Shape, str],
        index_data: Sequence[Observation],
    ) -> ShapeCandidate:
        """
        Write the observations to a temp file, run the solver once for the
        shape and read the report back.

        Raises:
            SolverFailure: the solver exited unsuccessfully.
            ReportParseError: the report lacked a value the fit needs.
        """
        if isinstance(shape, str):
            shape = get_shape(shape)

        data_path = None
        try:
            data_path = write_xy_file(index_data)
            logger.debug("Guessing %s fit...", shape.name)
            output = self.solver.run(shape.name, data_path)
        finally:
            if data_path and os.path.exists(data_path):
                try:
                    os.unlink(data_path)
                except OSError as e:
                    logger.warning(f"Could not remove temp file {data_path}: {e}")

        return self.candidate_from_output(shape, output)

    def candidate_from_output(self, shape: Shape, output: SolverOutput) -> ShapeCandidate:
        """Accumulate a solver report into a candidate."""
        r_squared: Optional[float] = None
        formula: Optional[PolynomialFormula] = None
        foreign: Optional[PolynomialFormula] = None
        errors: Dict[int, Tuple[float, float]] = {}

        for line, parsed in parse_lines(output.lines):
            logger.debug("%s: %s", shape.name, line)
            if isinstance(parsed, RSquaredLine):
                r_squared = parsed.value
            elif isinstance(parsed, FormulaLine):
                if len(parsed.coefficients) == shape.term_count:
                    formula = shape.formula_from(parsed.coefficients)
                else:
                    foreign = parsed.formula
            elif isinstance(parsed, ParameterErrorLine):
                errors[parsed.index] = (parsed.value, parsed.error)

        if not output.success:
            ex = SolverFailure(shape.name, output.returncode)
            if output.stderr.strip():
                ex.add_context('stderr', output.stderr.strip())
            raise ex

        if r_squared is None:
            raise ReportParseError(
                f"Solver reported no R-squared for {shape.name}",
                shape=shape.name,
                missing="R-squared",
            )
        if formula is None:
            ex = ReportParseError(
                f"Solver reported no {shape.name} formula",
                shape=shape.name,
                missing="formula",
            )
            if foreign is not None:
                ex.add_context('unexpected_formula', str(foreign))
            raise ex

        if r_squared == 1.0:
            # errors are degenerate on a perfect fit, reuse the trend itself
            top, bottom = formula, formula
        else:
            top, bottom = shape.derive_confidence_bounds(errors)

        logger.info("%s fit: %s (R-squared %s)", shape.name, formula, r_squared)
        return ShapeCandidate(
            shape=shape.name,
            r_squared=r_squared,
            curve_formula=formula,
            top_confidence_formula=top,
            bottom_confidence_formula=bottom,
            coefficient_error_margins=errors,
        )
