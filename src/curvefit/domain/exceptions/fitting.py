"""Curve fitting and solver exceptions."""

from typing import Optional
from .base import CurveFitError, ExternalToolError


class FittingError(CurveFitError):
    """Base class for errors raised while building or selecting fits."""

    default_code = "FITTING_ERROR"

    def __init__(self, message: str, *, shape: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.shape = shape
        if shape:
            self.add_context('shape', shape)


class ReportParseError(FittingError):
    """Raised when a successful solver run did not report everything a fit needs."""

    default_code = "REPORT_INCOMPLETE"

    def __init__(self, message: str, *, missing: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        if missing:
            self.add_context('missing', missing)
        self.add_suggestion("Run with --debug to see the raw solver output")


class SolverFailure(ExternalToolError):
    """Raised when the external solver exits unsuccessfully for a shape."""

    default_code = "SOLVER_FAILED"

    def __init__(
        self,
        shape: str,
        exit_code: Optional[int],
        *,
        message: Optional[str] = None,
        **kwargs
    ):
        message = message or (
            f"Solver returned status {exit_code} when guessing {shape}, bailing"
        )
        super().__init__(message, **kwargs)
        self.shape = shape
        self.exit_code = exit_code
        self.add_context('shape', shape)
        self.add_context('exit_code', exit_code)


class SolverTimeout(SolverFailure):
    """Raised when the solver does not finish within the configured timeout."""

    default_code = "SOLVER_TIMEOUT"

    def __init__(self, shape: str, timeout_seconds: float, **kwargs):
        super().__init__(
            shape,
            None,
            message=f"Solver timed out after {timeout_seconds}s when guessing {shape}",
            **kwargs
        )
        self.add_context('timeout_seconds', timeout_seconds)
        self.add_suggestion("Increase the solver timeout with --timeout")
