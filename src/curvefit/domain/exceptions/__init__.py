"""Custom exceptions for the curvefit package."""

# Base exceptions
from .base import (
    CurveFitError,
    ConfigurationError,
    ResourceError,
    FileSystemError,
    ExternalToolError
)

# Fitting exceptions
from .fitting import (
    FittingError,
    ReportParseError,
    SolverFailure,
    SolverTimeout
)

# Validation exceptions
from .validation import (
    ValidationError,
    InvalidInput,
    ProjectionLimitError,
    FileValidationError,
    XYFileNotFoundError
)

__all__ = [
    # Base
    "CurveFitError",
    "ConfigurationError",
    "ResourceError",
    "FileSystemError",
    "ExternalToolError",

    # Fitting
    "FittingError",
    "ReportParseError",
    "SolverFailure",
    "SolverTimeout",

    # Validation
    "ValidationError",
    "InvalidInput",
    "ProjectionLimitError",
    "FileValidationError",
    "XYFileNotFoundError",
]
