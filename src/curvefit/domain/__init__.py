"""Core domain models and errors."""

from .models import (
    Observation,
    SolverOutput,
    ShapeCandidate,
    FitResult,
)

__all__ = [
    "Observation",
    "SolverOutput",
    "ShapeCandidate",
    "FitResult",
]
