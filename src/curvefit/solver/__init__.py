"""External solver backends."""

from .base import SolverClient
from .fityk import FitykSolver

__all__ = [
    "SolverClient",
    "FitykSolver",
]
