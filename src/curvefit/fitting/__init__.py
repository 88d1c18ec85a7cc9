"""Candidate building, selection and projection."""

from .builder import CandidateBuilder
from .selector import select_best
from .projection import ProjectionSeries, project

__all__ = [
    "CandidateBuilder",
    "select_best",
    "ProjectionSeries",
    "project",
]
