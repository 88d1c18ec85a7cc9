"""Fit pipeline entry points."""

from .pipeline import CurveFitPipeline, fit, reindex

__all__ = [
    "CurveFitPipeline",
    "fit",
    "reindex",
]
