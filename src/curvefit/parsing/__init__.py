"""Parsing of external solver reports."""

from .report import (
    parse_line,
    parse_lines,
    RSquaredLine,
    FormulaLine,
    ParameterErrorLine,
)

__all__ = [
    "parse_line",
    "parse_lines",
    "RSquaredLine",
    "FormulaLine",
    "ParameterErrorLine",
]
