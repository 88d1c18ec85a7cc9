"""Fit result output helpers."""

from .assemblers import result_to_dict, result_rows, write_result_json

__all__ = [
    "result_to_dict",
    "result_rows",
    "write_result_json",
]
