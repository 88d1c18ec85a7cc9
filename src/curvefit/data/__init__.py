"""XY data file helpers."""

from .xyfile import (
    string_to_number,
    load_xy_file,
    append_xy_file,
    write_xy_file,
)

__all__ = [
    "string_to_number",
    "load_xy_file",
    "append_xy_file",
    "write_xy_file",
]
