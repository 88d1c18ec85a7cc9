"""Reading and writing two-column "<X> <Y>" data files."""

import logging
import os
import re
import tempfile
from typing import Any, Iterable, List, Optional, Sequence, Union

from curvefit.domain.exceptions import FileSystemError, XYFileNotFoundError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"\d+")
_ONE_DECIMAL_RE = re.compile(r"\d+\.\d")

PathLike = Union[str, "os.PathLike[str]"]


def string_to_number(token: str) -> Union[int, float, str]:
    """
    Convert a token of digits to an int, or to a float when it has exactly
    one fractional digit. Anything else comes back as the raw string.
    """
    if _INTEGER_RE.fullmatch(token):
        return int(token)
    if _ONE_DECIMAL_RE.fullmatch(token):
        return float(token)
    return token


def load_xy_file(filename: PathLike) -> List[List[Any]]:
    """
    Load an XY data file as a list of [X, Y] pairs, suitable for fitting.

    Raises:
        XYFileNotFoundError: if the file does not exist.
    """
    if not os.path.isfile(filename):
        raise XYFileNotFoundError(str(filename))

    xy_data = []
    with open(filename, "r", encoding="utf-8") as xy_file:
        for line in xy_file:
            tokens = line.split()
            if not tokens:
                continue
            x = tokens[0]
            y = tokens[1] if len(tokens) > 1 else None
            xy_data.append([
                string_to_number(x),
                string_to_number(y) if y is not None else None,
            ])
    logger.debug("Loaded %d points from %s", len(xy_data), filename)
    return xy_data


def append_xy_file(filename: PathLike, x: Any, y: Any) -> bool:
    """Add one entry to the end of an XY data file."""
    try:
        with open(filename, "a", encoding="utf-8") as xy_file:
            xy_file.write(f"{x} {y}\n")
    except OSError as e:
        raise FileSystemError(
            f"Could not append to {filename}: {e}",
            context={"file_path": str(filename)},
        ) from e
    return True


def write_xy_file(data: Iterable[Sequence[Any]], filename: Optional[PathLike] = None) -> str:
    """
    Write a data set out to an XY file.

    Args:
        data: [X, Y] pairs.
        filename: file to (over)write. A temp file is created when omitted;
            removing it is up to the caller once this returns.

    Returns:
        The path of the written file.
    """
    if filename is not None:
        xy_file = open(filename, "w", encoding="utf-8")
        path = os.fspath(filename)
    else:
        xy_file = tempfile.NamedTemporaryFile(
            "w", prefix="curvefit", suffix=".dat", delete=False, encoding="utf-8"
        )
        path = xy_file.name

    try:
        with xy_file:
            for point in data:
                xy_file.write(f"{point[0]} {point[1]}\n")
    except Exception:
        if filename is None:
            os.unlink(path)
        raise

    return path
