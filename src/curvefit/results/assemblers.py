# results/assemblers.py
import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from curvefit.domain.models import FitResult, SeriesPoint


def _coerce_scalar(value: Any) -> Any:
    """Make numpy scalars and non-finite floats JSON-safe."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _points(points: Iterable[SeriesPoint]) -> List[List[Any]]:
    return [[_coerce_scalar(label), _coerce_scalar(y)] for label, y in points]


def result_to_dict(result: FitResult) -> Dict[str, Any]:
    """Plain dictionary with the same keys as FitResult.to_dict(), JSON-safe."""
    return {
        "data": _points(result.data),
        "trend": _points(result.trend),
        "top_confidence": _points(result.top_confidence),
        "bottom_confidence": _points(result.bottom_confidence),
        "ceiling": _points(result.ceiling),
        "r_squared": _coerce_scalar(result.r_squared),
        "guess": result.guess,
    }


def result_rows(result: FitResult) -> Iterable[tuple]:
    """
    Yield one row per projected label:
      (label, trend, top_confidence, bottom_confidence, ceiling)
    ceiling is None when the fit had no ceiling.
    """
    ceilings = result.ceiling or [(None, None)] * len(result.trend)
    for trend, top, bottom, ceil in zip(
        result.trend, result.top_confidence, result.bottom_confidence, ceilings
    ):
        yield (trend[0], trend[1], top[1], bottom[1], ceil[1])


def write_result_json(result: FitResult, path: Optional[Path] = None, indent: int = 2) -> str:
    """Serialise a result; also write it to ``path`` when given."""
    text = json.dumps(result_to_dict(result), indent=indent)
    if path is not None:
        Path(path).write_text(text + "\n", encoding="utf-8")
    return text
