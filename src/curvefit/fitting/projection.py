"""Walk the winning fit forward and emit the trend, bound and ceiling series."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from curvefit.domain.models import SeriesPoint, ShapeCandidate
from curvefit.domain.exceptions import InvalidInput, ProjectionLimitError

logger = logging.getLogger(__name__)

DEFAULT_MAX_POINTS = 100_000

LabelFn = Callable[[int], Any]


@dataclass
class ProjectionSeries:
    """The four parallel series produced by a projection."""
    trend: List[SeriesPoint] = field(default_factory=list)
    top_confidence: List[SeriesPoint] = field(default_factory=list)
    bottom_confidence: List[SeriesPoint] = field(default_factory=list)
    ceiling: List[SeriesPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.trend)


def project(
    best: ShapeCandidate,
    observation_count: int,
    ceiling: Optional[float] = None,
    label_fn: Optional[LabelFn] = None,
    max_points: int = DEFAULT_MAX_POINTS,
) -> ProjectionSeries:
    """
    Evaluate the fit at x = 0, 1, 2, ...

    Without a ceiling exactly ``observation_count`` points are emitted. With
    one, each point is evaluated first and the walk stops after the first
    point whose trend value exceeds the ceiling, so that point is included.

    Raises:
        InvalidInput: the ceiling is not finite or the trend can never pass it.
        ProjectionLimitError: the walk ran past ``max_points``.
    """
    series = ProjectionSeries()

    if ceiling is None:
        for x in range(observation_count):
            _emit(series, best, x, None, label_fn)
        return series

    if not math.isfinite(ceiling):
        raise InvalidInput(
            f"Ceiling must be a finite number, got {ceiling}",
            field_name="ceiling",
            field_value=ceiling,
        )

    y = 0.0
    if y <= ceiling and best.curve_formula.max_over_indices() <= ceiling:
        raise InvalidInput(
            f"{best.shape} trend {best.curve_formula} never exceeds ceiling {ceiling}",
            field_name="ceiling",
            field_value=ceiling,
        ).add_suggestion("Use a lower ceiling or fit without one")

    x = 0
    while y <= ceiling:
        if x >= max_points:
            raise ProjectionLimitError(ceiling, max_points)
        y = _emit(series, best, x, ceiling, label_fn)
        x += 1

    logger.debug("Projected %s to ceiling %s in %d points", best.shape, ceiling, x)
    return series


def _emit(
    series: ProjectionSeries,
    best: ShapeCandidate,
    x: int,
    ceiling: Optional[float],
    label_fn: Optional[LabelFn],
) -> float:
    y = best.curve_formula.evaluate(x)
    y_top = best.top_confidence_formula.evaluate(x)
    y_bottom = best.bottom_confidence_formula.evaluate(x)
    label = label_fn(x) if label_fn else x

    series.trend.append((label, y))
    series.top_confidence.append((label, y_top))
    series.bottom_confidence.append((label, y_bottom))
    if ceiling is not None:
        series.ceiling.append((label, ceiling))
    return y
