import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from tqdm import tqdm

from curvefit.config.integration import resolve_settings
from curvefit.config.resolvers import resolve_shapes
from curvefit.config.settings import Settings
from curvefit.domain.models import FitResult, Observation, ShapeCandidate
from curvefit.domain.exceptions import InvalidInput
from curvefit.fitting import CandidateBuilder, project, select_best
from curvefit.models.shapes import Shape
from curvefit.solver import FitykSolver, SolverClient
from curvefit.utils.timing import section_timer

logger = logging.getLogger(__name__)
summary_logger = logging.getLogger("curvefit.summary")


def reindex(data: Sequence[Sequence[Any]]) -> List[Observation]:
    """Replace every X with its position, keeping Y."""
    return [Observation(index, point[1]) for index, point in enumerate(data)]


class CurveFitPipeline:
    """
    Fit every requested shape, keep the best one by R-squared and project it.

    Fitting happens against positions 0..N-1 rather than the caller's X
    values. The result still carries the caller's data untouched, while the
    trend, confidence and ceiling series are labelled by position (or by
    ``label_fn(position)``).
    """

    def __init__(
        self,
        solver: Optional[SolverClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = resolve_settings(settings)
        self.solver = solver or FitykSolver.from_settings(self.settings.solver)
        self.builder = CandidateBuilder(self.solver)

    def fit(
        self,
        data: Iterable[Sequence[Any]],
        ceiling: Optional[float] = None,
        shapes: Optional[Iterable[Union[str, Shape]]] = None,
        label_fn: Optional[Callable[[int], Any]] = None,
    ) -> FitResult:
        data = tuple(data)
        if not data:
            raise InvalidInput(
                "Cannot fit an empty data set",
                field_name="data",
            ).add_suggestion("Provide at least one (X, Y) observation")

        shape_list = resolve_shapes(self.settings.fit.shapes if shapes is None else shapes)
        index_data = reindex(data)

        with section_timer("fit", logger) as timer:
            candidates = self._build_candidates(shape_list, index_data)
            guess, best = select_best(candidates)
            series = project(
                best,
                len(data),
                ceiling=ceiling,
                label_fn=label_fn,
                max_points=self.settings.projection.max_points,
            )

        summary_logger.info(
            "Fitted %d points in %.2f s: best %s (R-squared %s), %d trend points%s",
            len(data),
            timer.elapsed,
            guess,
            best.r_squared,
            len(series),
            f" up to ceiling {ceiling}" if ceiling is not None else "",
        )

        return FitResult(
            data=data,
            trend=tuple(series.trend),
            top_confidence=tuple(series.top_confidence),
            bottom_confidence=tuple(series.bottom_confidence),
            ceiling=tuple(series.ceiling),
            r_squared=best.r_squared,
            guess=guess,
        )

    def _build_candidates(
        self,
        shape_list: List[Shape],
        index_data: List[Observation],
    ) -> Dict[str, ShapeCandidate]:
        candidates: Dict[str, ShapeCandidate] = {}
        progress = tqdm(
            shape_list,
            desc="Fitting shapes",
            unit="shape",
            disable=not self.settings.fit.show_progress,
        )
        for shape in progress:
            progress.set_postfix_str(shape.name)
            candidates[shape.name] = self.builder.build(shape, index_data)
        return candidates


def fit(
    data: Iterable[Sequence[Any]],
    ceiling: Optional[float] = None,
    shapes: Optional[Iterable[Union[str, Shape]]] = None,
    label_fn: Optional[Callable[[int], Any]] = None,
    *,
    solver: Optional[SolverClient] = None,
    settings: Optional[Settings] = None,
) -> FitResult:
    """
    Guess the best curve for ``data`` (as measured by R-squared) and build its
    trend line, top and bottom confidence lines and, when ``ceiling`` is
    given, project the trend until it passes that Y value.

    Args:
        data: (X, Y) pairs. X is not used for fitting.
        ceiling: Y value to project up to. None keeps exactly len(data) points.
        shapes: shape names to try, in order. Defaults to the configured
            shapes (Linear, Quadratic).
        label_fn: maps each position 0, 1, 2, ... to the label used in the
            output series.
        solver: solver backend; defaults to cfityk.
        settings: configuration; defaults to the global or default settings.

    Raises:
        InvalidInput: empty data or shapes, or a ceiling the trend never passes.
        SolverFailure: the solver failed for any shape.
    """
    pipeline = CurveFitPipeline(solver=solver, settings=settings)
    return pipeline.fit(data, ceiling=ceiling, shapes=shapes, label_fn=label_fn)
