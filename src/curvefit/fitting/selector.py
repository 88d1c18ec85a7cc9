"""Pick the best candidate fit."""

import logging
from typing import Mapping, Tuple

from curvefit.domain.models import ShapeCandidate
from curvefit.domain.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def select_best(candidates: Mapping[str, ShapeCandidate]) -> Tuple[str, ShapeCandidate]:
    """
    Return the (shape, candidate) with the highest R-squared.

    Candidates are visited in mapping order and only a strictly higher
    R-squared replaces the current best, so the first shape wins ties.
    """
    if not candidates:
        raise InvalidInput(
            "No candidate fits to choose from",
            field_name="candidates",
        ).add_suggestion("Fit at least one shape")

    best_name = None
    best = None
    for name, candidate in candidates.items():
        if best is None or candidate.r_squared > best.r_squared:
            best_name, best = name, candidate

    logger.debug(
        "Selected %s from %s",
        best_name,
        {name: c.r_squared for name, c in candidates.items()},
    )
    return best_name, best
