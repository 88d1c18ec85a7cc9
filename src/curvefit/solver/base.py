"""Contract every solver backend fulfils."""

from typing import Protocol, runtime_checkable

from curvefit.domain.models import SolverOutput


@runtime_checkable
class SolverClient(Protocol):
    """Runs one guess+fit+report for a shape against a two-column data file."""

    def run(self, shape: str, data_path: str) -> SolverOutput:
        ...
