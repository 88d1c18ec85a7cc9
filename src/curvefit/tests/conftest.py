from pathlib import Path
from typing import Dict, Optional

import pytest

from curvefit.config.settings import reset_settings
from curvefit.domain.models import SolverOutput


PERFECTLY_LINEAR_DATA = [
    [0, 1000.0],
    [1, 2000.0],
    [2, 3000.0],
    [3, 4000.0],
    [4, 5000.0],
    [5, 6000.0],
]

LINEAR_DATA = [
    [0, 1000.0],
    [1, 2003.0],
    [2, 3010.0],
    [3, 4084.0],
    [4, 5012.0],
    [5, 6075.0],
]

PERFECT_LINEAR_REPORT = """\
1000 + 1000 * (x)
@0: data points: 6, fitted function: Linear
R-squared = 1
$_1 = 1000 +- 0
$_2 = 1000 +- 0
"""

PERFECT_QUADRATIC_REPORT = """\
1000 + 1000*(x) + 0*(x)^2
R-squared = 0.98
$_1 = 1000 +- 1.5
$_2 = 1000 +- 0.5
$_3 = 0 +- 0.01
"""

NOISY_LINEAR_REPORT = """\
Guessing Linear...
992.143 + 1013.63 * (x)
WSSR: 2817.24
R-squared = 0.999523
$_1 = 992.143 +- 20.4789
$_2 = 1013.63 +- 6.76322
"""

NOISY_QUADRATIC_REPORT = """\
1003.46 + 1001.44*(x) + 2.4375*(x)^2
R-squared = 0.999501
$_1 = 1003.46 +- 31.2
$_2 = 1001.44 +- 29.5
$_3 = 2.4375 +- 5.65
"""


class FakeSolver:
    """In-memory stand-in for cfityk that replays canned reports."""

    def __init__(self, reports: Dict[str, str], returncodes: Optional[Dict[str, int]] = None):
        self.reports = reports
        self.returncodes = returncodes or {}
        self.calls = []

    def run(self, shape: str, data_path: str) -> SolverOutput:
        content = Path(data_path).read_text(encoding="utf-8")
        self.calls.append({"shape": shape, "data_path": data_path, "content": content})
        return SolverOutput(
            shape=shape,
            returncode=self.returncodes.get(shape, 0),
            lines=tuple(self.reports.get(shape, "").splitlines()),
            stderr="boom" if self.returncodes.get(shape, 0) else "",
        )


@pytest.fixture
def perfect_solver() -> FakeSolver:
    return FakeSolver({
        "Linear": PERFECT_LINEAR_REPORT,
        "Quadratic": PERFECT_QUADRATIC_REPORT,
    })


@pytest.fixture
def noisy_solver() -> FakeSolver:
    return FakeSolver({
        "Linear": NOISY_LINEAR_REPORT,
        "Quadratic": NOISY_QUADRATIC_REPORT,
    })


@pytest.fixture
def make_solver():
    return FakeSolver


@pytest.fixture
def perfectly_linear_data():
    return [list(point) for point in PERFECTLY_LINEAR_DATA]


@pytest.fixture
def linear_data():
    return [list(point) for point in LINEAR_DATA]


@pytest.fixture
def reports():
    return {
        "perfect_linear": PERFECT_LINEAR_REPORT,
        "perfect_quadratic": PERFECT_QUADRATIC_REPORT,
        "noisy_linear": NOISY_LINEAR_REPORT,
        "noisy_quadratic": NOISY_QUADRATIC_REPORT,
    }


@pytest.fixture(autouse=True)
def clean_settings():
    """Keep global settings from leaking between tests."""
    reset_settings()
    yield
    reset_settings()
