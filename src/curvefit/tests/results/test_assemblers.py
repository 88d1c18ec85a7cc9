import json

import numpy as np
import pytest

from curvefit.domain.models import FitResult
from curvefit.results.assemblers import result_rows, result_to_dict, write_result_json


@pytest.fixture
def result():
    return FitResult(
        data=([0, 1000.0], [1, 2000.0]),
        trend=((0, 1000.0), (1, 2000.0), (2, 3000.0)),
        top_confidence=((0, 1010.0), (1, 2020.0), (2, 3030.0)),
        bottom_confidence=((0, 990.0), (1, 1980.0), (2, 2970.0)),
        ceiling=((0, 2500.0), (1, 2500.0), (2, 2500.0)),
        r_squared=0.99,
        guess="Linear",
    )


def test_result_to_dict_keys(result):
    as_dict = result_to_dict(result)

    assert set(as_dict) == {
        "data", "trend", "top_confidence", "bottom_confidence",
        "ceiling", "r_squared", "guess",
    }
    assert as_dict["trend"] == [[0, 1000.0], [1, 2000.0], [2, 3000.0]]
    assert as_dict["guess"] == "Linear"


def test_result_to_dict_coerces_values():
    odd = FitResult(
        data=(["2024-01", np.float64(5.0)],),
        trend=((np.int64(0), np.float64(float("nan"))),),
        top_confidence=((0, float("inf")),),
        bottom_confidence=((0, None),),
        ceiling=(),
        r_squared=np.float64(1.0),
        guess="Quadratic",
    )
    as_dict = result_to_dict(odd)

    assert as_dict["data"] == [["2024-01", 5.0]]
    assert as_dict["trend"] == [[0.0, None]]
    assert as_dict["top_confidence"] == [[0, None]]
    assert as_dict["bottom_confidence"] == [[0, None]]
    assert as_dict["r_squared"] == 1.0
    assert type(as_dict["r_squared"]) is float


def test_result_rows_with_ceiling(result):
    rows = list(result_rows(result))

    assert rows[0] == (0, 1000.0, 1010.0, 990.0, 2500.0)
    assert len(rows) == 3


def test_result_rows_without_ceiling(result):
    no_ceiling = FitResult(**{**result.__dict__, "ceiling": ()})
    rows = list(result_rows(no_ceiling))

    assert [row[4] for row in rows] == [None, None, None]


def test_write_result_json(result, tmp_path):
    out = tmp_path / "result.json"
    text = write_result_json(result, out)

    assert json.loads(text) == json.loads(out.read_text(encoding="utf-8"))
    assert json.loads(text)["r_squared"] == 0.99


def test_write_result_json_without_path(result, tmp_path):
    text = write_result_json(result, indent=None)
    assert "\n" not in text
    assert list(tmp_path.iterdir()) == []
