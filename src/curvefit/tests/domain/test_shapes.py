import pytest

from curvefit.domain.exceptions import InvalidInput, ReportParseError
from curvefit.models.formulas import LinearFormula, QuadraticFormula
from curvefit.models import shapes as shapes_module
from curvefit.models.shapes import (
    LinearShape,
    QuadraticShape,
    Shape,
    available_shapes,
    get_shape,
    register_shape,
)


class TestConfidenceBounds:

    def test_linear_bounds_shift_each_term_independently(self):
        top, bottom = LinearShape().derive_confidence_bounds({
            1: (692.1, 32.0558),
            2: (30.633, 1.5),
        })
        assert top == LinearFormula(692.1 + 32.0558, 30.633 + 1.5)
        assert bottom == LinearFormula(692.1 - 32.0558, 30.633 - 1.5)

    def test_quadratic_bounds(self):
        top, bottom = QuadraticShape().derive_confidence_bounds({
            1: (10.0, 1.0),
            2: (2.0, 0.5),
            3: (0.2, 0.1),
        })
        assert top == QuadraticFormula(11.0, 2.5, pytest.approx(0.3))
        assert bottom == QuadraticFormula(9.0, 1.5, pytest.approx(0.1))

    def test_missing_error_raises(self):
        with pytest.raises(ReportParseError) as exc_info:
            QuadraticShape().derive_confidence_bounds({1: (1.0, 0.1), 2: (2.0, 0.2)})
        assert exc_info.value.context["missing"] == "$_3"
        assert exc_info.value.context["shape"] == "Quadratic"


class TestRegistry:

    def test_builtin_shapes_in_order(self):
        assert available_shapes()[:2] == ["Linear", "Quadratic"]

    def test_get_shape(self):
        assert isinstance(get_shape("Linear"), LinearShape)
        assert isinstance(get_shape("Quadratic"), QuadraticShape)

    def test_unknown_shape(self):
        with pytest.raises(InvalidInput) as exc_info:
            get_shape("Cubic")
        assert exc_info.value.context["field_value"] == "Cubic"
        assert "Linear" in str(exc_info.value)

    def test_register_custom_shape(self, monkeypatch):
        monkeypatch.setattr(shapes_module, "_REGISTRY", dict(shapes_module._REGISTRY))

        class SteepLinear(Shape):
            name = "SteepLinear"
            formula_type = LinearFormula
            term_count = 2

        shape = register_shape(SteepLinear())
        assert get_shape("SteepLinear") is shape
        assert shape.formula_from(["1", 2]) == LinearFormula(1.0, 2.0)
