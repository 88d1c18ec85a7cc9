import pytest

from curvefit.models.formulas import LinearFormula, QuadraticFormula
from curvefit.parsing.report import (
    FormulaLine,
    ParameterErrorLine,
    RSquaredLine,
    parse_line,
    parse_lines,
)


class TestRSquared:

    def test_parses_r_squared(self):
        assert parse_line("R-squared = 0.999764") == RSquaredLine(0.999764)

    def test_parses_exact_fit(self):
        parsed = parse_line("R-squared = 1\n")
        assert parsed == RSquaredLine(1.0)
        assert parsed.value == 1.0


class TestFormulaLines:

    def test_linear_formula(self):
        parsed = parse_line("692.1 + 30.633 * (x)")
        assert isinstance(parsed, FormulaLine)
        assert parsed.formula == LinearFormula(692.1, 30.633)
        assert parsed.coefficients == (692.1, 30.633)

    def test_quadratic_formula(self):
        parsed = parse_line("1019.43 + 9.543*(x) + 0.202086*(x)^2")
        assert isinstance(parsed, FormulaLine)
        assert parsed.formula == QuadraticFormula(1019.43, 9.543, 0.202086)

    def test_quadratic_line_is_never_read_as_linear(self):
        parsed = parse_line("1019.43 + 9.543 * (x) + 0.202086 * (x)^2")
        assert isinstance(parsed.formula, QuadraticFormula)

    def test_negative_and_exponent_coefficients(self):
        parsed = parse_line("1.5e+03 + -2.25 * (x)")
        assert parsed.formula == LinearFormula(1500.0, -2.25)

    def test_leading_label_is_tolerated(self):
        parsed = parse_line("@0: 692.1 + 30.633 * (x)")
        assert parsed.formula == LinearFormula(692.1, 30.633)

    def test_trailing_text_is_not_a_formula(self):
        assert parse_line("692.1 + 30.633 * (x) and more") is None


class TestParameterErrors:

    def test_parameter_error_line(self):
        parsed = parse_line("$_1 = 692.1 +- 32.0558")
        assert parsed == ParameterErrorLine(index=1, value=692.1, error=32.0558)

    def test_negative_value_and_multi_digit_index(self):
        parsed = parse_line("$_12 = -0.25 +- 0.004")
        assert parsed == ParameterErrorLine(index=12, value=-0.25, error=0.004)


@pytest.mark.parametrize("line", [
    "",
    "Guessing Linear...",
    "WSSR: 2817.24",
    "@0: data points: 6, fitted function: Linear",
    "Degrees of freedom: 4",
])
def test_unrelated_lines_are_ignored(line):
    assert parse_line(line) is None


def test_parse_lines_pairs_each_line_with_its_meaning(reports):
    lines = reports["noisy_linear"].splitlines()
    parsed = list(parse_lines(lines))

    assert [line for line, _ in parsed] == lines
    kinds = [type(p).__name__ for _, p in parsed if p is not None]
    assert kinds == ["FormulaLine", "RSquaredLine", "ParameterErrorLine", "ParameterErrorLine"]
