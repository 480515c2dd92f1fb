import math

import pytest

from exprcalc.session import Calculator


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("12.25", 12.25),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("2+3*4", 14.0),
        pytest.param("(2+3)*4", 20.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        # all binary operators are left-associative
        pytest.param("2-3-4", -5.0),
        pytest.param("2^3^2", 64.0),
        pytest.param("2^-1", 0.5),
        pytest.param("-2^2", 4.0),
        pytest.param("2 * 3 % 4", 6.0),
        # percent truncates both operands
        pytest.param("7 % 3", 1.0),
        pytest.param("7.9 % 2.5", 1.0),
        pytest.param("-7 % 3", -1.0),
        pytest.param("7 % -3", 1.0),
        # funcs
        pytest.param("sqrt 16", 4.0),
        pytest.param("abs -3", 3.0),
        pytest.param("log2 8", 3.0),
        pytest.param("lg 1000", 3.0),
        pytest.param("ln e", 1.0),
        pytest.param("sin 0 + 1", 1.0),
        pytest.param("sin 2 + 3", math.sin(2) + 3),
        pytest.param("2 * pi", 2 * math.pi),
        pytest.param("!5", 120.0),
        pytest.param("5!", 120.0),
        pytest.param("3!!", 720.0),
        pytest.param("(1+2)! + 1", 7.0),
        pytest.param("0.5!", math.gamma(1.5)),
        pytest.param("SIN 0 + PI", math.pi),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    result = Calculator().evaluate(code, radians=True)
    assert result.ok
    assert result.value == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1/0", math.inf),
        pytest.param("-1/0", -math.inf),
        pytest.param("ln 0", -math.inf),
        pytest.param("10^400", math.inf),
        pytest.param("171!", math.inf),
    ],
)
def test_eval_infinite(code: str, expected_ret_val: float) -> None:
    result = Calculator().evaluate(code)
    assert result.ok
    assert result.value == expected_ret_val


@pytest.mark.parametrize("code", ["0/0", "sqrt -1", "ln -1", "asin 2", "5 % 0", "(-8)^(1/3)", "!(-1)"])
def test_eval_nan(code: str) -> None:
    result = Calculator().evaluate(code)
    assert result.ok
    assert math.isnan(result.value)


@pytest.mark.parametrize(
    "code, radians, expected_ret_val",
    [
        pytest.param("sin 90", False, 1.0),
        pytest.param("cos 180", False, -1.0),
        pytest.param("tan 45", False, 1.0),
        pytest.param("asin 1", False, 90.0),
        pytest.param("acos 0", False, 90.0),
        pytest.param("atan 1", False, 45.0),
        pytest.param("sin (pi/2)", True, 1.0),
        pytest.param("asin 1", True, math.pi / 2),
        pytest.param("atan 1", True, math.pi / 4),
        # functions that are not angle-sensitive ignore the unit
        pytest.param("sqrt 90", False, math.sqrt(90)),
    ],
)
def test_eval_angle_units(code: str, radians: bool, expected_ret_val: float) -> None:
    result = Calculator().evaluate(code, radians=radians)
    assert result.ok
    assert result.value == pytest.approx(expected_ret_val)


@pytest.mark.parametrize("literal", ["0", "7", "42", "3.5", "0.125", "100.0", "007"])
def test_literal_evaluates_to_itself(literal: str) -> None:
    result = Calculator().evaluate(literal)
    assert result.ok
    assert result.value == float(literal)
