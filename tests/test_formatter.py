import math
from decimal import Decimal

import pytest

from conftest import Color
from object2code import Byte, Char, Double, Float, Long, Short, UnsupportedTypeError


@pytest.mark.parametrize(
    "cls, value, expected",
    [
        (Byte, 82, "(byte) 82"),
        (Byte, -128, "(byte) -128"),
        (Short, 45, "(short)45"),
        (int, 255, "255"),
        (int, 2**40, "1099511627776l"),
        (Long, 656, "656l"),
        (Float, 2.3, "2.3f"),
        (Float, 0.0, "0.0f"),
        (Double, 2.3, "2.3"),
        (float, 1e-7, "1e-07"),
        (bool, True, "true"),
        (bool, False, "false"),
        (Char, "k", "'k'"),
        (Char, "\0", "''"),
        (Decimal, Decimal("1.50"), 'new BigDecimal("1.50")'),
        (str, "String", '"String"'),
    ],
)
def test_java_literals(java, cls, value, expected):
    assert java.formatter.format(cls, value) == expected


def test_java_strings_are_not_escaped(java):
    assert java.formatter.format_value('say "hi"') == '"say "hi""'


def test_java_enum_literal(java):
    assert java.formatter.format_value(Color.GREEN) == "pkg.Color.GREEN"


def test_java_non_finite_floats(java):
    assert java.formatter.format(float, math.nan) == "Double.NaN"
    assert java.formatter.format(Float, math.inf) == "Float.POSITIVE_INFINITY"
    assert java.formatter.format(Double, -math.inf) == "Double.NEGATIVE_INFINITY"


def test_declared_width_wins_over_runtime_type(java):
    assert java.formatter.format(Long, 1) == "1l"
    assert java.formatter.format(Float, 1) == "1.0f"


def test_enum_type_requires_member(java):
    with pytest.raises(UnsupportedTypeError):
        java.formatter.format(Color, 1)


def test_unsupported_type_raises(java):
    with pytest.raises(UnsupportedTypeError):
        java.formatter.format(complex, 1j)


@pytest.mark.parametrize(
    "value",
    [0, -5, 2**62, 2.3, 1e-300, "it's \"quoted\"", Decimal("1.50"), True, Char("k")],
)
def test_python_literals_evaluate_back(python, value):
    import decimal

    literal = python.formatter.format_value(value)

    assert eval(literal, {"decimal": decimal}) == value


def test_python_float_literal_keeps_single_precision_value(python):
    value = Float(2.3)

    assert float(eval(python.formatter.format_value(value))) == pytest.approx(value)


def test_python_decimal_keeps_canonical_text(python):
    import decimal

    literal = python.formatter.format_value(Decimal("1.50"))

    assert str(eval(literal, {"decimal": decimal})) == "1.50"


def test_python_enum_and_non_finite(python):
    assert python.formatter.format_value(Color.RED) == "pkg.Color.RED"
    assert python.formatter.format_value(math.nan) == "float('nan')"
    assert python.formatter.format_value(-math.inf) == "float('-inf')"
