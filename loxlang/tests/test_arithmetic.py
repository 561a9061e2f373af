"""
Tests for arithmetic, concatenation and comparison in Lox.
"""
import pytest

from loxlang.environment import Environment
from loxlang.interpreter import Interpreter, stringify
from loxlang.tests.utils import output, parse_source, run_source


def evaluate(source: str):
    """
    Evaluate a single expression and return its value.
    """
    ast = parse_source(source + ";")
    return Interpreter("<test>", Environment()).eval_expr(ast[0][1])


def test_arithmetic_runtime(capsys):
    source = (
        "print 1 + 2 * 3;\n"
        "print (1 + 2) * 3;\n"
        "print 10 / 4;\n"
        "print 7 - 10;\n"
        "print -(2 + 3);\n"
    )
    _, errors = run_source(source)
    assert errors == []
    assert output(capsys) == ['7', '9', '2.5', '-3', '-5']


def test_numeric_addition():
    assert evaluate("1 + 2") == 3


def test_string_concatenation():
    assert evaluate('"a" + "b"') == "ab"


def test_number_plus_string_stringifies():
    """
    Test that `+` with a string on either side concatenates.
    """
    assert evaluate('1 + "b"') == "1b"
    assert evaluate('"b" + 2.5') == "b2.5"
    assert evaluate('"is " + true') == "is true"
    assert evaluate('nil + "x"') == "nilx"


@pytest.mark.parametrize("source, expected", [
    ("1 < 2", True),
    ("2 <= 2", True),
    ("3 > 4", False),
    ("4 >= 5", False),
    ("1 == 1", True),
    ("1 != 2", True),
    ('"a" == "a"', True),
    ("nil == nil", True),
    ("nil == false", False),
    ("true == 1", False),
    ('"1" == 1', False),
    ("0 == false", False),
])
def test_comparison_and_equality(source, expected):
    assert evaluate(source) is expected


def test_division_by_zero_is_runtime_error():
    _, errors = run_source("print 1 / 0;")
    assert len(errors) == 1
    assert errors[0].message == "Division by zero."
    assert errors[0].expr == "1 / 0"
    assert errors[0].line == 1


@pytest.mark.parametrize("source, message", [
    ('print 1 - "a";', "Operands must be numbers."),
    ('print "a" * 2;', "Operands must be numbers."),
    ('print true < 1;', "Operands must be numbers."),
    ('print nil + true;', "Operands must be two numbers or two strings."),
    ('print -"a";', "Operand must be a number."),
])
def test_type_errors(source, message):
    _, errors = run_source(source)
    assert [e.message for e in errors] == [message]


def test_error_names_offending_expression():
    _, errors = run_source('var a = 1;\nprint a - "x" + 2;')
    error = errors[0]
    assert error.line == 2
    assert error.expr == 'a - "x"'
    assert str(error) == 'Operands must be numbers. [line 2]: a - "x"'


@pytest.mark.parametrize("value, text", [
    (None, "nil"),
    (True, "true"),
    (False, "false"),
    (3.0, "3"),
    (2.5, "2.5"),
    (-0.0, "-0"),
    (0.0, "0"),
    ("hi", "hi"),
])
def test_stringify(value, text):
    assert stringify(value) == text


def test_negative_zero_prints_sign(capsys):
    run_source("print -0;\nprint 0 * -1;")
    assert output(capsys) == ["-0", "-0"]
