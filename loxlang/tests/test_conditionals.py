"""
Tests for truthiness, conditionals, logical operators and loops.
"""
import pytest

from loxlang.interpreter import is_truthy
from loxlang.tests.utils import output, run_source


@pytest.mark.parametrize("value, expected", [
    (None, False),
    (False, False),
    (True, True),
    (0.0, True),
    ("", True),
    ("false", True),
])
def test_truthiness_table(value, expected):
    assert is_truthy(value) is expected


def test_zero_is_truthy(capsys):
    """
    Test that 0 takes the then branch.
    """
    run_source("if (0) print 1; else print 2;")
    assert output(capsys) == ['1']


def test_nil_and_false_take_else(capsys):
    run_source(
        "if (nil) print 1; else print 2;\n"
        "if (false) print 3; else print 4;\n"
        'if ("") print 5; else print 6;\n'
    )
    assert output(capsys) == ['2', '4', '5']


def test_dangling_else_binds_to_nearest_if(capsys):
    run_source("if (true) if (false) print 1; else print 2;")
    assert output(capsys) == ['2']


def test_logical_operators_return_operands(capsys):
    run_source(
        'print nil or "default";\n'
        'print "first" or "second";\n'
        'print nil and "never";\n'
        'print 1 and 2;\n'
        'print !nil;\n'
    )
    assert output(capsys) == ['default', 'first', 'nil', '2', 'true']


def test_logical_operators_short_circuit(capsys):
    run_source(
        "var calls = 0;\n"
        "fun touch() { calls = calls + 1; return true; }\n"
        "false and touch();\n"
        "true or touch();\n"
        "print calls;\n"
    )
    assert output(capsys) == ['0']


def test_while_loop(capsys):
    run_source(
        "var i = 0;\n"
        "while (i < 3) {\n"
        "    print i;\n"
        "    i = i + 1;\n"
        "}\n"
    )
    assert output(capsys) == ['0', '1', '2']


def test_for_loop_scopes_its_variable(capsys):
    interpreter, errors = run_source(
        "var total = 0;\n"
        "for (var i = 1; i <= 4; i = i + 1) total = total + i;\n"
        "print total;\n"
    )
    assert errors == []
    assert output(capsys) == ['10']
    assert "i" not in interpreter.globals


def test_fibonacci(capsys):
    run_source(
        "var a = 0;\n"
        "var temp;\n"
        "for (var b = 1; a < 50; b = temp + b) {\n"
        "    print a;\n"
        "    temp = a;\n"
        "    a = b;\n"
        "}\n"
    )
    assert output(capsys) == ['0', '1', '1', '2', '3', '5', '8', '13', '21', '34']
