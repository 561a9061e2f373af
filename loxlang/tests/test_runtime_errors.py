"""
Tests for runtime error collection.
"""
from loxlang.exceptions import LoxRuntimeError, UndefinedVariableException
from loxlang.tests.utils import output, run_source


def test_errors_accumulate_across_statements(capsys):
    """
    Test that a failing top-level statement does not stop the next one.
    """
    _, errors = run_source(
        "print 1;\n"
        "print missing;\n"
        "print 2;\n"
        'print 3 - "x";\n'
        "print 4;\n"
    )
    assert output(capsys) == ['1', '2', '4']
    assert [e.line for e in errors] == [2, 4]
    assert isinstance(errors[0], UndefinedVariableException)
    assert all(isinstance(e, LoxRuntimeError) for e in errors)


def test_error_abandons_rest_of_statement(capsys):
    _, errors = run_source(
        "{\n"
        "    print 1;\n"
        "    print nil - 1;\n"
        "    print 2;\n"
        "}\n"
    )
    assert output(capsys) == ['1']
    assert len(errors) == 1


def test_failed_declaration_leaves_name_undefined():
    interpreter, errors = run_source("var x = 1 / 0;")
    assert len(errors) == 1
    assert "x" not in interpreter.globals
