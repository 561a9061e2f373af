"""
Tests for scoping rules in Lox.
"""
from loxlang.environment import Environment
from loxlang.interpreter import Interpreter, interpret
from loxlang.tests.utils import output, parse_source, run_source


def test_block_shadowing(capsys):
    """
    Test that a block variable shadows an outer one only inside the block.
    """
    run_source(
        'var a = "global";\n'
        "{\n"
        '    var a = "inner";\n'
        "    print a;\n"
        "}\n"
        "print a;\n"
    )
    assert output(capsys) == ['inner', 'global']


def test_block_assigns_outer_variable(capsys):
    run_source(
        "var a = 1;\n"
        "{ a = 2; { a = a + 1; } }\n"
        "print a;\n"
    )
    assert output(capsys) == ['3']


def test_block_variable_discarded_after_block():
    interpreter, errors = run_source("{ var hidden = 1; }\nprint hidden;")
    assert "hidden" not in interpreter.globals
    assert len(errors) == 1
    assert errors[0].message == "Undefined variable 'hidden'."
    assert errors[0].expr == "hidden"
    assert errors[0].line == 2


def test_environment_restored_after_runtime_error(capsys):
    interpreter, errors = run_source(
        "var a = 1;\n"
        "{ var a = 2; print a / 0; }\n"
        "print a;\n"
    )
    assert len(errors) == 1
    assert interpreter.environment is interpreter.globals
    assert output(capsys) == ['1']


def test_var_without_initializer_is_nil(capsys):
    run_source("var a; print a;")
    assert output(capsys) == ['nil']


def test_assign_undefined_is_runtime_error():
    _, errors = run_source("x = 5;")
    assert len(errors) == 1
    assert errors[0].message == "Undefined variable 'x'."
    assert errors[0].expr == "x = 5"


def test_top_level_environment_persists_across_inputs(capsys):
    """
    Test that a second input sees what the first defined.
    """
    env = Environment()
    assert interpret(parse_source("var x = 1;"), env) == []
    assert interpret(parse_source("print x;"), env) == []
    assert output(capsys) == ['1']
    assert env.get("x") == 1


def test_interpreter_reused_across_inputs(capsys):
    interpreter = Interpreter("<test>")
    run_source("var greeting = \"hi\";", interpreter)
    run_source("greeting = greeting + \"!\";", interpreter)
    run_source("print greeting;", interpreter)
    assert output(capsys) == ['hi!']
