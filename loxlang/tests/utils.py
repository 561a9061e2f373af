"""
Utility functions shared across Lox tests.
"""
from loxlang.environment import Environment
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import parse


def parse_source(source: str):
    """
    Parse source code and return the AST. Fails the test on any error.
    """
    tokens, scan_errors = scan(source)
    assert scan_errors == []
    statements, parse_errors = parse(tokens, "<test>")
    assert parse_errors == [], [str(e) for e in parse_errors]
    return statements


def run_source(source: str, interpreter: Interpreter | None = None):
    """
    Run source code and return the interpreter and its runtime errors.
    """
    if interpreter is None:
        interpreter = Interpreter("<test>", Environment())
    errors = interpreter.interpret(parse_source(source))
    return interpreter, errors


def output(capsys) -> list[str]:
    """
    Return captured stdout as a list of lines.
    """
    return capsys.readouterr().out.strip().splitlines()
