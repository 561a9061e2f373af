"""
Lox Language Interpreter

This is the main entry point for the Lox interpreter.

Workflow:
1. The source is read from the file named on the command line, or line by line
   from the interactive prompt.
2. The lexer scans the source into tokens.
3. The parser builds statements from the tokens, collecting every syntax error.
4. The interpreter walks the statements against the global environment.
5. Errors from any stage are reported and mapped to a process exit status.

Exit status:
    0   success
    64  usage error
    65  scan or parse error
    66  script could not be read
    70  runtime error

Set LOXDEBUG in the environment to dump tokens and AST and enable debug logs.


File: lox.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import logging
import os
import sys

from loxlang.exceptions import ParseError, UnterminatedStringError
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import parse

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70

logger = logging.getLogger("lox")


def debug_enabled() -> bool:
    """
    Return True when LOXDEBUG is set to a non-empty value.
    """
    return bool(os.environ.get('LOXDEBUG'))


def configure_logging() -> None:
    """
    Initialize logging. Warnings only, unless debugging.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def print_usage():
    """
    Print usage.
    """
    print("Usage: lox [script]")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def report(line, location: str, message: str) -> None:
    """
    Print a scan or parse error.
    """
    where = f" {location}" if location else ""
    print(f"[line {line}] Error{where}: {message}")


def report_parse_error(error: ParseError) -> None:
    """
    Print a parse error, locating it at its token or at end of input.
    """
    if error.token is None:
        report(error.line, "at end", error.message)
    else:
        report(error.line, f"at '{error.token.lexeme}'", error.message)


def run(source: str, interpreter: Interpreter) -> int:
    """
    Scan, parse and execute ``source``.

    Returns:
        int: The exit status for this run.
    """
    tokens, scan_errors = scan(source)
    if scan_errors:
        for error in scan_errors:
            report(error.line, "", str(error))
        return EXIT_DATA_ERROR

    statements, parse_errors = parse(tokens, interpreter.file)
    if parse_errors:
        for error in parse_errors:
            report_parse_error(error)
        return EXIT_DATA_ERROR

    if debug_enabled():
        debug_print_tokens_ast(tokens, statements)

    runtime_errors = interpreter.interpret(statements)
    if runtime_errors:
        for error in runtime_errors:
            print(f"{error.message} [line {error.line}]: {error.expr}")
        return EXIT_SOFTWARE
    return EXIT_OK


def is_incomplete(source: str) -> bool:
    """
    Return True if ``source`` only fails because it ends too early, so the
    prompt should ask for more input.
    """
    tokens, scan_errors = scan(source)
    if scan_errors:
        return isinstance(scan_errors[0], UnterminatedStringError)
    _, parse_errors = parse(tokens)
    return bool(parse_errors) and all(error.at_end for error in parse_errors)


def run_file(script_name: str) -> int:
    """
    Run a Lox script.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Could not read {script_name}: {e.strerror}")
        return EXIT_NO_INPUT

    logger.debug("running %s", script_name)
    return run(code, Interpreter(script_name))


def run_prompt() -> int:
    """
    Run the interactive prompt.

    One interpreter, and so one global environment, serves the whole
    session, so definitions persist from one input to the next.
    """
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    line = 1
    while True:
        try:
            prompt = f"[{line}] " if not buffer else "... "
            text = input(prompt)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break

        if not buffer and text.strip() in {"exit", "quit"}:
            break
        if not buffer and not text.strip():
            continue

        buffer.append(text)
        source = "\n".join(buffer)
        # A blank line forces an incomplete input through so its errors show
        if text.strip() and is_incomplete(source):
            continue

        run(source, interpreter)
        buffer.clear()
        line += 1
    return EXIT_OK


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the interactive prompt.
    - One argument: treat it as the path to a script and run it.
    - Any other pattern: print usage and return 64.
    """
    configure_logging()
    args = argv[1:]
    if not args:
        return run_prompt()
    if len(args) == 1:
        return run_file(args[0])
    print_usage()
    return EXIT_USAGE


def cli() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
