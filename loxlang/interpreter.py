"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, string concatenation, variables, blocks, conditionals, loops, functions with
closures, and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both methods operate over structured tuples representing nodes in the AST.

2. Environment
Variables live in a chain of `Environment` scopes. The interpreter holds the global scope
and the scope currently in effect. Blocks and function calls install a fresh child scope
and restore the previous one when they finish, even if they finish with an error.

3. Expression Evaluation
Arithmetic requires numbers, except `+` which concatenates when either side is a string.
Division by zero is an error. Values of different types are never equal. `nil` and
`false` are falsey; every other value, including `0` and `""`, is truthy.

4. Error Handling
Evaluation errors are raised as `LoxRuntimeError` carrying the offending expression
rendered back to source form and its line. `interpret()` catches them per top-level
statement, so one failing statement does not stop the ones after it, and returns them all.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import math

from loxlang.environment import Environment
from loxlang.exceptions import (
    LoxRuntimeError,
    ReturnControlFlow,
    UndefinedVariableException,
    UnknownOpException,
)
from loxlang.operations import BINARY_OPS, LOGICAL_OPS, SYMBOLS, Op

logger = logging.getLogger(__name__)


def is_number(value) -> bool:
    """Return True for numeric runtime values. Booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value) -> bool:
    """Only nil and false are falsey."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(lhs, rhs) -> bool:
    """Equality without coercion: values of different types are never equal."""
    if lhs is None or rhs is None:
        return lhs is None and rhs is None
    if isinstance(lhs, bool) or isinstance(rhs, bool):
        return isinstance(lhs, bool) and isinstance(rhs, bool) and lhs == rhs
    if is_number(lhs) and is_number(rhs):
        return lhs == rhs
    if type(lhs) is not type(rhs):
        return False
    return lhs == rhs


def stringify(value) -> str:
    """Render a runtime value the way `print` shows it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        if value.is_integer():
            return str(int(value))
        return str(value)
    return str(value)


class LoxFunction:
    """Runtime representation of a function value."""

    def __init__(self, name, params, body, closure):
        self.name = name
        self.params = params
        self.body = body
        # Scope in effect where the function was declared.
        self.closure = closure

    @property
    def arity(self) -> int:
        return len(self.params)

    def call(self, interpreter: 'Interpreter', args: list):
        """
        Run the body in a fresh scope whose parent is the closure.
        """
        env = Environment(self.closure)
        for param, arg in zip(self.params, args):
            env.define(param, arg)
        try:
            interpreter.execute_block(self.body, env)
        except ReturnControlFlow as ret:
            return ret.value
        return None

    def __repr__(self) -> str:
        return f"<fn {self.name}>"


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, file: str = "<stdin>", environment: Environment | None = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name of the script, used in log records.
            environment (Environment | None): Global scope to run against.
                A new one is created if omitted.
        """
        if environment is None:
            environment = Environment()
        self.globals = environment
        self.environment = environment
        self.file = file

    def _format_expr(self, node) -> str:
        """
        Convert AST back to a readable string for error reports.

        Args:
            node (tuple): An expression node, structured as a tuple.

        Returns:
            str: A string representation of the expression.
        """
        op = node[0]
        match op:
            case 'number' | 'bool' | 'nil':
                return stringify(node[1])
            case 'string':
                return f'"{node[1]}"'
            case 'grouping':
                return f"({self._format_expr(node[1])})"
            case 'ident':
                return node[1]
            case 'assign':
                return f"{node[1]} = {self._format_expr(node[2])}"
            case 'unary':
                return f"{SYMBOLS[node[1]]}{self._format_expr(node[2])}"
            case 'func_call':
                callee, args = node[1], node[2]
                return (
                    f"{self._format_expr(callee)}"
                    f"({', '.join(self._format_expr(arg) for arg in args)})"
                )
            case _ if op in SYMBOLS:
                return (
                    f"{self._format_expr(node[1])} {SYMBOLS[op]} "
                    f"{self._format_expr(node[2])}"
                )
            case _:
                name = op if isinstance(op, str) else op.value
                return f"<expr {name}>"

    def _format_stmt(self, stmt) -> str:
        """
        Render the expression a statement is built around, or its name if
        it has none.
        """
        match stmt[0]:
            case 'expr_stmt' | 'print' | 'if' | 'while':
                return self._format_expr(stmt[1])
            case 'var' if stmt[2] is not None:
                return f"var {stmt[1]} = {self._format_expr(stmt[2])}"
            case 'var' | 'func_def':
                return f"{stmt[0]} {stmt[1]}"
            case 'return' if stmt[1] is not None:
                return f"return {self._format_expr(stmt[1])}"
            case _:
                return stmt[0]

    def _error(self, message: str, node) -> LoxRuntimeError:
        return LoxRuntimeError(message, self._format_expr(node), node[-1])

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node, structured as a tuple.
                        The first element is the operation type (e.g., 'ident', Op.ADD),
                        followed by operands and the line number for error reporting.

        Returns:
            The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            UnknownOpException: If an unrecognized operator is encountered.
            LoxRuntimeError: If operand types do not suit the operator.
        """
        op = node[0]
        line = node[-1]

        # Literals
        if op in ('number', 'string', 'bool', 'nil'):
            return node[1]
        elif op == 'grouping':
            return self.eval_expr(node[1])

        # Variables
        elif op == 'ident':
            try:
                return self.environment.get(node[1])
            except UndefinedVariableException as e:
                raise UndefinedVariableException(node[1], self._format_expr(node), line) from e
        elif op == 'assign':
            _, var_name, value_node, _ = node
            value = self.eval_expr(value_node)
            try:
                self.environment.assign(var_name, value)
            except UndefinedVariableException as e:
                raise UndefinedVariableException(var_name, self._format_expr(node), line) from e
            return value

        # Logical operators return the deciding operand
        elif op in LOGICAL_OPS:
            lhs = self.eval_expr(node[1])
            if op == Op.OR:
                if is_truthy(lhs):
                    return lhs
            elif not is_truthy(lhs):
                return lhs
            return self.eval_expr(node[2])

        # Binary operations
        elif op in BINARY_OPS:
            lhs = self.eval_expr(node[1])
            rhs = self.eval_expr(node[2])
            return self._binary(op, lhs, rhs, node)

        # Unary operator
        elif op == 'unary':
            operator = node[1]
            operand = self.eval_expr(node[2])
            match operator:
                case Op.NOT:
                    return not is_truthy(operand)
                case Op.NEG:
                    if not is_number(operand):
                        raise self._error("Operand must be a number.", node)
                    return -operand
                case _:
                    raise UnknownOpException(operator, self._format_expr(node), line)

        # Function calls
        elif op == 'func_call':
            _, callee_node, args_nodes, _ = node
            callee = self.eval_expr(callee_node)
            args = [self.eval_expr(arg) for arg in args_nodes]
            if not isinstance(callee, LoxFunction):
                raise self._error("Can only call functions.", node)
            if len(args) != callee.arity:
                raise self._error(
                    f"Expected {callee.arity} arguments but got {len(args)}.", node
                )
            return callee.call(self, args)

        raise UnknownOpException(op, self._format_expr(node), line)

    def _binary(self, op: Op, lhs, rhs, node):
        """
        Apply a binary operator to two evaluated operands.
        """
        match op:
            # Equality never fails
            case Op.EQ:
                return is_equal(lhs, rhs)
            case Op.NE:
                return not is_equal(lhs, rhs)
            # Arithmetic
            case Op.ADD:
                if is_number(lhs) and is_number(rhs):
                    return lhs + rhs
                if isinstance(lhs, str) or isinstance(rhs, str):
                    return stringify(lhs) + stringify(rhs)
                raise self._error("Operands must be two numbers or two strings.", node)

        if not (is_number(lhs) and is_number(rhs)):
            raise self._error("Operands must be numbers.", node)

        match op:
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0:
                    raise self._error("Division by zero.", node)
                return lhs / rhs
            # Comparison
            case Op.GT:
                return lhs > rhs
            case Op.GE:
                return lhs >= rhs
            case Op.LT:
                return lhs < rhs
            case Op.LE:
                return lhs <= rhs
            case _:
                raise UnknownOpException(op, self._format_expr(node), node[-1])

    def execute_block(self, statements: list, environment: Environment):
        """
        Execute statements in ``environment`` and restore the previous scope
        afterwards.
        """
        previous = self.environment
        self.environment = environment
        try:
            self.execute(statements)
        finally:
            self.environment = previous

    def execute(self, statements: list):
        """
        Executes a list of statements.

        Parameters:
            statements (list):
                A list of ('var' | 'print' | 'if' | 'block' | 'while' | ...) tuples.

        Raises:
            LoxRuntimeError: On the first failing statement.
        """
        for stmt in statements:
            self.execute_stmt(stmt)

    def execute_stmt(self, stmt: tuple):
        """
        Executes a single statement.
        """
        kind = stmt[0]

        match kind:
            case 'expr_stmt':
                self.eval_expr(stmt[1])

            case 'print':
                value = self.eval_expr(stmt[1])
                print(stringify(value))

            case 'var':
                _, var_name, initializer, _ = stmt
                value = None
                if initializer is not None:
                    value = self.eval_expr(initializer)
                self.environment.define(var_name, value)

            case 'block':
                self.execute_block(stmt[1], Environment(self.environment))

            case 'if':
                _, cond_node, then_branch, else_branch, _ = stmt
                if is_truthy(self.eval_expr(cond_node)):
                    self.execute_stmt(then_branch)
                elif else_branch is not None:
                    self.execute_stmt(else_branch)

            case 'while':
                _, cond_node, body, _ = stmt
                while is_truthy(self.eval_expr(cond_node)):
                    self.execute_stmt(body)

            case 'func_def':
                _, name, params, body, _ = stmt
                self.environment.define(
                    name, LoxFunction(name, params, body, self.environment)
                )

            case 'return':
                _, expr_node, _ = stmt
                value = None if expr_node is None else self.eval_expr(expr_node)
                raise ReturnControlFlow(value)

            case _:
                raise UnknownOpException(kind, kind, stmt[-1])

    def interpret(self, statements: list) -> list[LoxRuntimeError]:
        """
        Execute top-level statements, collecting runtime errors.

        A runtime error abandons the statement it occurred in; execution
        resumes with the next top-level statement.

        Returns:
            list[LoxRuntimeError]: Every error raised, in execution order.
        """
        errors: list[LoxRuntimeError] = []
        for stmt in statements:
            try:
                self.execute_stmt(stmt)
            except LoxRuntimeError as e:
                logger.debug("runtime error in %s: %s", self.file, e)
                errors.append(e)
            except RecursionError:
                errors.append(
                    LoxRuntimeError("Stack overflow.", self._format_stmt(stmt), stmt[-1])
                )
        logger.debug(
            "executed %d statements in %s with %d errors",
            len(statements), self.file, len(errors),
        )
        return errors


def interpret(statements: list, env: Environment, file: str = "<stdin>") -> list[LoxRuntimeError]:
    """
    Run ``statements`` against ``env`` and return the collected runtime errors.
    """
    return Interpreter(file, env).interpret(statements)
