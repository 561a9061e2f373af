"""Environment.

A chain of lexical scopes. Each :class:`Environment` maps names to runtime
values and optionally links to an enclosing environment. Lookups and
assignments walk outward through the links; definitions always land in the
innermost scope.

Environments are shared by reference: a block scope, a function closure and
the global scope may all point at the same enclosing environment, and an
assignment through any of them is visible to the others.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import UndefinedVariableException


class Environment:
    """One lexical scope."""

    def __init__(self, enclosing: 'Environment | None' = None):
        """
        Initialize a scope.

        Parameters:
            enclosing (Environment | None): The parent scope, None for globals.
        """
        self.values: dict[str, object] = {}
        self.enclosing = enclosing

    def define(self, name: str, value) -> None:
        """
        Bind ``name`` in this scope, replacing any existing binding here.
        """
        self.values[name] = value

    def get(self, name: str):
        """
        Return the value bound to ``name`` in the nearest scope that has it.

        Raises:
            UndefinedVariableException: If no scope in the chain binds ``name``.
        """
        env = self
        while env is not None:
            if name in env.values:
                return env.values[name]
            env = env.enclosing
        raise UndefinedVariableException(name)

    def assign(self, name: str, value) -> None:
        """
        Rebind ``name`` in the nearest scope that has it. Never creates a
        binding.

        Raises:
            UndefinedVariableException: If no scope in the chain binds ``name``.
        """
        env = self
        while env is not None:
            if name in env.values:
                env.values[name] = value
                return
            env = env.enclosing
        raise UndefinedVariableException(name)

    def __contains__(self, name: str) -> bool:
        env = self
        while env is not None:
            if name in env.values:
                return True
            env = env.enclosing
        return False

    def __repr__(self) -> str:
        depth = 0
        env = self.enclosing
        while env is not None:
            depth += 1
            env = env.enclosing
        return f"Environment(depth={depth}, names={sorted(self.values)})"
