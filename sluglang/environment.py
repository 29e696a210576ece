"""Environment.

A chain of mutable scopes. Each scope maps a name to a :class:`Binding`
holding a value and a constant flag, and links to the scope that encloses
it (None for the global scope).

Scopes are shared, never copied: a closure keeps a reference to the scope
it was created in, so mutation through any holder is seen by all of them.

Declaring a name searches the whole chain first. An existing binding is
overwritten in place, value and constant flag both; only when the name is
unbound everywhere is a new binding added to the innermost scope. Writes to
a constant binding, by declaration or assignment, raise
:class:`ConstantAssignmentException`.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from sluglang.exceptions import ConstantAssignmentException


class Binding:
    """A single named slot in a scope."""

    __slots__ = ("value", "constant")

    def __init__(self, value, constant: bool = False):
        self.value = value
        self.constant = constant

    def __repr__(self) -> str:
        return f"Binding({self.value!r}, constant={self.constant})"


class Environment:
    """One lexical scope."""

    def __init__(self, parent: Environment | None = None):
        self.values: dict[str, Binding] = {}
        self.parent = parent

    def child(self) -> Environment:
        """
        Create a new scope enclosed by this one.
        """
        return Environment(self)

    def bind(self, name: str, value) -> None:
        """
        Add a mutable binding to this scope only, replacing a same-named one.

        Used for call parameters, which always live in the call's own scope.
        """
        self.values[name] = Binding(value)

    def find(self, name: str) -> Binding | None:
        """
        Return the nearest binding for `name`, searching outward.
        """
        env = self
        while env is not None:
            binding = env.values.get(name)
            if binding is not None:
                return binding
            env = env.parent
        return None

    def lookup(self, name: str) -> Binding | None:
        """
        Return the live binding for `name`, or None if it is unbound.

        The binding is returned rather than its value so callers can tell
        an unbound name from one bound to null.
        """
        return self.find(name)

    def declare(self, name: str, value, constant: bool = False,
                line: int | None = None, file: str | None = None) -> None:
        """
        Bind `name`, overwriting any existing binding anywhere in the chain.

        Raises:
            ConstantAssignmentException: If the existing binding is constant.
        """
        binding = self.find(name)
        if binding is None:
            self.values[name] = Binding(value, constant)
            return
        if binding.constant:
            raise ConstantAssignmentException(name, line, file)
        binding.value = value
        binding.constant = constant

    def assign(self, name: str, value,
               line: int | None = None, file: str | None = None) -> bool:
        """
        Overwrite an existing binding.

        Returns:
            bool: False if `name` is unbound everywhere in the chain.

        Raises:
            ConstantAssignmentException: If the binding is constant.
        """
        binding = self.find(name)
        if binding is None:
            return False
        if binding.constant:
            raise ConstantAssignmentException(name, line, file)
        binding.value = value
        return True

    def depth(self) -> int:
        """
        Number of enclosing scopes above this one.
        """
        count = 0
        env = self.parent
        while env is not None:
            count += 1
            env = env.parent
        return count

    def __repr__(self) -> str:
        return f"Environment({sorted(self.values)}, depth={self.depth()})"
