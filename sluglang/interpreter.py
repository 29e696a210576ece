"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the
parser. It supports integer and boolean arithmetic, variables and
constants, first-class functions with closures, conditionals, loops and
the `outn` output built-in.

1. Execution Model
Every node is an expression: `evaluate(node, env)` returns a value for
statements too. A `seq` node evaluates its left side for effect and
returns its right side's value.

2. Values
Runtime values are None (null), int, bool, and :class:`Closure`. Integers
are signed 32-bit; arithmetic wraps and division truncates toward zero.

3. Environment
Scopes are :class:`~sluglang.environment.Environment` objects. A fresh
child scope is opened by whatever runs a block: a bare block statement,
each taken `if` branch, each `while` iteration and each call. Closures
share the scope they were created in rather than copying it.

4. Error Handling
Runtime errors such as undefined variables, writes to constants, operand
type errors, arity mismatches and division by zero are raised as typed
exceptions carrying line and file context. Nothing in the language catches
them; the first error ends the run.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sluglang.environment import Environment
from sluglang.exceptions import (
    ArityMismatchException,
    DivisionByZeroException,
    RecursionDepthException,
    TypeMismatchException,
    UndefinedVariableException,
    SlugRuntimeError,
)
from sluglang.nodes import BUILTIN_OUTN, format_node
from sluglang.operations import Op, SYMBOLS, trunc_div, trunc_mod, wrap_int

DEFAULT_MAX_DEPTH = 1000


class Closure:
    """Runtime representation of a function value."""

    def __init__(self, node, env):
        # node is the ('func', params, body, line) literal; env is shared.
        self.node = node
        self.env = env

    @property
    def params(self) -> tuple:
        return self.node[1]

    @property
    def body(self) -> tuple:
        return self.node[2]

    def __repr__(self) -> str:
        return f"<function({', '.join(self.params)})>"


def type_name(value) -> str:
    """
    Return the Slug type name of a runtime value.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return 'number'
    if isinstance(value, Closure):
        return 'function'
    raise SlugRuntimeError(f"invalid runtime value {value!r}")


def format_value(value) -> str:
    """
    Render a value the way `outn` prints it.
    """
    kind = type_name(value)
    if kind == 'boolean':
        return 'true' if value else 'false'
    if kind == 'number':
        return str(value)
    if kind == 'function':
        return '<function>'
    return 'null'


def values_equal(lhs, rhs) -> bool:
    """
    Equality as seen by `==`.

    Values of different types are never equal. Numbers and booleans compare
    by value; functions and nulls have no equal representation, not even
    themselves.
    """
    kind = type_name(lhs)
    if kind != type_name(rhs):
        return False
    if kind in ('number', 'boolean'):
        return lhs == rhs
    return False


class Interpreter:
    """Tree-walk interpreter for Slug."""

    def __init__(self, file: str = "<stdin>", max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            max_depth (int): Maximum number of nested closure calls.
        """
        self.file = file
        self.max_depth = max_depth
        self.call_depth = 0
        self.global_env = Environment()

    @property
    def vars(self) -> dict:
        """
        Snapshot of the global scope as plain name -> value pairs.
        """
        return {name: binding.value for name, binding in self.global_env.values.items()}

    def execute(self, ast):
        """
        Evaluate a whole program in the global scope.

        Parameters:
            ast (tuple | None): Root node returned by the parser.

        Returns:
            The value of the program's last statement.

        Raises:
            SlugRuntimeError: On the first runtime error.
        """
        self.call_depth = 0
        try:
            return self.evaluate(ast, self.global_env)
        except RecursionError:
            raise RecursionDepthException(file=self.file) from None

    # ------------------------------------------------------------------
    # Type checks
    # ------------------------------------------------------------------

    def _expect_number(self, value, what: str, line):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatchException(
                f"{what} expected number, got {type_name(value)}", line, self.file
            )
        return value

    def _expect_boolean(self, value, what: str, line):
        if not isinstance(value, bool):
            raise TypeMismatchException(
                f"{what} expected boolean, got {type_name(value)}", line, self.file
            )
        return value

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, node, env: Environment):
        """
        Recursively evaluate a node and return its computed value.

        Parameters:
            node (tuple | None): An AST node; None evaluates to null.
            env (Environment): The current scope.

        Returns:
            None, int, bool or Closure.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            ConstantAssignmentException: If a constant is reassigned or redeclared.
            TypeMismatchException: If an operand, condition or callee has the wrong type.
            ArityMismatchException: If a call passes the wrong number of arguments.
            DivisionByZeroException: If the divisor of `/` or `%` is zero.
        """
        if node is None:
            return None

        kind = node[0]
        line = node[-1]

        # Literals
        if kind == 'number':
            return node[1]
        elif kind == 'bool':
            return node[1]

        # Variables
        elif kind == 'ident':
            binding = env.lookup(node[1])
            if binding is None:
                raise UndefinedVariableException(node[1], line, self.file)
            return binding.value

        elif kind == 'decl':
            _, name, expr_node, constant, _ = node
            # The initializer runs before the name exists.
            value = self.evaluate(expr_node, env)
            env.declare(name, value, constant, line, self.file)
            return value

        elif kind == 'assign':
            _, name, expr_node, _ = node
            value = self.evaluate(expr_node, env)
            if not env.assign(name, value, line, self.file):
                raise UndefinedVariableException(name, line, self.file, assigning=True)
            return value

        # Sequencing and scopes
        elif kind == 'seq':
            self.evaluate(node[1], env)
            return self.evaluate(node[2], env)

        elif kind == 'block':
            return self.evaluate(node[1], env.child())

        # Control flow
        elif kind == 'if':
            _, branches, else_body, _ = node
            for cond_node, body in branches:
                cond = self.evaluate(cond_node, env)
                if self._expect_boolean(cond, "if condition", cond_node[-1]):
                    return self.run_body(body, env)
            if else_body is not None:
                return self.run_body(else_body, env)
            return None

        elif kind == 'while':
            _, cond_node, body, _ = node
            result = None
            while self._expect_boolean(
                self.evaluate(cond_node, env), "while condition", cond_node[-1]
            ):
                result = self.run_body(body, env)
            return result

        # Functions
        elif kind == 'func':
            return Closure(node, env)

        elif kind == 'func_call':
            return self.call(node, env)

        elif kind == 'builtin_call':
            _, builtin, args_nodes, _ = node
            if builtin == BUILTIN_OUTN:
                value = self.evaluate(args_nodes[0], env)
                print(format_value(value))
                return True
            raise SlugRuntimeError(f"unknown builtin '{builtin}'", line, self.file)

        # Operators
        elif kind == 'unary':
            return self.eval_unary(node, env)

        elif isinstance(kind, Op):
            return self.eval_binary(node, env)

        raise SlugRuntimeError(f"invalid AST node {format_node(node)}", line, self.file)

    def run_body(self, body, env: Environment):
        """
        Run a block body in a fresh child scope of `env`.
        """
        return self.evaluate(body[1], env.child())

    def eval_unary(self, node, env: Environment):
        """
        Evaluate `-x` or `!x`.
        """
        _, op, operand_node, line = node
        operand = self.evaluate(operand_node, env)
        match op:
            case Op.NEG:
                self._expect_number(operand, "operator '-'", line)
                return wrap_int(-operand)
            case Op.NOT:
                self._expect_boolean(operand, "operator '!'", line)
                return not operand
            case _:
                raise SlugRuntimeError(f"unknown unary operator '{op}'", line, self.file)

    def eval_binary(self, node, env: Environment):
        """
        Evaluate a binary operation. `&&` and `||` short-circuit.
        """
        op, lhs_node, rhs_node, line = node
        what = f"operator '{SYMBOLS[op]}'"
        lhs = self.evaluate(lhs_node, env)

        if op == Op.AND:
            if not self._expect_boolean(lhs, what, line):
                return False
            return self._expect_boolean(self.evaluate(rhs_node, env), what, line)
        if op == Op.OR:
            if self._expect_boolean(lhs, what, line):
                return True
            return self._expect_boolean(self.evaluate(rhs_node, env), what, line)

        rhs = self.evaluate(rhs_node, env)
        if op == Op.EQ:
            return values_equal(lhs, rhs)
        if op == Op.NE:
            return not values_equal(lhs, rhs)

        self._expect_number(lhs, what, line)
        self._expect_number(rhs, what, line)
        match op:
            # Arithmetic
            case Op.ADD:
                return wrap_int(lhs + rhs)
            case Op.SUB:
                return wrap_int(lhs - rhs)
            case Op.MUL:
                return wrap_int(lhs * rhs)
            case Op.DIV:
                if rhs == 0:
                    raise DivisionByZeroException("division by zero", line, self.file)
                return wrap_int(trunc_div(lhs, rhs))
            case Op.MOD:
                if rhs == 0:
                    raise DivisionByZeroException("modulus by zero", line, self.file)
                return wrap_int(trunc_mod(lhs, rhs))
            # Comparison
            case Op.LT:
                return lhs < rhs
            case Op.LE:
                return lhs <= rhs
            case Op.GT:
                return lhs > rhs
            case Op.GE:
                return lhs >= rhs
            case _:
                raise SlugRuntimeError(f"unknown binary operator '{op}'", line, self.file)

    def call(self, node, env: Environment):
        """
        Call a closure.

        Arguments are evaluated left to right in the caller's scope, then
        bound in a fresh child of the closure's captured scope, where the
        body runs.
        """
        _, callee_node, args_nodes, line = node
        func_value = self.evaluate(callee_node, env)
        if not isinstance(func_value, Closure):
            raise TypeMismatchException(
                f"attempted to call non-function '{format_node(callee_node)}' "
                f"({type_name(func_value)})",
                line,
                self.file,
            )
        if len(args_nodes) != len(func_value.params):
            raise ArityMismatchException(
                len(func_value.params), len(args_nodes), line, self.file
            )

        args = [self.evaluate(arg, env) for arg in args_nodes]
        call_env = func_value.env.child()
        for param, arg in zip(func_value.params, args):
            call_env.bind(param, arg)

        if self.call_depth >= self.max_depth:
            raise RecursionDepthException(self.max_depth, line, self.file)
        self.call_depth += 1
        try:
            body = func_value.body
            if body[0] == 'block':
                return self.evaluate(body[1], call_env)
            return self.evaluate(body, call_env)
        finally:
            self.call_depth -= 1
