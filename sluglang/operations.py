"""Shared definitions for AST operation identifiers.

This module centralizes the operator names used by the parser and
interpreter to label nodes in the abstract syntax tree, together with the
precedence table the parser climbs and the fixed-width integer helpers the
lexer and interpreter share.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"

    # Boolean
    AND = "and"
    OR = "or"

    # Unary
    NEG = "neg"
    NOT = "not"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Token type -> (operator, precedence). Higher binds tighter.
BINARY_OPERATORS: dict[str, tuple[Op, int]] = {
    'OROR':  (Op.OR, 1),
    'ANDAND': (Op.AND, 2),
    'EQ':    (Op.EQ, 3),
    'NE':    (Op.NE, 3),
    'LT':    (Op.LT, 4),
    'LE':    (Op.LE, 4),
    'GT':    (Op.GT, 4),
    'GE':    (Op.GE, 4),
    'PLUS':  (Op.ADD, 5),
    'MINUS': (Op.SUB, 5),
    'MUL':   (Op.MUL, 6),
    'DIV':   (Op.DIV, 6),
    'MOD':   (Op.MOD, 6),
}

# Source spelling of each operator, used in diagnostics.
SYMBOLS: dict[Op, str] = {
    Op.ADD: '+',
    Op.SUB: '-',
    Op.MUL: '*',
    Op.DIV: '/',
    Op.MOD: '%',
    Op.EQ: '==',
    Op.NE: '!=',
    Op.GT: '>',
    Op.LT: '<',
    Op.GE: '>=',
    Op.LE: '<=',
    Op.AND: '&&',
    Op.OR: '||',
    Op.NEG: '-',
    Op.NOT: '!',
}

INT_BITS = 32
_INT_MASK = (1 << INT_BITS) - 1
_INT_SIGN = 1 << (INT_BITS - 1)


def wrap_int(value: int) -> int:
    """
    Reduce an integer to the signed 32-bit two's complement range.
    """
    value &= _INT_MASK
    return value - (1 << INT_BITS) if value & _INT_SIGN else value


def trunc_div(lhs: int, rhs: int) -> int:
    """
    Integer division truncating toward zero.
    """
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def trunc_mod(lhs: int, rhs: int) -> int:
    """
    Remainder of :func:`trunc_div`; takes the sign of the dividend.
    """
    return lhs - rhs * trunc_div(lhs, rhs)


__all__ = ["Op", "BINARY_OPERATORS", "SYMBOLS", "INT_BITS", "wrap_int", "trunc_div", "trunc_mod"]
