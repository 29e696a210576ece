"""
Expression parsing utilities for Slug.

These functions operate on a `sluglang.parser.parser.Parser` instance.
Binary operators are folded by precedence climbing: parse a unary term,
then keep consuming operators whose precedence is at least the current
minimum, recursing at `precedence + 1` whenever the following operator
binds tighter. Equal precedence associates to the left.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from sluglang import nodes
from sluglang.operations import BINARY_OPERATORS, Op

if TYPE_CHECKING:
    from sluglang.parser import Parser


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    lhs = parser.unary()
    return parser.binop_rhs(1, lhs)


def parse_binop_rhs(parser: 'Parser', min_prec: int, lhs: tuple) -> tuple:
    """
    Fold binary operators onto `lhs` while their precedence is >= `min_prec`.

    Args:
        parser: The parser instance.
        min_prec: The weakest precedence this call may consume.
        lhs: The already-parsed left operand.

    Returns:
        tuple: (Op, left, right, line) or `lhs` unchanged.
    """
    while True:
        entry = BINARY_OPERATORS.get(parser.curr_token.type)
        if entry is None or entry[1] < min_prec:
            return lhs
        op, prec = entry
        op_tok = parser.eat(parser.curr_token.type)

        rhs = parser.unary()
        next_entry = BINARY_OPERATORS.get(parser.curr_token.type)
        if next_entry is not None and prec < next_entry[1]:
            rhs = parser.binop_rhs(prec + 1, rhs)
        lhs = nodes.binary(op, lhs, rhs, op_tok.line)


# ---- Highest precedence ----

def parse_unary(parser: 'Parser') -> tuple:
    """Parse a prefix `!` or `-`; both bind tighter than any binary operator."""
    tok = parser.curr_token
    if tok.type == 'NOT':
        parser.eat('NOT')
        return nodes.unary(Op.NOT, parser.unary(), tok.line)
    if tok.type == 'MINUS':
        parser.eat('MINUS')
        return nodes.unary(Op.NEG, parser.unary(), tok.line)
    return parser.primary()


def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, call, parenthesized group or function literal."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return nodes.number(tok.value, tok.line)

    if tok.type == 'BOOLEAN':
        parser.eat('BOOLEAN')
        return nodes.boolean(tok.value == 'true', tok.line)

    if tok.type == 'ID':
        parser.eat('ID')
        callee = nodes.ident(tok.value, tok.line)
        if parser.curr_token.type == 'LPAREN':
            return nodes.func_call(callee, parser.call_args(), tok.line)
        return callee

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    if tok.type == 'FUNC':
        return parser.function_literal()

    if tok.type == 'OUTN':
        parser.eat('OUTN')
        parser.eat('LPAREN')
        arg = parser.expr()
        parser.eat('RPAREN')
        return nodes.builtin_call(nodes.BUILTIN_OUTN, [arg], tok.line)

    if tok.type == 'IF':
        return parser.parse_if()

    if tok.type == 'WHILE':
        return parser.parse_while()

    raise parser.error(f"unexpected token {parser.describe(tok)} in expression")


def parse_call_args(parser: 'Parser') -> list:
    """
    Parse call arguments.

    Syntax:
        ( [<expression> {, <expression>}] )
    """
    parser.eat('LPAREN')
    args = []
    if parser.curr_token.type != 'RPAREN':
        args.append(parser.expr())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            args.append(parser.expr())
    parser.eat('RPAREN')
    return args


def parse_function_tail(parser: 'Parser', line: int) -> tuple:
    """
    Parse a parameter list, the arrow and the body of a function literal.

    Syntax:
        ( [<identifier> {, <identifier>}] ) => ( <block> | <expression> )

    Args:
        parser: The parser instance, positioned at `(`.
        line: Line of the `func` keyword.

    Returns:
        tuple: ('func', params, body, line)
    """
    parser.eat('LPAREN')
    params = []
    if parser.curr_token.type != 'RPAREN':
        while True:
            param_tok = parser.curr_token
            if param_tok.type != 'ID':
                raise parser.error(
                    f"expected identifier as parameter but got {parser.describe(param_tok)}"
                )
            parser.eat('ID')
            params.append(param_tok.value)
            if parser.curr_token.type != 'COMMA':
                break
            parser.eat('COMMA')
    parser.eat('RPAREN')
    parser.eat('ARROW')

    if parser.curr_token.type == 'LBRACE':
        body = parser.block()
    else:
        body = parser.expr()
    return nodes.func(params, body, line)


def parse_function_literal(parser: 'Parser') -> tuple:
    """Parse an anonymous `func (<params>) => <body>` literal."""
    tok = parser.eat('FUNC')
    return parse_function_tail(parser, tok.line)
