"""AST node definitions for Slug.

Nodes are plain tuples: the first element is the node kind (a string, or an
:class:`~sluglang.operations.Op` for binary operations) and the last element
is the source line. Child lists are stored as tuples so a finished tree is
never mutated; closures keep references to ``func`` nodes for as long as
they live.

    ('number', value, line)
    ('bool', value, line)
    ('ident', name, line)
    ('decl', name, expr, constant, line)
    ('assign', name, expr, line)
    (Op.<binary>, left, right, line)
    ('unary', Op.NEG | Op.NOT, operand, line)
    ('seq', left, right, line)
    ('block', inner | None, line)
    ('if', ((cond, body), ...), else_body | None, line)
    ('while', cond, body, line)
    ('func', (param, ...), body, line)
    ('func_call', callee, (arg, ...), line)
    ('builtin_call', builtin, (arg, ...), line)


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sluglang.operations import Op, SYMBOLS

BUILTIN_OUTN = 'outn'


def number(value: int, line: int) -> tuple:
    return ('number', value, line)


def boolean(value: bool, line: int) -> tuple:
    return ('bool', value, line)


def ident(name: str, line: int) -> tuple:
    return ('ident', name, line)


def decl(name: str, expr: tuple, constant: bool, line: int) -> tuple:
    return ('decl', name, expr, constant, line)


def assign(name: str, expr: tuple, line: int) -> tuple:
    return ('assign', name, expr, line)


def binary(op: Op, left: tuple, right: tuple, line: int) -> tuple:
    return (op, left, right, line)


def unary(op: Op, operand: tuple, line: int) -> tuple:
    return ('unary', op, operand, line)


def seq(left: tuple, right: tuple, line: int) -> tuple:
    return ('seq', left, right, line)


def block(inner: tuple | None, line: int) -> tuple:
    return ('block', inner, line)


def if_chain(branches, else_body: tuple | None, line: int) -> tuple:
    return ('if', tuple(branches), else_body, line)


def while_loop(cond: tuple, body: tuple, line: int) -> tuple:
    return ('while', cond, body, line)


def func(params, body: tuple, line: int) -> tuple:
    return ('func', tuple(params), body, line)


def func_call(callee: tuple, args, line: int) -> tuple:
    return ('func_call', callee, tuple(args), line)


def builtin_call(builtin: str, args, line: int) -> tuple:
    return ('builtin_call', builtin, tuple(args), line)


def chain(statements: list) -> tuple | None:
    """
    Fold statements into a right-leaning chain of ``seq`` nodes.

    Returns None for an empty list and the statement itself for a single one.
    """
    if not statements:
        return None
    node = statements[-1]
    for stmt in reversed(statements[:-1]):
        node = seq(stmt, node, stmt[-1])
    return node


def format_node(node) -> str:
    """
    Convert an AST back to readable source-like text for debugging.

    Args:
        node (tuple | None): Any AST node.

    Returns:
        str: A compact rendering of the node.
    """
    if node is None:
        return '{}'
    kind = node[0]
    match kind:
        case 'number':
            return str(node[1])
        case 'bool':
            return 'true' if node[1] else 'false'
        case 'ident':
            return node[1]
        case 'decl':
            keyword = 'const' if node[3] else 'let'
            return f"{keyword} {node[1]} = {format_node(node[2])};"
        case 'assign':
            return f"{node[1]} = {format_node(node[2])};"
        case 'unary':
            return f"{SYMBOLS[node[1]]}{format_node(node[2])}"
        case 'seq':
            return f"{format_node(node[1])} {format_node(node[2])}"
        case 'block':
            if node[1] is None:
                return '{ }'
            return f"{{ {format_node(node[1])} }}"
        case 'if':
            parts = []
            for i, (cond, body) in enumerate(node[1]):
                keyword = 'if' if i == 0 else 'elif'
                parts.append(f"{keyword} ({format_node(cond)}) {format_node(body)}")
            if node[2] is not None:
                parts.append(f"else {format_node(node[2])}")
            return ' '.join(parts)
        case 'while':
            return f"while ({format_node(node[1])}) {format_node(node[2])}"
        case 'func':
            return f"func({', '.join(node[1])}) => {format_node(node[2])}"
        case 'func_call':
            args = ', '.join(format_node(arg) for arg in node[2])
            return f"{format_node(node[1])}({args})"
        case 'builtin_call':
            args = ', '.join(format_node(arg) for arg in node[2])
            return f"{node[1]}({args})"
        case Op():
            return f"({format_node(node[1])} {SYMBOLS[kind]} {format_node(node[2])})"
        case _:
            return f"<node {kind}>"
