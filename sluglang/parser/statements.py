"""Statement parsing utilities for Slug.

These functions operate on a `sluglang.parser.parser.Parser` instance and
handle the statement forms in the language such as blocks, declarations,
conditionals and loops. Statement lists are folded into right-leaning
`seq` chains.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from sluglang import nodes
from sluglang.parser.expressions import parse_function_tail

if TYPE_CHECKING:
    from sluglang.parser import Parser


def parse_program(parser: 'Parser') -> tuple | None:
    """
    Parse a whole program.

    Syntax:
        <block> | <statement>*

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: The root node, or None for an empty program.
    """
    statements = []
    if parser.curr_token.type == 'LBRACE':
        root = parser.block()
        if parser.curr_token.type == 'EOF':
            return root
        statements.append(root)
    while parser.curr_token.type != 'EOF':
        statements.append(parser.statement())
    return nodes.chain(statements)


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', seq_chain_or_None, line_number)
    """
    tok = parser.eat('LBRACE')
    statements = []
    while parser.curr_token.type != 'RBRACE':
        if parser.curr_token.type == 'EOF':
            raise parser.error("expected '}' before end of input")
        statements.append(parser.statement())
    parser.eat('RBRACE')
    return nodes.block(nodes.chain(statements), tok.line)


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Syntax:
        <declaration> | <reassignment> | <func_decl> | <if> | <while>
        | <block> | <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type in ('LET', 'CONST'):
        return parser.parse_declaration()
    if tok.type == 'ID' and parser.peek().type == 'ASSIGN':
        return parser.parse_reassignment()
    if tok.type == 'FUNC' and parser.peek().type == 'ID':
        return parser.parse_func_decl()
    if tok.type == 'IF':
        return parser.parse_if()
    if tok.type == 'WHILE':
        return parser.parse_while()
    if tok.type == 'LBRACE':
        return parser.block()

    expr_node = parser.expr()
    _end_statement(parser)
    return expr_node


def _end_statement(parser: 'Parser'):
    # The last statement of a block may leave out its semicolon.
    if parser.curr_token.type != 'RBRACE':
        parser.eat('SEMI')


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `let` (or `var`) / `const` declaration.

    Syntax:
        (let | const) <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('decl', name, expr, constant, line)
    """
    keyword = parser.curr_token
    parser.eat(keyword.type)
    id_tok = parser.curr_token
    if id_tok.type != 'ID':
        raise parser.error(
            f"expected identifier after let or const but got {parser.describe(id_tok)}"
        )
    parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    _end_statement(parser)
    return nodes.decl(id_tok.value, expr_node, keyword.type == 'CONST', keyword.line)


def parse_func_decl(parser: 'Parser') -> tuple:
    """
    Parse a named function declaration, sugar for `let <name> = func ...;`.

    Syntax:
        func <identifier> ( <params> ) => <body> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('decl', name, ('func', ...), False, line)
    """
    start_tok = parser.eat('FUNC')
    name_tok = parser.eat('ID')
    func_node = parse_function_tail(parser, start_tok.line)
    _end_statement(parser)
    return nodes.decl(name_tok.value, func_node, False, start_tok.line)


def parse_reassignment(parser: 'Parser') -> tuple:
    """
    Parse reassignment of an existing variable.

    Syntax:
        <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('assign', name, expr, line)
    """
    id_tok = parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    _end_statement(parser)
    return nodes.assign(id_tok.value, expr_node, id_tok.line)


def _parse_condition(parser: 'Parser') -> tuple:
    parser.eat('LPAREN')
    cond = parser.expr()
    parser.eat('RPAREN')
    return cond


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional 'if' statement with optional elif and else blocks.

    Syntax:
        if (<condition>) { <block> }
        elif (<condition>) { <block> }
        else { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', ((cond, body), ...), else_body_or_None, line)
    """
    tok = parser.eat('IF')
    branches = [(_parse_condition(parser), parser.block())]

    while parser.curr_token.type == 'ELIF':
        parser.eat('ELIF')
        branches.append((_parse_condition(parser), parser.block()))

    else_block = None
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        else_block = parser.block()

    return nodes.if_chain(branches, else_block, tok.line)


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a 'while' loop.

    Syntax:
        while (<condition>) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('while', cond, body, line)
    """
    tok = parser.eat('WHILE')
    condition = _parse_condition(parser)
    body = parser.block()
    return nodes.while_loop(condition, body, tok.line)
