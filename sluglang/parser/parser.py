"""
Main parser entry point for Slug.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`sluglang.parser.expressions` and `sluglang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sluglang.exceptions import ParseException
from sluglang.lexer import Token, TOKEN_LITERALS

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Slug parser."""

    def __init__(self, tokens: list[Token], file: str = "<stdin>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def peek(self, offset: int = 1) -> Token:
        """
        Return the token `offset` positions ahead without consuming anything.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def error(self, message: str, tok: Token | None = None) -> ParseException:
        """
        Build a ParseException located at `tok` (default: the current token).
        """
        tok = tok or self.curr_token
        return ParseException(
            message,
            tok.line,
            self.source_file,
            at_eof=tok.type == 'EOF',
        )

    def describe(self, tok: Token) -> str:
        """
        Describe a token for error messages.
        """
        if tok.value is not None:
            return f"'{tok.value}' ({tok.type})"
        return f"'{TOKEN_LITERALS.get(tok.type, tok.type)}' ({tok.type})"

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseException: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            expected = TOKEN_LITERALS.get(token_type, token_type)
            raise self.error(
                f"expected '{expected}' but got {self.describe(tok)}"
            )
        if self.position < len(self.tokens) - 1:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok


    # Expression wrappers
    def expr(self) -> tuple:
        """
        Parse a full expression starting at the lowest precedence.
        """
        return _expr.parse_expr(self)

    def binop_rhs(self, min_prec: int, lhs: tuple) -> tuple:
        """
        Fold binary operators of at least `min_prec` onto `lhs`.
        """
        return _expr.parse_binop_rhs(self, min_prec, lhs)

    def unary(self) -> tuple:
        """
        Parse a prefix `!` or `-` expression.
        """
        return _expr.parse_unary(self)

    def primary(self) -> tuple:
        """
        Parse a literal, variable, call, group or function literal.
        """
        return _expr.parse_primary(self)

    def function_literal(self) -> tuple:
        """
        Parse a `func (...) => body` literal.
        """
        return _expr.parse_function_literal(self)

    def call_args(self) -> list:
        """
        Parse a parenthesized argument list.
        """
        return _expr.parse_call_args(self)


    # Statement wrappers
    def block(self) -> tuple:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_declaration(self) -> tuple:
        """
        Parse a `let`/`const` declaration.
        """
        return _stmt.parse_declaration(self)

    def parse_func_decl(self) -> tuple:
        """
        Parse a named function declaration.
        """
        return _stmt.parse_func_decl(self)

    def parse_reassignment(self) -> tuple:
        """
        Parse reassignment of an existing variable.
        """
        return _stmt.parse_reassignment(self)

    def parse_if(self) -> tuple:
        """
        Parse an if/elif/else chain.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> tuple:
        """
        Parse a `while` loop.
        """
        return _stmt.parse_while(self)


    def parse(self) -> tuple | None:
        """
        Parse the full input into a single AST.

        A program opening with `{` is parsed as a block; anything after
        that block continues as ordinary top-level statements. An empty
        program yields None.
        """
        return _stmt.parse_program(self)
