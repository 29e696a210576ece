"""Lexer for Slug.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and source line number.

Identifiers are matched first and then checked against the reserved keyword
table, so ``letter`` stays an identifier while ``let`` becomes ``LET``.
Two-character operators are listed ahead of their one-character prefixes so
``>=`` never lexes as ``>`` followed by ``=``. Whitespace and ``//`` comments
are skipped; line numbers are tracked for diagnostics only. Any other
character aborts tokenization with :class:`LexerException`.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from sluglang.exceptions import LexerException
from sluglang.operations import wrap_int


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The integer of a NUMBER, the source text of an
                ID or BOOLEAN, otherwise None.
            line (int): Source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value}, line={self.line})"


KEYWORDS: dict[str, str] = {
    'let':   'LET',
    'var':   'LET',
    'const': 'CONST',
    'if':    'IF',
    'elif':  'ELIF',
    'else':  'ELSE',
    'while': 'WHILE',
    'func':  'FUNC',
    'true':  'BOOLEAN',
    'false': 'BOOLEAN',
    'outn':  'OUTN',
}

token_specification: list[tuple[str, str]] = [
    # Literals and names
    ('NUMBER',    r'[0-9]+'),
    ('ID',        r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comments
    ('COMMENT',   r'//[^\n]*'),

    # Two-character operators
    ('GE',        r'>='),
    ('LE',        r'<='),
    ('EQ',        r'=='),
    ('NE',        r'!='),
    ('ARROW',     r'=>'),
    ('ANDAND',    r'&&'),
    ('OROR',      r'\|\|'),

    # Delimiters
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('SEMI',      r';'),
    ('COMMA',     r','),

    # Single-character operators
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),
    ('MOD',       r'%'),
    ('NOT',       r'!'),
    ('ASSIGN',    r'='),
    ('LT',        r'<'),
    ('GT',        r'>'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[ \t\r\f\v]+'),
    ('MISMATCH',  r'.'),
]

# Source text for fixed tokens, used by the parser's error messages.
TOKEN_LITERALS: dict[str, str] = {
    name: re.sub(r'\\', '', pattern)
    for name, pattern in token_specification
    if name not in ('NUMBER', 'ID', 'COMMENT', 'NEWLINE', 'SKIP', 'MISMATCH')
}
TOKEN_LITERALS.update({kind: word for word, kind in KEYWORDS.items() if kind != 'BOOLEAN'})
TOKEN_LITERALS['LET'] = 'let'
TOKEN_LITERALS['EOF'] = 'end of input'

_TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def _number_value(digits: str) -> int:
    """
    Accumulate a digit run as ``value * 10 + digit``, wrapping at every step.
    """
    value = 0
    for digit in digits:
        value = wrap_int(value * 10 + ord(digit) - ord('0'))
    return value


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Optional script name used in error messages.

    Returns:
        list[Token]: Token instances terminated by exactly one EOF token.

    Raises:
        LexerException: If an unexpected character is encountered.
    """
    tokens = []
    line_num = 1

    for match_obj in _TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            raise LexerException(value, line_num, file)

        if kind == 'NUMBER':
            tokens.append(Token('NUMBER', _number_value(value), line_num))
        elif kind == 'ID':
            keyword = KEYWORDS.get(value)
            if keyword is None:
                tokens.append(Token('ID', value, line_num))
            elif keyword == 'BOOLEAN':
                tokens.append(Token('BOOLEAN', value, line_num))
            else:
                tokens.append(Token(keyword, None, line_num))
        else:
            tokens.append(Token(kind, None, line_num))

    tokens.append(Token('EOF', None, line_num))
    return tokens
