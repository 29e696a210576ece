"""Slug: a small imperative scripting language.

The pipeline is lexer -> parser -> tree-walk interpreter:

    from sluglang.lexer import tokenize
    from sluglang.parser import Parser
    from sluglang.interpreter import Interpreter

    ast = Parser(tokenize(source)).parse()
    Interpreter().execute(ast)


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
