"""Errors.

Every failure in Slug is fatal to the run, so each error is an exception
that propagates untouched to the driver. The driver prints
``<prefix>: <message>`` on a single line and exits non-zero.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _locate(message, line=None, file=None):
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class SlugError(Exception):
    """
    Base class for all Slug errors.
    """
    prefix = "error"

    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        super().__init__(_locate(message, line, file))

    def diagnostic(self) -> str:
        """
        Return the single diagnostic line printed by the driver.
        """
        return f"{self.prefix}: {self}"


class LexerException(SlugError):
    """
    Error for characters outside the language's alphabet.
    """
    prefix = "parse error"

    def __init__(self, char, line=None, file=None):
        self.char = char
        super().__init__(f"unexpected character '{char}'", line, file)


class ParseException(SlugError):
    """
    Error for token streams that do not match the grammar.
    """
    prefix = "parse error"

    def __init__(self, message, line=None, file=None, at_eof=False):
        self.at_eof = at_eof
        super().__init__(message, line, file)


class SlugRuntimeError(SlugError):
    """
    Base class for errors raised while evaluating a program.
    """
    prefix = "runtime error"


class UndefinedVariableException(SlugRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None, assigning=False):
        self.varname = varname
        if assigning:
            message = f"assign to undefined variable {varname}"
        else:
            message = f"undefined variable {varname}"
        super().__init__(message, line, file)


class ConstantAssignmentException(SlugRuntimeError):
    """
    Error for writes to a constant binding.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"cannot assign to constant {varname}", line, file)


class TypeMismatchException(SlugRuntimeError):
    """
    Error for operands, conditions or callees of the wrong type.
    """


class ArityMismatchException(SlugRuntimeError):
    """
    Error for calls with the wrong number of arguments.
    """
    def __init__(self, expected, got, line=None, file=None):
        self.expected = expected
        self.got = got
        super().__init__(
            f"arity mismatch: function expects {expected} arguments, got {got}",
            line,
            file,
        )


class DivisionByZeroException(SlugRuntimeError):
    """
    Error for division or modulus by zero.
    """


class RecursionDepthException(SlugRuntimeError):
    """
    Error for call chains deeper than the configured limit.
    """
    def __init__(self, limit=None, line=None, file=None):
        self.limit = limit
        message = "maximum recursion depth exceeded"
        if limit is not None:
            message += f" ({limit})"
        super().__init__(message, line, file)
