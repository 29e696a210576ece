"""
Utility functions shared across Slug Language tests.
"""
from pathlib import Path
import sys

from sluglang.lexer import tokenize
from sluglang.parser import Parser
from sluglang.interpreter import Interpreter

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens = tokenize(source, "<test>")
    parser = Parser(tokens, "<test>")
    return parser.parse()


def run_source(source: str, **kwargs) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    ast = parse_source(source)
    interpreter = Interpreter("<test>", **kwargs)
    interpreter.execute(ast)
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Return captured stdout split into lines.
    """
    return capsys.readouterr().out.strip().splitlines()
