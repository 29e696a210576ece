"""
Slug Language Interpreter

This is the main entry point for the Slug language interpreter.

Workflow:
1. The source script is read from the file named on the command line, or
   from standard input when no file is given.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

The first error of any stage ends the run: a single `<kind>: <message>`
line is written to stderr and the process exits with status 1.

Environment variables:
    SLUGDEBUG       Print the tokens and AST to stderr before running.
    SLUG_MAX_DEPTH  Maximum nested function-call depth (default 1000).


File: slug.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os
import sys

from sluglang.exceptions import ParseException, SlugError
from sluglang.interpreter import DEFAULT_MAX_DEPTH, Interpreter
from sluglang.lexer import tokenize
from sluglang.nodes import format_node
from sluglang.parser import Parser

# Host frames used per nested Slug call, with headroom.
FRAMES_PER_CALL = 16


def print_usage():
    """
    Print usage.
    """
    print()
    print("Slug Language Interpreter")
    print()
    print("Usage:")
    print("    slug [script.slg]")
    print()
    print("Arguments:")
    print("    <script.slg>")
    print("        Path to a Slug source file to execute. Without it the program")
    print("        is read from standard input, or an interactive session (REPL)")
    print("        starts when standard input is a terminal.")
    print()
    print("Example:")
    print("    slug hello.slg")
    print("    echo 'outn(1 + 2);' | slug")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def max_depth_from_env() -> int:
    """
    Read SLUG_MAX_DEPTH, falling back to the default on absent or bad values.
    """
    raw = os.environ.get('SLUG_MAX_DEPTH')
    if not raw:
        return DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        print(f"warning: ignoring invalid SLUG_MAX_DEPTH '{raw}'", file=sys.stderr)
        return DEFAULT_MAX_DEPTH
    return depth if depth > 0 else DEFAULT_MAX_DEPTH


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    for tok in tokens:
        print(f"  {tok!r}", file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(f"  {ast!r}", file=sys.stderr)
    print(f"\n  {format_node(ast)}\n", file=sys.stderr)


def decode_source(data: bytes) -> str:
    """
    Map every input byte to one character so the lexer sees each byte.
    """
    return data.decode("latin-1")


def run_source(code: str, file: str, interpreter: Interpreter | None = None):
    """
    Tokenize, parse and evaluate `code`.

    Returns:
        The value of the program's last statement.

    Raises:
        SlugError: On the first lexical, syntax or runtime error.
    """
    if interpreter is None:
        interpreter = Interpreter(file, max_depth_from_env())

    tokens = tokenize(code, file)
    parser = Parser(tokens, file)
    try:
        ast = parser.parse()
    except RecursionError:
        raise ParseException(
            "maximum nesting depth exceeded", parser.curr_token.line, file
        ) from None

    if os.environ.get('SLUGDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    return interpreter.execute(ast)


def run_script(script_name: str) -> int:
    """
    Run a Slug script and return the process exit code.
    """
    try:
        with open(script_name, "rb") as f:
            code = decode_source(f.read())
    except OSError as e:
        print(f"error: cannot open file {script_name}: {e}", file=sys.stderr)
        return 1
    return run_program(code, script_name)


def run_program(code: str, file: str) -> int:
    """
    Run program text, reporting the first error on stderr.
    """
    try:
        run_source(code, file)
    except SlugError as e:
        sys.stdout.flush()
        print(e.diagnostic(), file=sys.stderr)
        return 1
    except RecursionError:
        sys.stdout.flush()
        print("runtime error: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("Slug Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>", max_depth_from_env())
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                run_source(source, "<stdin>", interpreter)
                buffer.clear()
            except SlugError as e:
                # Input that ran out mid-construct is continued on the next line.
                if getattr(e, 'at_eof', False):
                    continue
                print(e.diagnostic())
                buffer.clear()
            except RecursionError:
                print("runtime error: maximum recursion depth exceeded")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: read the program from stdin, or enter the REPL on a terminal.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    sys.setrecursionlimit(
        max(sys.getrecursionlimit(), max_depth_from_env() * FRAMES_PER_CALL)
    )
    args = argv[1:]
    if not args:
        if sys.stdin.isatty():
            run_repl()
            return 0
        return run_program(decode_source(sys.stdin.buffer.read()), "<stdin>")
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def entry():
    """
    Console-script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    entry()
