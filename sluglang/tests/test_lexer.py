"""
Tests for the Slug lexer.
"""
import pytest

from sluglang.exceptions import LexerException
from sluglang.lexer import tokenize


def types_of(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_declaration_tokens():
    tokens = tokenize("let x = 42;")
    assert [t.type for t in tokens] == ['LET', 'ID', 'ASSIGN', 'NUMBER', 'SEMI', 'EOF']
    assert tokens[1].value == 'x'
    assert tokens[3].value == 42


def test_stream_ends_with_single_eof():
    assert types_of("") == ['EOF']
    assert types_of("   \n\t ") == ['EOF']
    assert types_of("outn(1);").count('EOF') == 1


def test_keywords_and_var_alias():
    assert types_of("let var const if elif else while func outn") == [
        'LET', 'LET', 'CONST', 'IF', 'ELIF', 'ELSE', 'WHILE', 'FUNC', 'OUTN', 'EOF'
    ]


def test_keyword_prefix_is_identifier():
    tokens = tokenize("letter iffy _while x1")
    assert [t.type for t in tokens[:-1]] == ['ID', 'ID', 'ID', 'ID']
    assert [t.value for t in tokens[:-1]] == ['letter', 'iffy', '_while', 'x1']


def test_booleans_keep_source_text():
    tokens = tokenize("true false")
    assert [(t.type, t.value) for t in tokens[:-1]] == [
        ('BOOLEAN', 'true'), ('BOOLEAN', 'false')
    ]


def test_two_character_operators_are_greedy():
    assert types_of(">= <= == != => && || > < = !") == [
        'GE', 'LE', 'EQ', 'NE', 'ARROW', 'ANDAND', 'OROR', 'GT', 'LT', 'ASSIGN', 'NOT', 'EOF'
    ]
    assert types_of("a>=b") == ['ID', 'GE', 'ID', 'EOF']


def test_punctuation():
    assert types_of("(){};,+-*/%") == [
        'LPAREN', 'RPAREN', 'LBRACE', 'RBRACE', 'SEMI', 'COMMA',
        'PLUS', 'MINUS', 'MUL', 'DIV', 'MOD', 'EOF'
    ]


def test_minus_is_not_part_of_literal():
    tokens = tokenize("-5")
    assert [t.type for t in tokens] == ['MINUS', 'NUMBER', 'EOF']
    assert tokens[1].value == 5


def test_comments_are_skipped_and_lines_counted():
    tokens = tokenize("let a = 1; // a / comment\n// another\nouten")
    assert [t.type for t in tokens] == ['LET', 'ID', 'ASSIGN', 'NUMBER', 'SEMI', 'ID', 'EOF']
    assert tokens[0].line == 1
    assert tokens[5].line == 3


def test_integer_literals_wrap_to_32_bits():
    assert tokenize("4294967297")[0].value == 1
    assert tokenize("2147483648")[0].value == -2147483648


def test_very_long_literals_wrap():
    # Modulo 2**32, 10**5000 - 1 is -1 and 10**4999 is 0.
    assert tokenize("9" * 5000)[0].value == -1
    assert tokenize("1" + "0" * 4999)[0].value == 0


def test_unexpected_character_raises():
    with pytest.raises(LexerException) as exc:
        tokenize("let x = 1;\nlet y = #;", "prog.slg")
    assert exc.value.char == '#'
    assert exc.value.line == 2
    assert exc.value.diagnostic() == "parse error: unexpected character '#' on line 2 in prog.slg"


@pytest.mark.parametrize("source", ["a & b", "a | b", "\"str\""])
def test_lone_characters_are_fatal(source):
    with pytest.raises(LexerException):
        tokenize(source)
