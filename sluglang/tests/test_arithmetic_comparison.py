"""
Tests for arithmetic, comparison and equality in Slug.
"""
import pytest

from sluglang.exceptions import DivisionByZeroException, TypeMismatchException
from sluglang.interpreter import Interpreter
from sluglang.tests.utils import output_lines, parse_source, run_source


@pytest.mark.parametrize("n", [0, 7, 42, 123456, 2147483647])
def test_integer_literal_evaluates_to_itself(n):
    assert Interpreter("<test>").execute(parse_source(f"{n};")) == n


def test_operator_precedence_at_runtime(capsys):
    run_source("outn(2 + 3 * 4 - 6 / 2); outn((2 + 3) * 4); outn(10 - 4 - 3);")
    assert output_lines(capsys) == ['11', '20', '3']


def test_division_and_modulus_truncate_toward_zero(capsys):
    run_source(
        "outn(7 / 2); outn(7 % 2); outn(-7 / 2); outn(-7 % 2);"
        "outn(7 / -2); outn(7 % -2); outn(-7 / -2);"
    )
    assert output_lines(capsys) == ['3', '1', '-3', '-1', '-3', '1', '3']


def test_division_by_zero(capsys):
    with pytest.raises(DivisionByZeroException) as exc:
        run_source("outn(1 / 0);")
    assert str(exc.value).startswith("division by zero")
    assert capsys.readouterr().out == ''


def test_modulus_by_zero():
    with pytest.raises(DivisionByZeroException) as exc:
        run_source("let z = 0; outn(5 % z);")
    assert str(exc.value).startswith("modulus by zero")


def test_arithmetic_wraps_at_32_bits(capsys):
    run_source("outn(2147483647 + 1); outn(-2147483647 - 2); outn(65536 * 65536);")
    assert output_lines(capsys) == ['-2147483648', '2147483647', '0']


def test_unary_minus(capsys):
    run_source("let a = 2; outn(-a); outn(- -a); outn(-(a * 3));")
    assert output_lines(capsys) == ['-2', '2', '-6']


def test_comparisons(capsys):
    run_source("outn(1 < 2); outn(2 <= 2); outn(3 > 4); outn(4 >= 5);")
    assert output_lines(capsys) == ['true', 'true', 'false', 'false']


def test_equality_on_numbers_and_booleans(capsys):
    run_source(
        "outn(1 == 1); outn(1 != 1); outn(true == true); outn(true != false);"
        "outn(1 == true); outn(1 != true);"
    )
    assert output_lines(capsys) == ['true', 'false', 'true', 'true', 'false', 'true']


def test_functions_never_compare_equal(capsys):
    run_source("let f = func() => 1; outn(f == f); outn(f != f); outn(f == 1);")
    assert output_lines(capsys) == ['false', 'true', 'false']


def test_null_never_compares_equal(capsys):
    run_source("let n = if (false) { 1 }; outn(n == n); outn(n != 0);")
    assert output_lines(capsys) == ['false', 'true']


@pytest.mark.parametrize("source, operator", [
    ("outn(1 + true);", "'+'"),
    ("outn(false * 2);", "'*'"),
    ("outn(1 < false);", "'<'"),
    ("outn(-true);", "'-'"),
    ("outn(!1);", "'!'"),
    ("let f = func() => 1; outn(f - 1);", "'-'"),
])
def test_operand_type_errors(source, operator):
    with pytest.raises(TypeMismatchException) as exc:
        run_source(source)
    assert f"operator {operator} expected" in str(exc.value)
