"""Tests for the restricted expression evaluator."""

import math

import pytest

from errors import ExpressionSyntaxError
from expression import (
    BinOp,
    Call,
    Number,
    TokenKind,
    UnaryOp,
    Variable,
    compile_function,
    evaluate,
    parse,
    tokenize,
)


# --- Tokenizer ---

def test_tokenize_kinds():
    kinds = [t.kind for t in tokenize("2.5*sin(x)^2")]
    assert kinds == [
        TokenKind.NUMBER, TokenKind.STAR, TokenKind.IDENT, TokenKind.LPAREN,
        TokenKind.IDENT, TokenKind.RPAREN, TokenKind.CARET, TokenKind.NUMBER,
        TokenKind.EOF,
    ]


def test_tokenize_rejects_foreign_characters():
    with pytest.raises(ExpressionSyntaxError) as info:
        tokenize("x % 2")
    assert info.value.details["position"] == 2


# --- Parser ---

def test_parse_builds_ast():
    assert parse("-x^2") == UnaryOp("-", BinOp("^", Variable("x"), Number(2.0)))
    assert parse("sqrt(4)") == Call("sqrt", Number(4.0))


def test_parse_constants_fold_to_numbers():
    assert parse("pi") == Number(math.pi)
    assert parse("e") == Number(math.e)


def test_parse_unknown_identifier():
    with pytest.raises(ExpressionSyntaxError, match="Unknown identifier 'foo'"):
        parse("foo(x)")


def test_parse_reports_end_of_input_position():
    with pytest.raises(ExpressionSyntaxError) as info:
        parse("1 + ")
    assert info.value.details["position"] == 4


def test_parse_unbalanced_parentheses():
    with pytest.raises(ExpressionSyntaxError):
        parse("(x + 1")
    with pytest.raises(ExpressionSyntaxError):
        parse("x + 1)")


# --- Evaluation ---

def test_square():
    assert evaluate(2, "x^2") == 4


def test_division_by_zero_is_undefined():
    assert evaluate(0, "1/x") is None


def test_precedence_mul_before_add():
    assert evaluate(3, "2 + x * 4") == pytest.approx(14.0)


def test_power_is_right_associative():
    assert evaluate(0, "2^3^2") == pytest.approx(512.0)


def test_unary_minus_binds_looser_than_power():
    assert evaluate(3, "-x^2") == pytest.approx(-9.0)


def test_negative_argument_keeps_precedence():
    assert evaluate(-3, "x^2") == pytest.approx(9.0)
    assert evaluate(-3, "2-x") == pytest.approx(5.0)


def test_signed_operands():
    assert evaluate(0, "2*-3") == pytest.approx(-6.0)
    assert evaluate(0, "2^-1") == pytest.approx(0.5)
    assert evaluate(0, ".5*2") == pytest.approx(1.0)


def test_named_functions():
    assert evaluate(0, "sin(x)+cos(x)") == pytest.approx(1.0)
    assert evaluate(100, "log(x)") == pytest.approx(2.0)
    assert evaluate(0, "ln(e)") == pytest.approx(1.0)
    assert evaluate(-3, "abs(x)") == pytest.approx(3.0)
    assert evaluate(0, "tan(pi/4)") == pytest.approx(1.0)
    assert evaluate(9, "sqrt(x)") == pytest.approx(3.0)


def test_domain_errors_are_undefined():
    assert evaluate(-4, "sqrt(x)") is None
    assert evaluate(0, "ln(x)") is None
    assert evaluate(0, "(-8)^(1/3)") is None


def test_non_finite_results_are_undefined():
    assert evaluate(0, "10^400") is None
    assert evaluate(1e308, "x*10") is None


def test_bad_syntax_is_undefined_not_raised():
    assert evaluate(1, "2x") is None
    assert evaluate(1, "x +") is None
    assert evaluate(1, "max(x)") is None


def test_host_code_never_runs():
    assert evaluate(0, "__import__('os').system('echo hi')") is None
    assert evaluate(0, "x.__class__") is None


def test_compile_function_reuses_parse():
    f = compile_function("x^2 + 1")
    assert [f(v) for v in (0, 1, 2)] == [1.0, 2.0, 5.0]
    assert compile_function("x +")(1) is None


# --- Hostile input ---

@pytest.mark.parametrize("expr", ["2²", "x+³", "x¹", "٣*x", "x²+1"])
def test_non_ascii_digits_are_undefined(expr):
    assert evaluate(1.0, expr) is None


def test_non_ascii_digits_are_syntax_errors():
    with pytest.raises(ExpressionSyntaxError) as info:
        tokenize("x+²")
    assert info.value.details["position"] == 2


def test_non_ascii_letters_are_syntax_errors():
    with pytest.raises(ExpressionSyntaxError):
        parse("π*x")


@pytest.mark.parametrize("expr", [
    "(" * 2000 + "x" + ")" * 2000,
    "-" * 5000 + "x",
    "sqrt(" * 500 + "x" + ")" * 500,
    "2^" * 3000 + "x",
])
def test_deep_nesting_is_undefined(expr):
    assert evaluate(1.0, expr) is None


def test_deep_nesting_reports_limit():
    with pytest.raises(ExpressionSyntaxError, match="nested too deeply"):
        parse("(" * 500 + "x" + ")" * 500)


def test_moderate_nesting_still_parses():
    assert evaluate(2.0, "(" * 50 + "x" + ")" * 50) == pytest.approx(2.0)
    assert evaluate(2.0, "--" * 20 + "x") == pytest.approx(2.0)


def test_long_flat_chain_is_undefined_not_raised():
    assert evaluate(1.0, "+".join(["x"] * 5000)) is None
    assert evaluate(1.0, "+".join(["x"] * 50)) == pytest.approx(50.0)
