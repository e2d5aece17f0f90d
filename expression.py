"""
Restricted expression evaluator for the graphing calculator.

Pipeline: tokenize -> recursive-descent parse -> AST walk over floats.
The grammar only knows numbers, the variable ``x``, the constants
``pi``/``e``, the operators ``+ - * / ^`` and an allow-listed function
table, so arbitrary input can never do more than arithmetic.

Precedence (lowest to highest):
  1. ``+ -``          left-associative
  2. ``* /``          left-associative
  3. unary ``+ -``
  4. ``^``            right-associative, binds tighter than unary minus
  5. numbers, ``x``, constants, ``name(expr)``, ``(expr)``
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Union

import config as cfg
from errors import ExpressionSyntaxError


# ─── Tokens ──────────────────────────────────────────────────────────

class TokenKind(Enum):
    NUMBER = auto()
    IDENT = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()


_SINGLE_CHAR = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


# ASCII only: str.isdigit() also accepts superscripts such as "²"
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pos: int


def tokenize(expr: str) -> List[Token]:
    """Split *expr* into tokens, ending with an EOF token."""
    tokens: List[Token] = []
    i = 0
    n = len(expr)
    while i < n:
        ch = expr[i]
        if ch.isspace():
            i += 1
            continue
        if ch in _DIGITS or ch == ".":
            start = i
            seen_dot = False
            while i < n and (expr[i] in _DIGITS or (expr[i] == "." and not seen_dot)):
                if expr[i] == ".":
                    seen_dot = True
                i += 1
            text = expr[start:i]
            if text == ".":
                raise ExpressionSyntaxError(
                    "Stray decimal point", details={"position": start},
                )
            tokens.append(Token(TokenKind.NUMBER, text, start))
            continue
        if ch in _LETTERS:
            start = i
            while i < n and expr[i] in _LETTERS:
                i += 1
            tokens.append(Token(TokenKind.IDENT, expr[start:i], start))
            continue
        kind = _SINGLE_CHAR.get(ch)
        if kind is None:
            raise ExpressionSyntaxError(
                f"Unexpected character '{ch}'", details={"position": i},
            )
        tokens.append(Token(kind, ch, i))
        i += 1
    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens


# ─── AST ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "Node"


@dataclass(frozen=True)
class BinOp:
    op: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Call:
    name: str
    arg: "Node"


Node = Union[Number, Variable, UnaryOp, BinOp, Call]


# Allow-listed functions and constants.  ``log`` is base 10, ``ln`` natural.
FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "sqrt": math.sqrt,
    "abs": abs,
    "ln": math.log,
    "log": math.log10,
}

CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


# ─── Parser ──────────────────────────────────────────────────────────

class _Parser:
    def __init__(self, tokens: List[Token], max_depth: int = cfg.MAX_NESTING):
        self.tokens = tokens
        self.i = 0
        self.depth = 0
        self.max_depth = max_depth

    @property
    def current(self) -> Token:
        return self.tokens[self.i]

    def _advance(self) -> Token:
        tok = self.tokens[self.i]
        self.i += 1
        return tok

    def _expect(self, kind: TokenKind, what: str) -> Token:
        tok = self.current
        if tok.kind is not kind:
            raise ExpressionSyntaxError(
                f"Expected {what}", details={"position": tok.pos},
            )
        return self._advance()

    def parse(self) -> Node:
        node = self._sum()
        if self.current.kind is not TokenKind.EOF:
            raise ExpressionSyntaxError(
                f"Unexpected '{self.current.text}'",
                details={"position": self.current.pos},
            )
        return node

    def _sum(self) -> Node:
        node = self._term()
        while self.current.kind in (TokenKind.PLUS, TokenKind.MINUS):
            op = self._advance().text
            node = BinOp(op, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while self.current.kind in (TokenKind.STAR, TokenKind.SLASH):
            op = self._advance().text
            node = BinOp(op, node, self._unary())
        return node

    def _unary(self) -> Node:
        # every nested construct (sign, exponent, parens, call) passes here
        self.depth += 1
        if self.depth > self.max_depth:
            raise ExpressionSyntaxError(
                "Expression nested too deeply",
                details={"position": self.current.pos, "limit": self.max_depth},
            )
        try:
            if self.current.kind in (TokenKind.PLUS, TokenKind.MINUS):
                op = self._advance().text
                return UnaryOp(op, self._unary())
            return self._power()
        finally:
            self.depth -= 1

    def _power(self) -> Node:
        base = self._atom()
        if self.current.kind is TokenKind.CARET:
            self._advance()
            # right-assoc; the exponent may carry its own sign (2^-1)
            return BinOp("^", base, self._unary())
        return base

    def _atom(self) -> Node:
        tok = self.current
        if tok.kind is TokenKind.NUMBER:
            self._advance()
            try:
                return Number(float(tok.text))
            except ValueError:
                raise ExpressionSyntaxError(
                    f"Invalid number '{tok.text}'", details={"position": tok.pos},
                ) from None
        if tok.kind is TokenKind.LPAREN:
            self._advance()
            node = self._sum()
            self._expect(TokenKind.RPAREN, "')'")
            return node
        if tok.kind is TokenKind.IDENT:
            self._advance()
            name = tok.text
            if name in FUNCTIONS:
                self._expect(TokenKind.LPAREN, f"'(' after {name}")
                arg = self._sum()
                self._expect(TokenKind.RPAREN, "')'")
                return Call(name, arg)
            if name == cfg.VARIABLE:
                return Variable(name)
            if name in CONSTANTS:
                return Number(CONSTANTS[name])
            raise ExpressionSyntaxError(
                f"Unknown identifier '{name}'", details={"position": tok.pos},
            )
        if tok.kind is TokenKind.EOF:
            raise ExpressionSyntaxError(
                "Unexpected end of expression", details={"position": tok.pos},
            )
        raise ExpressionSyntaxError(
            f"Unexpected '{tok.text}'", details={"position": tok.pos},
        )


def parse(expr: str) -> Node:
    """Parse *expr* into an AST.  Raises ExpressionSyntaxError."""
    return _Parser(tokenize(expr)).parse()


# ─── Interpreter ─────────────────────────────────────────────────────

def evaluate_node(node: Node, x: float) -> float:
    """Evaluate an AST with the variable bound to *x*.

    Arithmetic failures propagate as ArithmeticError / ValueError.
    """
    if isinstance(node, Number):
        return node.value
    if isinstance(node, Variable):
        return x
    if isinstance(node, UnaryOp):
        value = evaluate_node(node.operand, x)
        return -value if node.op == "-" else value
    if isinstance(node, BinOp):
        left = evaluate_node(node.left, x)
        right = evaluate_node(node.right, x)
        if node.op == "+":
            return left + right
        if node.op == "-":
            return left - right
        if node.op == "*":
            return left * right
        if node.op == "/":
            return left / right
        # math.pow keeps results real: (-8)^(1/3) is a domain error
        return math.pow(left, right)
    if isinstance(node, Call):
        return float(FUNCTIONS[node.name](evaluate_node(node.arg, x)))
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def compile_function(expr: str) -> Callable[[float], Optional[float]]:
    """Parse *expr* once and return ``f(x) -> float | None``.

    An expression that fails to parse yields a function that is
    undefined everywhere.
    """
    try:
        tree = parse(expr)
    except ExpressionSyntaxError:
        return lambda x: None

    def f(x: float) -> Optional[float]:
        try:
            return _finite_or_none(evaluate_node(tree, float(x)))
        except (ArithmeticError, ValueError):
            return None
        except RecursionError:
            # long flat chains (x+x+...+x) nest on the left without a parser bound
            return None

    return f


def evaluate(x: float, expr: str) -> Optional[float]:
    """Value of *expr* at *x*, or ``None`` where it is undefined.

    Undefined covers malformed syntax, unknown identifiers, arithmetic
    errors and non-finite results.  Never raises for bad input.
    """
    return compile_function(expr)(x)
