"""
Scientific calculator: evaluate a whole calculation, or apply a one-tap
function (sin, x², n!, ...) to the current value.

Calculations use the same restricted grammar as the graphing calculator,
minus the variable ``x``.  Trigonometric buttons honour the angle mode;
functions typed into a calculation always work in radians.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional

import config as cfg
from errors import ExpressionSyntaxError, UndefinedResultError
from expression import TokenKind, evaluate_node, parse, tokenize

logger = logging.getLogger(__name__)


def _factorial(value: float) -> float:
    n = math.floor(value)
    if n < 0:
        raise ValueError("factorial of a negative number")
    if n > cfg.FACTORIAL_LIMIT:
        raise OverflowError("factorial too large")
    return float(math.factorial(n))


# Angle in, plain number out
_ANGLE_IN: Dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
}

# Plain number in, angle out
_ANGLE_OUT: Dict[str, Callable[[float], float]] = {
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
}

_PLAIN: Dict[str, Callable[[float], float]] = {
    "log": math.log10,
    "ln": math.log,
    "sqrt": math.sqrt,
    "square": lambda v: v * v,
    "cube": lambda v: v * v * v,
    "reciprocal": lambda v: 1 / v,
    "factorial": _factorial,
    "exp": math.exp,
    "abs": abs,
}

# Button captions, in keypad order
FUNCTION_LABELS: Dict[str, str] = {
    "sin": "sin", "cos": "cos", "tan": "tan",
    "asin": "sin⁻¹", "acos": "cos⁻¹", "atan": "tan⁻¹",
    "log": "log", "ln": "ln", "sqrt": "√x",
    "square": "x²", "cube": "x³", "reciprocal": "1/x",
    "factorial": "n!", "exp": "eˣ", "abs": "|x|",
}


def format_result(value: float) -> str:
    """Round to RESULT_DECIMALS places and drop trailing zeros.

    The output never uses exponent notation, so it can be typed straight
    back into another calculation.
    """
    text = f"{value:.{cfg.RESULT_DECIMALS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _undefined(what: str) -> UndefinedResultError:
    return UndefinedResultError(f"{what} has no real value",
                                details={"calculation": what})


def calculate(expr: str) -> float:
    """Value of a calculation with no variable.

    Raises ExpressionSyntaxError for unreadable input and
    UndefinedResultError when there is no finite real result.
    """
    if not expr or not expr.strip():
        raise ExpressionSyntaxError("Please enter a calculation")
    for tok in tokenize(expr):
        if tok.kind is TokenKind.IDENT and tok.text == cfg.VARIABLE:
            raise ExpressionSyntaxError(
                f"'{cfg.VARIABLE}' can only be used in the graphing calculator",
                details={"position": tok.pos},
            )
    tree = parse(expr)
    try:
        value = evaluate_node(tree, 0.0)
    except (ArithmeticError, ValueError, RecursionError):
        raise _undefined(expr) from None
    if not math.isfinite(value):
        raise _undefined(expr)
    return value


def apply_function(name: str, value: float, radians: bool = True) -> float:
    """Apply the one-tap function *name* to *value*.

    In degree mode sin/cos/tan read their argument as degrees and the
    inverse functions answer in degrees.
    """
    if name not in FUNCTION_LABELS:
        raise ExpressionSyntaxError(f"Unknown function '{name}'",
                                    details={"functions": list(FUNCTION_LABELS)})
    try:
        if name in _ANGLE_IN:
            result = _ANGLE_IN[name](value if radians else math.radians(value))
        elif name in _ANGLE_OUT:
            result = _ANGLE_OUT[name](value)
            if not radians:
                result = math.degrees(result)
        else:
            result = _PLAIN[name](value)
    except (ArithmeticError, ValueError):
        raise _undefined(f"{name}({format_result(value)})") from None
    if not math.isfinite(result):
        raise _undefined(f"{name}({format_result(value)})")
    return float(result)


class ScientificCalculator:
    """Display text, angle mode and recent history for one session.

    History keeps the most recent HISTORY_LIMIT entries, oldest first.
    A failed calculation leaves the display and history untouched.
    """

    def __init__(self, display: str = "", radians: bool = True,
                 history: Optional[List[str]] = None):
        self.display = display
        self.radians = radians
        self._history: List[str] = list(history or [])[-cfg.HISTORY_LIMIT:]

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def _record(self, entry: str) -> None:
        self._history.append(entry)
        del self._history[:-cfg.HISTORY_LIMIT]

    def evaluate(self) -> str:
        result = format_result(calculate(self.display))
        self._record(f"{self.display} = {result}")
        self.display = result
        return result

    def apply(self, name: str) -> str:
        value = calculate(self.display)
        result = format_result(apply_function(name, value, self.radians))
        self._record(f"{name}({self.display}) = {result}")
        logger.debug("Applied %s in %s mode", name, "radian" if self.radians else "degree")
        self.display = result
        return result

    def toggle_angle_mode(self) -> bool:
        self.radians = not self.radians
        return self.radians

    def clear(self) -> None:
        self.display = ""

    def clear_history(self) -> None:
        self._history.clear()
