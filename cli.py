"""
CLI interface and shared formatting helpers for the student finance
calculators (graphing, scientific, statistics, IDR estimator).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List

import config as cfg
import report
from errors import CalculatorError
from graphing import PlotDomain, plot, tabulate, validate_function
from idr import IDREstimate, estimate_all
from scientific import FUNCTION_LABELS, ScientificCalculator
from stats import DataSet, StatResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
# Formatting helpers
# ═══════════════════════════════════════════════════════════════════

def fmt(val: float, decimals: int = 0) -> str:
    """Format number as $X,XXX."""
    sign = "-" if val < 0 else ""
    if decimals > 0:
        return f"{sign}${abs(val):,.{decimals}f}"
    return f"{sign}${abs(val):,.0f}"


def pct(val: float, decimals: int = 1) -> str:
    return f"{val:.{decimals}f}%"


def num(val: float, decimals: int = 2) -> str:
    """Plain number with thousands separators, trailing zeros trimmed."""
    text = f"{val:,.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def mode_text(mode) -> str:
    return ", ".join(num(m) for m in mode) if mode else "No mode"


# ═══════════════════════════════════════════════════════════════════
# Input collection (CLI)
# ═══════════════════════════════════════════════════════════════════

def _strip_currency(s: str) -> str:
    """Remove currency symbols, commas, spaces."""
    return s.replace("$", "").replace(",", "").replace(" ", "")


def _prompt_float(
    label: str,
    default: Any,
    min_val: float | None = None,
    max_val: float | None = None,
    currency: bool = False,
) -> float:
    while True:
        raw = input(f"  {label} [{default}]: ").strip()
        if not raw:
            return float(_strip_currency(str(default))) if currency else float(default)
        try:
            val = float(_strip_currency(raw) if currency else raw.replace("%", ""))
            if min_val is not None and val < min_val:
                print(f"    Must be at least {min_val}")
                continue
            if max_val is not None and val > max_val:
                print(f"    Must be at most {max_val}")
                continue
            return val
        except ValueError:
            print("    Invalid number, try again.")


def _prompt_int(
    label: str,
    default: int,
    min_val: int | None = None,
    max_val: int | None = None,
) -> int:
    while True:
        raw = input(f"  {label} [{default}]: ").strip()
        if not raw:
            return default
        try:
            val = int(float(_strip_currency(raw)))
            if min_val is not None and val < min_val:
                print(f"    Must be at least {min_val}")
                continue
            if max_val is not None and val > max_val:
                print(f"    Must be at most {max_val}")
                continue
            return val
        except ValueError:
            print("    Invalid number, try again.")


def _prompt_choice(label: str, options: list[str], default: str) -> str:
    opts = "/".join(options)
    while True:
        raw = input(f"  {label} ({opts}) [{default}]: ").strip().lower()
        if not raw:
            return default
        if raw in options:
            return raw
        print(f"    Choose from: {opts}")


def _prompt_text(label: str, default: str = "") -> str:
    raw = input(f"  {label} [{default}]: ").strip()
    return raw or default


# ═══════════════════════════════════════════════════════════════════
# Shared display-data computation (used by CLI and web app)
# ═══════════════════════════════════════════════════════════════════

def stat_rows(result: StatResult) -> List[tuple[str, str]]:
    """Label/value pairs in display order."""
    return [
        ("Count", str(result.count)),
        ("Sum", num(result.sum)),
        ("Mean", num(result.mean)),
        ("Median", num(result.median)),
        ("Mode", mode_text(result.mode)),
        ("Variance (population)", num(result.variance)),
        ("Standard deviation", num(result.std_dev)),
        ("Minimum", num(result.min)),
        ("Maximum", num(result.max)),
        ("Range", num(result.range)),
        ("Q1", num(result.q1)),
        ("Q3", num(result.q3)),
        ("IQR", num(result.iqr)),
    ]


def idr_display_data(estimates: Dict[str, IDREstimate], selected: str) -> Dict[str, Any]:
    """Extract the summary figures shown next to the plan table."""
    chosen = estimates[selected]
    cheapest = min(estimates.values(), key=lambda e: e.monthly_payment)
    return {
        "plan": selected,
        "plan_name": cfg.IDR_PLAN_NAMES[selected],
        "monthly": chosen.monthly_payment,
        "annual": chosen.annual_payment,
        "discretionary": chosen.discretionary_income,
        "guideline": chosen.poverty_guideline,
        "threshold": chosen.poverty_guideline * cfg.DISCRETIONARY_MULTIPLIER,
        "rate": cfg.IDR_PLAN_RATES[selected] * 100,
        "cheapest_plan": cheapest.plan,
        "cheapest_monthly": cheapest.monthly_payment,
    }


# ═══════════════════════════════════════════════════════════════════
# Box-drawing CLI output
# ═══════════════════════════════════════════════════════════════════

W = 78  # box width (characters)

H_BAR = "═"
V_BAR = "║"


def _box_top(title: str) -> str:
    inner = W - 2
    return (
        f"╔{H_BAR * inner}╗\n"
        f"{V_BAR}  {title:<{inner - 2}}{V_BAR}\n"
        f"╠{H_BAR * inner}╣"
    )


def _box_line(text: str = "") -> str:
    inner = W - 4
    if len(text) > inner:
        text = text[:inner]
    return f"{V_BAR}  {text:<{inner}}{V_BAR}"


def _box_row(label: str, value: str, lw: int = 38) -> str:
    return _box_line(f"{label:<{lw}}{value}")


def _box_bottom() -> str:
    return f"╚{H_BAR * (W - 2)}╝"


def _print_section(title: str, rows: List[str]) -> None:
    """Print a titled box with content rows."""
    print(_box_top(title))
    for r in rows:
        print(r)
    print(_box_bottom())
    print()


# ═══════════════════════════════════════════════════════════════════
# Calculator workflows
# ═══════════════════════════════════════════════════════════════════

def run_graphing() -> None:
    print("\n  Functions of x: + - * / ^, sin cos tan sqrt abs ln log, pi e\n")
    expr = _prompt_text("f(x) =", "sin(x)+x^2")
    x_min = _prompt_float("x min", cfg.DEFAULT_X_RANGE[0])
    x_max = _prompt_float("x max", cfg.DEFAULT_X_RANGE[1])
    y_min = _prompt_float("y min", cfg.DEFAULT_Y_RANGE[0])
    y_max = _prompt_float("y max", cfg.DEFAULT_Y_RANGE[1])

    try:
        domain = PlotDomain(x_min, x_max, y_min, y_max)
        validate_function(expr)
    except CalculatorError as exc:
        print(f"\n  {exc.message}\n")
        return

    rows = [_box_line(f"{'x':>12}  {'y':>14}"), _box_line("─" * (W - 6))]
    table = tabulate(expr, domain)
    for row in table:
        rows.append(_box_line(f"{num(row.x):>12}  {num(row.y):>14}"))
    if not table:
        rows.append(_box_line("Undefined across the whole range."))
    _print_section(f"VALUE TABLE  y = {expr}", rows)

    if _prompt_choice("Save graph as PNG?", ["yes", "no"], "no") == "yes":
        path = _prompt_text("File name", "graph.png")
        fig = report.graph_chart(expr, domain, plot(expr, domain))
        report.save_png(fig, path)
        print(f"  Saved to {path}\n")


def run_scientific() -> None:
    print("\n  Type a calculation, or a function name (sin, sqrt, factorial, ...)")
    print("  to apply it to the last result. 'deg'/'rad' switch angle mode.")
    print("  Blank line to finish.\n")
    calc = ScientificCalculator()
    while True:
        raw = _prompt_text("Calculation")
        if not raw:
            break
        word = raw.lower()
        if word in ("deg", "rad"):
            calc.radians = word == "rad"
            print(f"    Angle mode: {'radians' if calc.radians else 'degrees'}")
            continue
        try:
            if word in FUNCTION_LABELS:
                result = calc.apply(word)
            else:
                calc.display = raw
                result = calc.evaluate()
        except CalculatorError as exc:
            print(f"    {exc.message}")
            continue
        print(f"    = {result}")

    if calc.history:
        _print_section("HISTORY", [_box_line(h) for h in calc.history])


def run_statistics() -> None:
    data = DataSet()
    while True:
        raw = _prompt_text("Numbers (comma or space separated)")
        try:
            data.add_many(raw)
            break
        except CalculatorError as exc:
            print(f"    {exc.message}")

    result = data.calculate()
    rows = [_box_line("Data: " + ", ".join(num(v) for v in data.values)), _box_line()]
    rows.extend(_box_row(label, value) for label, value in stat_rows(result))
    _print_section("DESCRIPTIVE STATISTICS", rows)


def run_idr() -> None:
    balance = _prompt_float("Total loan balance", "$50,000", 0.01, currency=True)
    income = _prompt_float("Annual income (AGI)", "$45,000", 0, currency=True)
    family = _prompt_int("Family size", 1, 1, 20)
    plan = _prompt_choice("Plan", [p.lower() for p in cfg.IDR_PLAN_RATES], "save").upper()

    try:
        estimates = estimate_all(balance, income, family)
    except CalculatorError as exc:
        print(f"\n  {exc.message}\n")
        return
    d = idr_display_data(estimates, plan)

    rows = [
        _box_row("Poverty guideline", fmt(d["guideline"])),
        _box_row("150% of guideline", fmt(d["threshold"])),
        _box_row("Discretionary income", fmt(d["discretionary"])),
        _box_row("Share of discretionary income", pct(d["rate"])),
        _box_line(),
        _box_row(f"Monthly payment ({plan})", fmt(d["monthly"], 2)),
        _box_row("Annual payment", fmt(d["annual"], 2)),
        _box_line(),
        _box_line(f"{'Plan':<8}  {'Monthly':>12}  {'Annual':>12}"),
        _box_line("─" * (W - 6)),
    ]
    for est in estimates.values():
        marker = " <<" if est.plan == plan else ""
        rows.append(_box_line(
            f"{est.plan:<8}  {fmt(est.monthly_payment, 2):>12}  "
            f"{fmt(est.annual_payment, 2):>12}{marker}"
        ))
    rows.append(_box_line())
    rows.append(_box_line(
        f"Lowest payment: {d['cheapest_plan']} at {fmt(d['cheapest_monthly'], 2)}/mo"
    ))
    _print_section("IDR PAYMENT ESTIMATE", rows)


# ═══════════════════════════════════════════════════════════════════
# Main CLI entry point
# ═══════════════════════════════════════════════════════════════════

MENU = {
    "graph": run_graphing,
    "sci": run_scientific,
    "stats": run_statistics,
    "idr": run_idr,
}


def run_cli() -> None:
    """Run the menu loop until the user quits."""
    # Ensure box-drawing characters render on Windows
    try:
        sys.stdout.reconfigure(encoding="utf-8")
    except (AttributeError, OSError):
        pass
    print()
    print("=" * W)
    print("  Student Finance Calculators")
    print("=" * W)

    while True:
        print()
        choice = _prompt_choice("Calculator", list(MENU) + ["quit"], "quit")
        if choice == "quit":
            break
        logger.debug("CLI running %s", choice)
        MENU[choice]()


if __name__ == "__main__":
    run_cli()
