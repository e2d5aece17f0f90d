"""
Income-driven repayment (IDR) payment estimator.

Payments are a share of *discretionary income*: annual income above 150%
of the federal poverty guideline for the household size.  ICR is the odd
one out, capped by a 12-year fixed amortisation of the balance.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Mapping

import config as cfg
from errors import InvalidNumberError, InvalidPlanError, MissingFieldError

logger = logging.getLogger(__name__)


# ─── Data Classes ─────────────────────────────────────────────────────

@dataclass
class IDRInputs:
    """Validated form inputs for the estimator."""

    balance: float          # total federal loan balance
    annual_income: float    # adjusted gross income
    family_size: int        # household size, including the borrower
    state: str              # two-letter state of residence
    plan: str = "SAVE"


@dataclass(frozen=True)
class IDREstimate:
    plan: str
    monthly_payment: float
    annual_payment: float
    discretionary_income: float
    poverty_guideline: float


# ─── Formulas ────────────────────────────────────────────────────────

def poverty_guideline(family_size: int) -> float:
    return cfg.POVERTY_GUIDELINE_BASE + (family_size - 1) * cfg.POVERTY_GUIDELINE_PER_PERSON


def discretionary_income(annual_income: float, family_size: int) -> float:
    threshold = cfg.DISCRETIONARY_MULTIPLIER * poverty_guideline(family_size)
    return max(0.0, annual_income - threshold)


def _check_domain(balance: float, annual_income: float, family_size: int) -> None:
    if not (math.isfinite(balance) and math.isfinite(annual_income)):
        raise InvalidNumberError("Balance and income must be finite numbers",
                                 details={"balance": balance, "annual_income": annual_income})
    if balance <= 0:
        raise InvalidNumberError("Loan balance must be greater than zero",
                                 details={"balance": balance})
    if annual_income < 0:
        raise InvalidNumberError("Annual income cannot be negative",
                                 details={"annual_income": annual_income})
    if family_size < 1:
        raise InvalidNumberError("Family size must be at least 1",
                                 details={"family_size": family_size})


def estimate(balance: float, annual_income: float, family_size: int,
             plan_id: str) -> float:
    """Estimated monthly payment under *plan_id*, floored at zero."""
    _check_domain(balance, annual_income, family_size)
    plan = plan_id.upper()
    if plan not in cfg.IDR_PLAN_RATES:
        raise InvalidPlanError(f"Unknown repayment plan '{plan_id}'",
                               details={"plans": sorted(cfg.IDR_PLAN_RATES)})

    monthly_discretionary = discretionary_income(annual_income, family_size) / 12
    share = monthly_discretionary * cfg.IDR_PLAN_RATES[plan]
    if plan == "ICR":
        payment = min(share, balance / cfg.ICR_FIXED_TERM_MONTHS)
    else:
        payment = share
    return max(0.0, payment)


def estimate_all(balance: float, annual_income: float,
                 family_size: int) -> Dict[str, IDREstimate]:
    """Estimate every plan side by side, keyed by plan id."""
    guideline = poverty_guideline(family_size)
    logger.debug("Estimating all plans for household of %d", family_size)
    disc = discretionary_income(annual_income, family_size)
    out: Dict[str, IDREstimate] = {}
    for plan in cfg.IDR_PLAN_RATES:
        monthly = estimate(balance, annual_income, family_size, plan)
        out[plan] = IDREstimate(
            plan=plan,
            monthly_payment=monthly,
            annual_payment=monthly * 12,
            discretionary_income=disc,
            poverty_guideline=guideline,
        )
    return out


# ─── Form parsing ────────────────────────────────────────────────────

def _strip_currency(s: str) -> str:
    return s.replace("$", "").replace(",", "").replace(" ", "")


def _parse_amount(form: Mapping[str, str], key: str, label: str) -> float:
    raw = _strip_currency(form[key])
    try:
        return float(raw)
    except ValueError:
        raise InvalidNumberError(f"{label} must be a number",
                                 details={key: form[key]}) from None


def parse_idr_form(form: Mapping[str, str]) -> IDRInputs:
    """Validate the estimator form.

    Balance, income and state are required; family size defaults to 1
    and plan to SAVE.
    """
    labels = {"balance": "Loan balance", "income": "Annual income", "state": "State"}
    missing = [k for k in labels if not str(form.get(k, "")).strip()]
    if missing:
        raise MissingFieldError(
            "Please fill in all required fields: "
            + ", ".join(labels[k] for k in missing),
            details={"missing": missing},
        )

    balance = _parse_amount(form, "balance", "Loan balance")
    income = _parse_amount(form, "income", "Annual income")
    try:
        family_size = int(str(form.get("family_size", "") or "1").strip())
    except ValueError:
        raise InvalidNumberError("Family size must be a whole number",
                                 details={"family_size": form.get("family_size")}) from None
    _check_domain(balance, income, family_size)

    plan = str(form.get("plan", "") or "SAVE").strip().upper()
    if plan not in cfg.IDR_PLAN_RATES:
        raise InvalidPlanError(f"Unknown repayment plan '{plan}'",
                               details={"plans": sorted(cfg.IDR_PLAN_RATES)})

    return IDRInputs(
        balance=balance,
        annual_income=income,
        family_size=family_size,
        state=str(form["state"]).strip().upper(),
        plan=plan,
    )
