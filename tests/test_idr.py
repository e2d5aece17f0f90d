"""Tests for the IDR payment estimator."""

import pytest

import config as cfg
from errors import InvalidNumberError, InvalidPlanError, MissingFieldError
from idr import (
    IDRInputs,
    discretionary_income,
    estimate,
    estimate_all,
    parse_idr_form,
    poverty_guideline,
)


# --- Formulas ---

def test_poverty_guideline():
    assert poverty_guideline(1) == 15_060
    assert poverty_guideline(4) == 31_200


def test_discretionary_income():
    assert discretionary_income(45_000, 1) == pytest.approx(22_410)
    assert discretionary_income(10_000, 1) == 0.0


def test_save_example():
    assert estimate(50_000, 45_000, 1, "SAVE") == pytest.approx(93.375)


@pytest.mark.parametrize("plan,expected", [
    ("PAYE", 186.75),
    ("REPAYE", 186.75),
    ("IBR", 186.75),
])
def test_ten_percent_plans(plan, expected):
    assert estimate(50_000, 45_000, 1, plan) == pytest.approx(expected)


def test_icr_capped_by_fixed_term():
    # 20% share is 373.50 but 50,000 / 144 is lower
    assert estimate(50_000, 45_000, 1, "ICR") == pytest.approx(50_000 / 144)


def test_icr_uses_share_when_lower():
    assert estimate(100_000, 45_000, 1, "ICR") == pytest.approx(373.5)


def test_low_income_pays_nothing():
    for plan in cfg.IDR_PLAN_RATES:
        assert estimate(30_000, 20_000, 1, plan) == 0.0


def test_larger_family_lowers_payment():
    assert estimate(50_000, 60_000, 4, "SAVE") < estimate(50_000, 60_000, 1, "SAVE")


def test_plan_id_is_case_insensitive():
    assert estimate(50_000, 45_000, 1, "save") == estimate(50_000, 45_000, 1, "SAVE")


@pytest.mark.parametrize("args", [
    (0, 45_000, 1),
    (-5, 45_000, 1),
    (50_000, -1, 1),
    (50_000, 45_000, 0),
    (float("nan"), 45_000, 1),
    (50_000, float("inf"), 1),
])
def test_out_of_domain_inputs(args):
    with pytest.raises(InvalidNumberError):
        estimate(*args, "SAVE")


def test_unknown_plan():
    with pytest.raises(InvalidPlanError):
        estimate(50_000, 45_000, 1, "XYZ")


def test_estimate_all():
    estimates = estimate_all(50_000, 45_000, 1)
    assert list(estimates) == list(cfg.IDR_PLAN_RATES)
    save = estimates["SAVE"]
    assert save.monthly_payment == pytest.approx(93.375)
    assert save.annual_payment == pytest.approx(93.375 * 12)
    assert save.discretionary_income == pytest.approx(22_410)
    assert save.poverty_guideline == 15_060


# --- Form parsing ---

def _form(**overrides):
    form = {"balance": "50000", "income": "45000", "family_size": "1",
            "state": "ca", "plan": "SAVE"}
    form.update(overrides)
    return form


def test_parse_form():
    inputs = parse_idr_form(_form(balance="$50,000", income="45,000.00"))
    assert inputs == IDRInputs(balance=50_000, annual_income=45_000,
                               family_size=1, state="CA", plan="SAVE")


def test_parse_form_defaults():
    inputs = parse_idr_form(_form(family_size="", plan=""))
    assert inputs.family_size == 1
    assert inputs.plan == "SAVE"


def test_parse_form_missing_fields():
    with pytest.raises(MissingFieldError) as info:
        parse_idr_form(_form(state="", income="  "))
    assert info.value.details["missing"] == ["income", "state"]
    assert "Please fill in all required fields" in info.value.message


def test_parse_form_bad_number():
    with pytest.raises(InvalidNumberError, match="Loan balance must be a number"):
        parse_idr_form(_form(balance="lots"))


def test_parse_form_bad_family_size():
    with pytest.raises(InvalidNumberError):
        parse_idr_form(_form(family_size="two"))


def test_parse_form_bad_plan():
    with pytest.raises(InvalidPlanError):
        parse_idr_form(_form(plan="FOO"))
