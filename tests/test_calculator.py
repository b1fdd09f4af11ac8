# This project was developed with assistance from AI tools.
"""Tests for payment, DTI and affordability calculations."""

import pytest
from factories import make_offer

from loanmatch.schemas.calculator import AffordabilityRequest, AffordabilityTier, PaymentRequest
from loanmatch.services.calculator import (
    amortization_schedule,
    calculate_affordability,
    calculate_payment,
    debt_to_income,
    monthly_payment,
    offer_monthly_payment,
    payment_to_income,
)
from loanmatch.services.errors import InvalidInputError

# ---------------------------------------------------------------------------
# monthly_payment
# ---------------------------------------------------------------------------


def test_zero_rate_splits_principal_evenly():
    assert monthly_payment(10000, 0, 36) == pytest.approx(277.78, abs=0.01)


def test_standard_amortization_check_value():
    """12% a year over 12 months is a 1% monthly rate."""
    assert monthly_payment(10000, 12, 12) == pytest.approx(888.49, abs=0.01)


def test_payment_times_term_exceeds_principal_when_rate_positive():
    assert monthly_payment(20000, 4.5, 36) * 36 > 20000


@pytest.mark.parametrize("term", [0, -12])
def test_non_positive_term_rejected(term):
    with pytest.raises(InvalidInputError):
        monthly_payment(10000, 5, term)


def test_negative_principal_rejected():
    with pytest.raises(InvalidInputError):
        monthly_payment(-1, 5, 12)


def test_offer_quoted_payment_is_used_as_is():
    offer = make_offer(amount=10000, interest_rate=12, term=12, monthly_payment=900)
    assert offer_monthly_payment(offer) == 900


def test_offer_payment_derived_when_missing():
    offer = make_offer(amount=10000, interest_rate=12, term=12)
    assert offer_monthly_payment(offer) == pytest.approx(888.49, abs=0.01)


# ---------------------------------------------------------------------------
# Ratios
# ---------------------------------------------------------------------------


def test_dti_converts_annual_figures_to_monthly():
    # (1000 + 500 + 500) / 5000
    assert debt_to_income(60000, 12000, 6000, 500) == pytest.approx(0.4)


def test_dti_rejects_zero_income():
    with pytest.raises(InvalidInputError):
        debt_to_income(0, 12000, 6000, 500)


def test_payment_to_income_ratio():
    assert payment_to_income(1250, 5000) == pytest.approx(0.25)


@pytest.mark.parametrize("income", [0, -100])
def test_payment_to_income_rejects_non_positive_income(income):
    with pytest.raises(InvalidInputError):
        payment_to_income(1000, income)


# ---------------------------------------------------------------------------
# Request/response wrappers
# ---------------------------------------------------------------------------


def test_calculate_payment_totals():
    resp = calculate_payment(PaymentRequest(amount=10000, interest_rate=12, term_months=12))
    assert resp.monthly_payment == pytest.approx(888.49, abs=0.01)
    assert resp.total_repayment == pytest.approx(10661.85, abs=0.02)
    assert resp.total_interest == pytest.approx(661.85, abs=0.02)


def test_calculate_payment_zero_rate_has_no_interest():
    resp = calculate_payment(PaymentRequest(amount=3600, interest_rate=0, term_months=36))
    assert resp.monthly_payment == 100
    assert resp.total_interest == 0


def test_down_payment_reduces_principal():
    resp = calculate_payment(
        PaymentRequest(amount=12000, down_payment=2000, interest_rate=12, term_months=12)
    )
    assert resp.principal == 10000
    assert resp.monthly_payment == pytest.approx(888.49, abs=0.01)


def test_processing_fee_added_to_total_cost():
    resp = calculate_payment(
        PaymentRequest(amount=10000, interest_rate=12, term_months=12, processing_fee=2)
    )
    assert resp.processing_fee_amount == 200
    assert resp.total_cost == pytest.approx(resp.total_repayment + 200, abs=0.01)
    assert resp.total_interest == pytest.approx(661.85, abs=0.02)


def test_fee_charged_on_financed_principal_only():
    resp = calculate_payment(
        PaymentRequest(
            amount=10000, down_payment=5000, interest_rate=0, term_months=10, processing_fee=1
        )
    )
    assert resp.processing_fee_amount == 50
    assert resp.total_cost == 5050


@pytest.mark.parametrize("down_payment", [10000, 15000])
def test_down_payment_covering_amount_rejected(down_payment):
    with pytest.raises(InvalidInputError, match="Down payment"):
        calculate_payment(
            PaymentRequest(
                amount=10000, down_payment=down_payment, interest_rate=5, term_months=12
            )
        )


def test_schedule_first_period_check_value():
    first = amortization_schedule(10000, 12, 12)[0]
    assert first.period == 1
    assert first.interest == 100
    assert first.principal == pytest.approx(788.49, abs=0.01)
    assert first.balance == pytest.approx(9211.51, abs=0.01)


def test_schedule_pays_off_the_loan():
    schedule = amortization_schedule(20000, 6.5, 48)
    assert len(schedule) == 48
    assert schedule[-1].balance == 0
    assert sum(p.principal for p in schedule) == pytest.approx(20000, abs=0.5)
    balances = [p.balance for p in schedule]
    assert balances == sorted(balances, reverse=True)


def test_zero_rate_schedule_is_flat():
    schedule = amortization_schedule(1200, 0, 12)
    assert {p.interest for p in schedule} == {0}
    assert {p.principal for p in schedule} == {100}
    assert [p.balance for p in schedule[:2]] == [1100, 1000]


def test_calculate_payment_includes_full_schedule():
    resp = calculate_payment(PaymentRequest(amount=3600, interest_rate=0, term_months=36))
    assert len(resp.schedule) == 36
    assert resp.schedule[-1].balance == 0


def test_affordability_comfortable():
    resp = calculate_affordability(
        AffordabilityRequest(monthly_income=5000, amount=10000, interest_rate=0, term_months=10)
    )
    assert resp.monthly_payment == 1000
    assert resp.payment_to_income == pytest.approx(0.2)
    assert resp.tier == AffordabilityTier.COMFORTABLE
    assert resp.dti_ratio == 20.0
    assert resp.dti_warning is None


def test_affordability_stretched():
    resp = calculate_affordability(
        AffordabilityRequest(monthly_income=5000, amount=17500, interest_rate=0, term_months=10)
    )
    assert resp.tier == AffordabilityTier.STRETCHED


def test_affordability_warns_on_high_dti():
    resp = calculate_affordability(
        AffordabilityRequest(
            monthly_income=5000,
            monthly_expenses=1500,
            amount=10000,
            interest_rate=0,
            term_months=10,
        )
    )
    assert resp.dti_ratio == 50.0
    assert resp.tier == AffordabilityTier.COMFORTABLE
    assert "50.0%" in resp.dti_warning
