# This project was developed with assistance from AI tools.
"""Affordability calculation logic.

Pure math, no I/O. Shared by both scoring strategies and the public
calculator routes.
"""

from ..schemas.calculator import (
    AffordabilityRequest,
    AffordabilityResponse,
    AffordabilityTier,
    AmortizationPeriod,
    PaymentRequest,
    PaymentResponse,
)
from ..schemas.offers import LoanOffer
from .errors import InvalidInputError

# Payment-to-income breakpoints for the calculator tiers
_COMFORTABLE_RATIO = 0.30
_STRETCHED_RATIO = 0.40


def monthly_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """Amortized installment: P = L * [r(1+r)^n] / [(1+r)^n - 1].

    A zero rate is a flat split of the principal over the term.
    """
    if term_months <= 0:
        raise InvalidInputError(f"Loan term must be positive, got {term_months} months")
    if principal < 0:
        raise InvalidInputError(f"Principal must not be negative, got {principal}")

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return principal / term_months

    compound = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * compound / (compound - 1)


def offer_monthly_payment(offer: LoanOffer) -> float:
    """Use the offer's quoted installment, deriving it when the lender gave none."""
    if offer.monthly_payment is not None:
        return offer.monthly_payment
    return monthly_payment(offer.amount, offer.interest_rate, offer.term)


def payment_to_income(payment: float, monthly_income: float) -> float:
    if monthly_income <= 0:
        raise InvalidInputError(f"Monthly income must be positive, got {monthly_income}")
    return payment / monthly_income


def debt_to_income(
    annual_income: float,
    annual_expenses: float,
    annual_existing_debt: float,
    new_monthly_payment: float,
) -> float:
    """DTI including the new loan. Annual figures are converted to monthly first."""
    if annual_income <= 0:
        raise InvalidInputError(f"Income must be positive, got {annual_income}")

    monthly_income = annual_income / 12
    monthly_expenses = annual_expenses / 12
    monthly_debt = annual_existing_debt / 12
    return (monthly_expenses + monthly_debt + new_monthly_payment) / monthly_income


def amortization_schedule(
    principal: float,
    annual_rate: float,
    term_months: int,
) -> list[AmortizationPeriod]:
    """Per-period split of a level installment into interest and principal."""
    payment = monthly_payment(principal, annual_rate, term_months)
    monthly_rate = annual_rate / 100 / 12

    schedule: list[AmortizationPeriod] = []
    balance = principal
    for period in range(1, term_months + 1):
        interest = balance * monthly_rate
        principal_paid = payment - interest
        # float drift can leave the final balance just below zero
        balance = max(balance - principal_paid, 0.0)
        schedule.append(
            AmortizationPeriod(
                period=period,
                payment=round(payment, 2),
                principal=round(principal_paid, 2),
                interest=round(interest, 2),
                balance=round(balance, 2),
            )
        )
    return schedule


def calculate_payment(req: PaymentRequest) -> PaymentResponse:
    """Installment, totals and amortization schedule.

    Raises:
        InvalidInputError: If the down payment covers the whole amount.
    """
    principal = req.amount - req.down_payment
    if principal <= 0:
        raise InvalidInputError(
            f"Down payment {req.down_payment} leaves nothing to finance on {req.amount}"
        )

    payment = monthly_payment(principal, req.interest_rate, req.term_months)
    total = payment * req.term_months
    fee = principal * req.processing_fee / 100
    return PaymentResponse(
        principal=round(principal, 2),
        monthly_payment=round(payment, 2),
        total_repayment=round(total, 2),
        total_interest=round(total - principal, 2),
        processing_fee_amount=round(fee, 2),
        total_cost=round(total + fee, 2),
        schedule=amortization_schedule(principal, req.interest_rate, req.term_months),
    )


def calculate_affordability(req: AffordabilityRequest) -> AffordabilityResponse:
    """Estimate how a new loan sits against the borrower's monthly budget."""
    payment = monthly_payment(req.amount, req.interest_rate, req.term_months)
    ratio = payment_to_income(payment, req.monthly_income)

    obligations = req.monthly_expenses + req.monthly_debts + payment
    dti_ratio = round(obligations / req.monthly_income * 100, 1)

    if ratio <= _COMFORTABLE_RATIO:
        tier = AffordabilityTier.COMFORTABLE
    elif ratio <= _STRETCHED_RATIO:
        tier = AffordabilityTier.STRETCHED
    else:
        tier = AffordabilityTier.UNAFFORDABLE

    dti_warning = None
    if dti_ratio > _STRETCHED_RATIO * 100:
        dti_warning = (
            f"Your estimated DTI of {dti_ratio}% exceeds the "
            f"{_STRETCHED_RATIO:.0%} guideline for unsecured loans."
        )

    return AffordabilityResponse(
        monthly_payment=round(payment, 2),
        payment_to_income=round(ratio, 4),
        dti_ratio=dti_ratio,
        tier=tier,
        dti_warning=dti_warning,
    )
