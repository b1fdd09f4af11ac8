# This project was developed with assistance from AI tools.
"""Standard offer scoring (0-100 additive scale).

Each factor adds points on top of the others; borrower preferences add
independent +10 boosts. Explanations re-check the same thresholds the
scorers use, so every reason shown is backed by a scoring factor.
"""

import logging
import math
from datetime import date

from ...schemas.borrower import BorrowerCriteria, UserPreferences, UserProfile
from ...schemas.offers import LoanOffer, ScoredOffer
from ..calculator import offer_monthly_payment, payment_to_income
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_MIN_CREDIT_SCORE = 650
MAX_SCORE = 100.0

AMOUNT_WEIGHT = 30
INTEREST_WEIGHT = 20
TERM_WEIGHT = 15
AFFORDABILITY_POINTS = 15
STRETCHED_AFFORDABILITY_POINTS = 7
CREDIT_POINTS = 10
PREFERENCE_BOOST = 10

# Rate at which the interest factor pays exactly INTEREST_WEIGHT
BENCHMARK_RATE = 5.0

COMFORTABLE_RATIO = 0.30
STRETCHED_RATIO = 0.40
LOW_PAYMENT_RATIO = 0.20
LOW_INTEREST_RATE = 4.0
LONG_TERM_MONTHS = 36

# Explainer tolerances
AMOUNT_TOLERANCE = 0.10
TERM_TOLERANCE = 0.20
EXCELLENT_SCORE = 80

ACTIVE_LOAN_STATUS = "active"


# ---------------------------------------------------------------------------
# Factor scorers
# ---------------------------------------------------------------------------


def amount_match_score(requested: float, offered: float) -> float:
    """Not floored: an oversized offer can pull the total down."""
    return (1 - abs(requested - offered) / requested) * AMOUNT_WEIGHT


def interest_rate_score(rate: float) -> float:
    return max(0.0, INTEREST_WEIGHT - (rate - BENCHMARK_RATE) * 10)


def term_match_score(preferred_term: int | None, offer_term: int) -> float:
    if not preferred_term or not offer_term:
        return 0.0
    return (1 - abs(preferred_term - offer_term) / preferred_term) * TERM_WEIGHT


def affordability_score(ratio: float) -> float:
    """Step function on payment / monthly income."""
    if ratio <= COMFORTABLE_RATIO:
        return AFFORDABILITY_POINTS
    if ratio <= STRETCHED_RATIO:
        return STRETCHED_AFFORDABILITY_POINTS
    return 0.0


def credit_match_score(credit_score: int, minimum_credit_score: int | None) -> float:
    minimum = (
        minimum_credit_score if minimum_credit_score is not None else DEFAULT_MIN_CREDIT_SCORE
    )
    return CREDIT_POINTS if credit_score >= minimum else 0.0


def preference_boost(
    prefs: UserPreferences | None,
    offer: LoanOffer,
    ratio: float,
) -> float:
    """Sum of independent +10 boosts; several can apply to one offer."""
    if prefs is None:
        return 0.0

    boost = 0.0
    if prefs.prioritize_low_interest and offer.interest_rate < LOW_INTEREST_RATE:
        boost += PREFERENCE_BOOST
    if prefs.prioritize_long_term and offer.term > LONG_TERM_MONTHS:
        boost += PREFERENCE_BOOST
    if prefs.prioritize_low_monthly_payment and ratio < LOW_PAYMENT_RATIO:
        boost += PREFERENCE_BOOST
    if offer.bank_name in prefs.preferred_banks:
        boost += PREFERENCE_BOOST
    return boost


def calculate_match_score(criteria: BorrowerCriteria, offer: LoanOffer) -> float:
    """Total score for one offer, clamped to [0, 100]."""
    ratio = payment_to_income(offer_monthly_payment(offer), criteria.monthly_income)

    score = (
        amount_match_score(criteria.loan_amount, offer.amount)
        + interest_rate_score(offer.interest_rate)
        + term_match_score(criteria.preferred_term, offer.term)
        + affordability_score(ratio)
        + credit_match_score(criteria.credit_score, offer.minimum_credit_score)
        + preference_boost(criteria.user_preferences, offer, ratio)
    )
    return max(0.0, min(MAX_SCORE, score))


# ---------------------------------------------------------------------------
# Explainer
# ---------------------------------------------------------------------------


def _format_currency(value: float) -> str:
    if float(value).is_integer():
        return f"${value:,.0f}"
    return f"${value:,.2f}"


def generate_match_reasons(
    criteria: BorrowerCriteria,
    offer: LoanOffer,
    score: float,
) -> list[str]:
    reasons: list[str] = []

    if abs(criteria.loan_amount - offer.amount) / criteria.loan_amount < AMOUNT_TOLERANCE:
        reasons.append(
            f"Matches your requested loan amount of {_format_currency(criteria.loan_amount)}"
        )

    if offer.interest_rate < BENCHMARK_RATE:
        reasons.append(f"Low interest rate of {offer.interest_rate:.2f}%")

    preferred = criteria.preferred_term
    if preferred and abs(preferred - offer.term) / preferred < TERM_TOLERANCE:
        reasons.append(f"Loan term aligns with your preference of {preferred} months")

    ratio = payment_to_income(offer_monthly_payment(offer), criteria.monthly_income)
    if ratio <= LOW_PAYMENT_RATIO:
        reasons.append("Monthly payment is well within your budget (less than 20% of income)")
    elif ratio <= COMFORTABLE_RATIO:
        reasons.append("Monthly payment fits your budget (less than 30% of income)")

    prefs = criteria.user_preferences
    if prefs is not None and offer.bank_name in prefs.preferred_banks:
        reasons.append(f"From your preferred bank: {offer.bank_name}")

    if score > EXCELLENT_SCORE:
        reasons.append("Excellent overall match for your profile")

    return reasons


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------


def validate_criteria(criteria: BorrowerCriteria) -> None:
    # NaN fails every comparison, so "<= 0" alone lets it through
    if not math.isfinite(criteria.loan_amount) or criteria.loan_amount <= 0:
        raise InvalidInputError(f"Loan amount must be positive, got {criteria.loan_amount}")
    if not math.isfinite(criteria.monthly_income) or criteria.monthly_income <= 0:
        raise InvalidInputError(f"Monthly income must be positive, got {criteria.monthly_income}")


def get_recommendations(
    criteria: BorrowerCriteria,
    offers: list[LoanOffer],
) -> list[ScoredOffer]:
    """Score every offer and return them best first.

    Equal scores keep their input order. An empty offer list yields an
    empty result.

    Raises:
        InvalidInputError: If the loan amount or monthly income is not a
            positive finite number.
    """
    validate_criteria(criteria)

    scored: list[ScoredOffer] = []
    for offer in offers:
        score = calculate_match_score(criteria, offer)
        logger.debug("Offer %s scored %.2f", offer.id, score)
        scored.append(
            ScoredOffer(
                offer_id=offer.id,
                score=score,
                match_reason=generate_match_reasons(criteria, offer, score),
                is_personalized=True,
            )
        )

    # list.sort is stable, so ties keep input order
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored


# ---------------------------------------------------------------------------
# Profile adapter
# ---------------------------------------------------------------------------


def calculate_age(date_of_birth: date, today: date | None = None) -> int:
    """Whole years since birth; the year only counts once the birthday has passed."""
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def extract_criteria_from_profile(
    profile: UserProfile,
    loan_amount: float,
    loan_purpose: str,
    preferences: UserPreferences | None = None,
    *,
    preferred_term: int | None = None,
    today: date | None = None,
) -> BorrowerCriteria:
    """Build standard-strategy criteria from a stored profile.

    Explicit ``preferences`` win over the ones saved on the profile. Every
    loan on the profile counts toward ``existing_loans``; only active ones
    add to ``existing_debt``.
    """
    active_loans = [loan for loan in profile.loans if loan.status == ACTIVE_LOAN_STATUS]
    return BorrowerCriteria(
        loan_amount=loan_amount,
        loan_purpose=loan_purpose,
        employment_status=profile.employment_status,
        monthly_income=profile.income.monthly,
        credit_score=profile.credit_score,
        existing_loans=len(profile.loans),
        existing_debt=sum(loan.monthly_payment for loan in active_loans),
        expenses=profile.monthly_expenses,
        age=calculate_age(profile.date_of_birth, today),
        preferred_term=preferred_term,
        user_preferences=preferences if preferences is not None else profile.preferences,
    )
