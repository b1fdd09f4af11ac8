# This project was developed with assistance from AI tools.
"""Weighted offer scoring (0-1 scale).

Five normalized sub-scores combined with fixed weights. Borrower figures
come from an annual financial snapshot looked up by user id, and the
installment is always derived by amortization so that the score and its
reasoning see the same payment.
"""

import logging
import math
from typing import Protocol

from ...schemas.borrower import BorrowerFinancialData
from ...schemas.offers import AIRecommendationResult, LoanOffer
from ..calculator import debt_to_income, monthly_payment
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

WEIGHTS: dict[str, float] = {
    "affordability": 0.30,
    "interest_rate": 0.25,
    "credit_match": 0.20,
    "term_optimization": 0.15,
    "purpose_match": 0.10,
}

DEFAULT_MIN_CREDIT_SCORE = 650
DEFAULT_LOAN_TYPE = "personal"

# Interest rates mapped linearly onto [0, 1] between these bounds
MAX_EXPECTED_RATE = 20.0
MIN_EXPECTED_RATE = 2.0

CREDIT_BUFFER = 50
MAX_TERM_MONTHS = 60

# (upper DTI bound, exclusive) -> sub-score
_DTI_TIERS: list[tuple[float, float]] = [
    (0.2, 1.0),
    (0.3, 0.9),
    (0.4, 0.7),
    (0.5, 0.4),
    (0.6, 0.2),
]

PURPOSE_KEYWORDS: dict[str, list[str]] = {
    "home renovation": ["home improvement", "renovation", "home", "property"],
    "education": ["education", "student", "tuition", "school"],
    "debt consolidation": ["debt consolidation", "consolidation", "refinance"],
    "medical": ["medical", "healthcare", "hospital", "treatment"],
    "wedding": ["wedding", "marriage", "celebration"],
    "vacation": ["vacation", "travel", "holiday"],
    "car": ["car", "vehicle", "auto", "automobile"],
}

# Thresholds above which a factor is called out in the reasoning text
_HIGHLIGHT_THRESHOLD = 0.7


class FinancialDataProvider(Protocol):
    def get(self, key: str) -> BorrowerFinancialData: ...


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------


def affordability_score(dti: float) -> float:
    for upper, score in _DTI_TIERS:
        if dti < upper:
            return score
    return 0.0


def interest_rate_score(rate: float) -> float:
    scaled = (MAX_EXPECTED_RATE - rate) / (MAX_EXPECTED_RATE - MIN_EXPECTED_RATE)
    return max(0.0, min(1.0, scaled))


def credit_match_score(credit_score: int, minimum: int) -> float:
    """Graduated credit gate: near-misses still earn partial credit."""
    if credit_score >= minimum + CREDIT_BUFFER:
        return 1.0
    if credit_score >= minimum:
        return 0.9
    if credit_score >= minimum - CREDIT_BUFFER:
        return 0.6
    if credit_score >= minimum - CREDIT_BUFFER * 2:
        return 0.3
    return 0.1


def financial_stability(data: BorrowerFinancialData) -> float:
    obligations = data.expenses + data.existing_debt
    if obligations == 0:
        return math.inf
    return data.income / obligations


def term_score(term: int, data: BorrowerFinancialData) -> float:
    """Stable borrowers favour short terms, stretched ones long terms.

    Branch bounds are strict: a stability of exactly 3.0 is moderate, not stable.
    """
    stability = financial_stability(data)
    if stability > 3:
        return 1 - term / MAX_TERM_MONTHS
    if stability > 1.5:
        return 0.8 if term <= 36 else (MAX_TERM_MONTHS - term) / 24
    return 0.9 if term >= 48 else term / MAX_TERM_MONTHS


def purpose_match_score(user_purpose: str, loan_type: str) -> float:
    purpose = user_purpose.lower()
    loan_type = loan_type.lower()

    if purpose == loan_type:
        return 1.0

    for key, keywords in PURPOSE_KEYWORDS.items():
        if key in purpose and any(keyword in loan_type for keyword in keywords):
            return 0.9

    if "personal" in loan_type:
        return 0.7
    return 0.5


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------


def _sub_scores(offer: LoanOffer, data: BorrowerFinancialData) -> dict[str, float]:
    payment = monthly_payment(offer.amount, offer.interest_rate, offer.term)
    dti = debt_to_income(data.income, data.expenses, data.existing_debt, payment)
    minimum = (
        offer.minimum_credit_score
        if offer.minimum_credit_score is not None
        else DEFAULT_MIN_CREDIT_SCORE
    )
    return {
        "affordability": affordability_score(dti),
        "interest_rate": interest_rate_score(offer.interest_rate),
        "credit_match": credit_match_score(data.credit_score, minimum),
        "term_optimization": term_score(offer.term, data),
        "purpose_match": purpose_match_score(data.loan_purpose, offer.type or DEFAULT_LOAN_TYPE),
    }


def calculate_recommendation_score(offer: LoanOffer, data: BorrowerFinancialData) -> float:
    subs = _sub_scores(offer, data)
    return sum(subs[name] * weight for name, weight in WEIGHTS.items())


def build_reasoning(
    offer: LoanOffer,
    data: BorrowerFinancialData,
    score: float,
) -> str:
    if score > 0.8:
        parts = [
            "Excellent match: This offer aligns perfectly with your financial profile "
            "and loan purpose."
        ]
    elif score > 0.6:
        parts = [
            "Good match: This offer provides balanced terms that fit your income level "
            "and credit profile."
        ]
    elif score > 0.4:
        parts = [
            "Fair match: This offer may work for you, but there are better options "
            "available for your situation."
        ]
    else:
        parts = [
            "Poor match: This offer may strain your finances or has terms that don't "
            "align well with your needs."
        ]

    subs = _sub_scores(offer, data)
    if subs["affordability"] > _HIGHLIGHT_THRESHOLD:
        parts.append("The monthly payment is comfortably within your budget.")
    if subs["interest_rate"] > _HIGHLIGHT_THRESHOLD:
        parts.append("This offer has a favorable interest rate compared to alternatives.")
    if data.loan_purpose and subs["purpose_match"] > _HIGHLIGHT_THRESHOLD:
        parts.append(f"This loan type is specifically designed for {data.loan_purpose}.")

    return " ".join(parts)


def rank_for_financial_data(
    data: BorrowerFinancialData,
    offers: list[LoanOffer],
) -> AIRecommendationResult:
    """Score, sort and explain offers against one financial snapshot."""
    if not math.isfinite(data.income) or data.income <= 0:
        raise InvalidInputError(f"Income must be positive, got {data.income}")

    scored = [(offer, calculate_recommendation_score(offer, data)) for offer in offers]
    scored.sort(key=lambda item: item[1], reverse=True)

    reasonings: dict[str, str] = {}
    for offer, score in scored:
        logger.debug("Offer %s weighted score %.4f", offer.id, score)
        reasonings[offer.id] = build_reasoning(offer, data, score)

    return AIRecommendationResult(
        recommendations=[offer for offer, _ in scored],
        top_pick=scored[0][0] if scored else None,
        reasonings=reasonings,
    )


def get_ai_recommendations(
    user_id: str,
    offers: list[LoanOffer],
    financial_data: FinancialDataProvider,
) -> AIRecommendationResult:
    """Rank offers for a user whose financial data is held by ``financial_data``.

    An empty offer list is not an error: the result simply has no top pick.

    Raises:
        NotFoundError: If the provider has no record for ``user_id``.
        InvalidInputError: If the recorded income is not positive.
    """
    data = financial_data.get(user_id)
    return rank_for_financial_data(data, offers)
