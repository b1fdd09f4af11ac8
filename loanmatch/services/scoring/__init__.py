# This project was developed with assistance from AI tools.
"""Offer scoring engine.

Two independent strategies live side by side:

* ``standard`` -- additive 0-100 score per offer with match reasons
  (``standard.get_recommendations``).
* ``weighted`` -- five weighted factors on a 0-1 scale with a reasoning
  sentence per offer (``weighted.get_ai_recommendations``).

They keep separate defaults and scales; callers pick one explicitly, either
by calling the module directly or through ``rank_offers``.
"""

from ...schemas.borrower import BorrowerCriteria, BorrowerFinancialData
from ...schemas.offers import LoanOffer
from ...schemas.recommendation import ScoringStrategy
from ..errors import InvalidInputError
from . import standard, weighted


def rank_offers(
    strategy: ScoringStrategy | str,
    offers: list[LoanOffer],
    *,
    criteria: BorrowerCriteria | None = None,
    financial_data: BorrowerFinancialData | None = None,
) -> list[LoanOffer]:
    """Order ``offers`` best first with the named strategy.

    Only the ranking is returned; scores are not comparable across
    strategies. ``criteria`` drives the standard strategy and
    ``financial_data`` the weighted one.

    Raises:
        InvalidInputError: If the strategy is unknown or its input is missing.
    """
    try:
        strategy = ScoringStrategy(strategy)
    except ValueError:
        raise InvalidInputError(f"Unknown scoring strategy: {strategy!r}") from None

    if strategy is ScoringStrategy.STANDARD:
        if criteria is None:
            raise InvalidInputError("The standard strategy needs borrower criteria")
        standard.validate_criteria(criteria)
        scored = [(offer, standard.calculate_match_score(criteria, offer)) for offer in offers]
        scored.sort(key=lambda item: item[1], reverse=True)
        return [offer for offer, _ in scored]

    if financial_data is None:
        raise InvalidInputError("The weighted strategy needs financial data")
    return weighted.rank_for_financial_data(financial_data, offers).recommendations


__all__ = ["ScoringStrategy", "rank_offers", "standard", "weighted"]
