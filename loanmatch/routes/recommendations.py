# This project was developed with assistance from AI tools.
"""Recommendation routes.

Each request resolves its data from the store, then calls the pure scoring
engine synchronously. Domain errors propagate to the app-level handlers.
"""

import logging

from fastapi import APIRouter, Depends, Query

from ..core.config import settings
from ..schemas.borrower import BorrowerCriteria
from ..schemas.offers import AIRecommendationResult, LoanOffer, ScoredOffer
from ..schemas.recommendation import (
    ProfileCriteriaRequest,
    RecommendationRequest,
    ScoringStrategy,
)
from ..services.events import RECOMMENDATIONS_GENERATED
from ..services.offers import get_available_offers
from ..services.scoring import rank_offers, standard, weighted
from ..services.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def _candidate_offers(store: Store, amount: float | None) -> list[LoanOffer]:
    if amount is None:
        return store.offers.list()
    return get_available_offers(store.offers, amount, settings.OFFER_AMOUNT_CEILING)


def _publish(store: Store, strategy: ScoringStrategy, user_id: str | None, ranked_ids: list[str]):
    store.events.publish(
        RECOMMENDATIONS_GENERATED,
        {
            "strategy": strategy.value,
            "user_id": user_id,
            "offer_ids": ranked_ids,
        },
    )


@router.post("/recommendations", response_model=list[ScoredOffer])
async def recommend(
    req: RecommendationRequest,
    store: Store = Depends(get_store),
) -> list[ScoredOffer]:
    """Rank offers for ad-hoc criteria with the standard strategy."""
    offers = req.offers
    if offers is None:
        offers = _candidate_offers(store, req.criteria.loan_amount)
    ranked = standard.get_recommendations(req.criteria, offers)
    _publish(store, ScoringStrategy.STANDARD, None, [r.offer_id for r in ranked])
    return ranked


@router.post("/users/{user_id}/criteria", response_model=BorrowerCriteria)
async def extract_criteria(
    user_id: str,
    req: ProfileCriteriaRequest,
    store: Store = Depends(get_store),
) -> BorrowerCriteria:
    """Build scoring criteria from the user's stored profile."""
    profile = store.profiles.get(user_id)
    return standard.extract_criteria_from_profile(
        profile,
        req.loan_amount,
        req.loan_purpose,
        req.preferences,
        preferred_term=req.preferred_term,
    )


@router.post("/users/{user_id}/recommendations", response_model=list[ScoredOffer])
async def recommend_for_user(
    user_id: str,
    req: ProfileCriteriaRequest,
    store: Store = Depends(get_store),
) -> list[ScoredOffer]:
    """Standard-strategy ranking driven by the user's stored profile."""
    profile = store.profiles.get(user_id)
    criteria = standard.extract_criteria_from_profile(
        profile,
        req.loan_amount,
        req.loan_purpose,
        req.preferences,
        preferred_term=req.preferred_term,
    )
    ranked = standard.get_recommendations(criteria, _candidate_offers(store, req.loan_amount))
    logger.info("Ranked %d offers for user %s", len(ranked), user_id)
    _publish(store, ScoringStrategy.STANDARD, user_id, [r.offer_id for r in ranked])
    return ranked


@router.get("/users/{user_id}/ai-recommendations", response_model=AIRecommendationResult)
async def ai_recommendations(
    user_id: str,
    amount: float | None = Query(default=None, gt=0),
    store: Store = Depends(get_store),
) -> AIRecommendationResult:
    """Weighted-strategy ranking from the user's financial data."""
    result = weighted.get_ai_recommendations(
        user_id,
        _candidate_offers(store, amount),
        store.financial_data,
    )
    _publish(store, ScoringStrategy.WEIGHTED, user_id, [o.id for o in result.recommendations])
    return result


@router.post("/users/{user_id}/ranked-offers", response_model=list[LoanOffer])
async def ranked_offers(
    user_id: str,
    req: ProfileCriteriaRequest,
    strategy: ScoringStrategy = Query(default=ScoringStrategy.STANDARD),
    store: Store = Depends(get_store),
) -> list[LoanOffer]:
    """Catalog offers for the requested amount, ordered by either strategy."""
    offers = _candidate_offers(store, req.loan_amount)
    if strategy is ScoringStrategy.STANDARD:
        criteria = standard.extract_criteria_from_profile(
            store.profiles.get(user_id),
            req.loan_amount,
            req.loan_purpose,
            req.preferences,
            preferred_term=req.preferred_term,
        )
        ranked = rank_offers(strategy, offers, criteria=criteria)
    else:
        ranked = rank_offers(strategy, offers, financial_data=store.financial_data.get(user_id))
    _publish(store, strategy, user_id, [o.id for o in ranked])
    return ranked
