# This project was developed with assistance from AI tools.
"""Public API routes -- offer catalog and calculators."""

from fastapi import APIRouter, Depends, Query

from ..core.config import settings
from ..schemas import Pagination
from ..schemas.calculator import (
    AffordabilityRequest,
    AffordabilityResponse,
    PaymentRequest,
    PaymentResponse,
)
from ..schemas.offers import BundledOffer, LoanOffer, OfferListResponse
from ..services import calculator
from ..services.offers import (
    get_available_offers,
    get_bundle,
    get_bundled_offers,
    get_offer,
)
from ..services.store import Store, get_store

router = APIRouter()


@router.get("/offers", response_model=OfferListResponse)
async def list_offers(
    amount: float | None = Query(default=None, gt=0),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    store: Store = Depends(get_store),
) -> OfferListResponse:
    """List catalog offers, optionally only those sized for ``amount``."""
    if amount is None:
        offers = store.offers.list()
    else:
        offers = get_available_offers(store.offers, amount, settings.OFFER_AMOUNT_CEILING)
    return OfferListResponse(
        data=offers[offset : offset + limit],
        pagination=Pagination.for_slice(len(offers), offset, limit),
    )


@router.get("/offers/{offer_id}", response_model=LoanOffer)
async def read_offer(offer_id: str, store: Store = Depends(get_store)) -> LoanOffer:
    return get_offer(store.offers, offer_id)


@router.get("/bundles", response_model=list[BundledOffer])
async def list_bundles(
    amount: float = Query(gt=0),
    store: Store = Depends(get_store),
) -> list[BundledOffer]:
    """Bundle the offers available for ``amount``."""
    offers = get_available_offers(store.offers, amount, settings.OFFER_AMOUNT_CEILING)
    return get_bundled_offers(offers, amount, settings.BUNDLE_AMOUNT_CEILING)


@router.get("/bundles/{bundle_id}", response_model=BundledOffer)
async def read_bundle(
    bundle_id: str,
    amount: float | None = Query(default=None, gt=0),
    store: Store = Depends(get_store),
) -> BundledOffer:
    """One bundle, built from the whole catalog or the offers sized for ``amount``."""
    if amount is None:
        offers = store.offers.list()
    else:
        offers = get_available_offers(store.offers, amount, settings.OFFER_AMOUNT_CEILING)
    return get_bundle(offers, bundle_id)


@router.post("/calculate-payment", response_model=PaymentResponse)
async def calculate_payment(req: PaymentRequest) -> PaymentResponse:
    """Amortized installment, totals with the processing fee, and the schedule."""
    return calculator.calculate_payment(req)


@router.post("/calculate-affordability", response_model=AffordabilityResponse)
async def calculate_affordability(req: AffordabilityRequest) -> AffordabilityResponse:
    """Payment-to-income tier and DTI for a prospective loan."""
    return calculator.calculate_affordability(req)
