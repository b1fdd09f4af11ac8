# This project was developed with assistance from AI tools.
"""Loan offer catalog.

Centralizes catalog queries and bundle construction so that the public
routes and the recommendation routes read offers the same way.
"""

from ..schemas.offers import BundledOffer, LoanOffer
from .calculator import offer_monthly_payment
from .errors import NotFoundError
from .repository import InMemoryRepository

# Share of the combined amount a bundle may draw down
_MAX_VALUE_DRAWDOWN = 0.85
_LOW_RATE_DRAWDOWN = 0.90
# Rate discount granted for bundling the two cheapest offers
_LOW_RATE_DISCOUNT = 0.1


def get_available_offers(
    repo: InMemoryRepository[LoanOffer],
    amount: float,
    ceiling: float = 1.5,
) -> list[LoanOffer]:
    """Offers no larger than ``amount * ceiling``, in catalog order."""
    return [offer for offer in repo.list() if offer.amount <= amount * ceiling]


def get_offer(repo: InMemoryRepository[LoanOffer], offer_id: str) -> LoanOffer:
    return repo.get(offer_id)


def _bundle(
    bundle_id: str,
    name: str,
    description: str,
    offers: list[LoanOffer],
    drawdown: float,
    rate_discount: float = 0.0,
) -> BundledOffer:
    count = len(offers)
    return BundledOffer(
        id=bundle_id,
        name=name,
        description=description,
        offer_ids=[o.id for o in offers],
        lenders=[o.bank_name for o in offers],
        total_amount=float(int(sum(o.amount for o in offers) * drawdown)),
        average_interest_rate=round(sum(o.interest_rate for o in offers) / count - rate_discount, 2),
        average_term=round(sum(o.term for o in offers) / count),
        total_monthly_payment=round(sum(offer_monthly_payment(o) for o in offers), 2),
    )


def build_bundles(offers: list[LoanOffer]) -> list[BundledOffer]:
    """Combine offers into a max-value and a low-rate bundle.

    Fewer than two offers yield no bundles; the max-value bundle needs three.
    """
    if len(offers) < 2:
        return []

    bundles: list[BundledOffer] = []
    if len(offers) >= 3:
        largest = sorted(offers, key=lambda o: o.amount, reverse=True)[:3]
        bundles.append(
            _bundle(
                "bundle-max-value",
                "Max Value Bundle",
                "Higher loan amount from the three largest offers, consolidated payments",
                largest,
                _MAX_VALUE_DRAWDOWN,
            )
        )

    cheapest = sorted(offers, key=lambda o: o.interest_rate)[:2]
    bundles.append(
        _bundle(
            "bundle-low-rate",
            "Low Rate Bundle",
            "Lowest overall interest rate from the two cheapest offers",
            cheapest,
            _LOW_RATE_DRAWDOWN,
            rate_discount=_LOW_RATE_DISCOUNT,
        )
    )
    return bundles


def get_bundled_offers(
    offers: list[LoanOffer],
    amount: float,
    ceiling: float = 2.0,
) -> list[BundledOffer]:
    """Bundles whose combined amount stays within ``amount * ceiling``."""
    return [b for b in build_bundles(offers) if b.total_amount <= amount * ceiling]


def get_bundle(offers: list[LoanOffer], bundle_id: str) -> BundledOffer:
    """One bundle built from ``offers``, looked up by id."""
    for bundle in build_bundles(offers):
        if bundle.id == bundle_id:
            return bundle
    raise NotFoundError("Bundle", bundle_id)
