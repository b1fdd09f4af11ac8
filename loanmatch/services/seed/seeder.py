# This project was developed with assistance from AI tools.
"""Load demo fixtures into a Store.

Seeding is idempotent: entities are keyed, so re-seeding overwrites the
same records instead of duplicating them.
"""

import logging

from ...schemas.borrower import BorrowerFinancialData, UserProfile
from ...schemas.offers import LoanOffer
from ..store import Store
from .fixtures import FINANCIAL_DATA, OFFERS, PROFILES

logger = logging.getLogger(__name__)


def seed_store(store: Store) -> dict[str, int]:
    """Populate every repository from fixtures and return the counts seeded."""
    for raw in OFFERS:
        store.offers.put(LoanOffer.model_validate(raw))
    for raw in PROFILES:
        store.profiles.put(UserProfile.model_validate(raw))
    for raw in FINANCIAL_DATA:
        store.financial_data.put(BorrowerFinancialData.model_validate(raw))

    counts = {
        "offers": len(OFFERS),
        "profiles": len(PROFILES),
        "financial_data": len(FINANCIAL_DATA),
    }
    logger.info("Seeded demo data: %s", counts)
    return counts
