# This project was developed with assistance from AI tools.
"""Repositories and event bus shared by the HTTP layer.

The module exposes a singleton initialised at app startup via
``init_store()`` and injected into routes with ``Depends(get_store)``.
"""

import logging
from dataclasses import dataclass, field

from ..core.config import Settings
from ..schemas.borrower import BorrowerFinancialData, UserProfile
from ..schemas.offers import LoanOffer
from .events import EventBus
from .repository import InMemoryRepository

logger = logging.getLogger(__name__)


@dataclass
class Store:
    profiles: InMemoryRepository[UserProfile] = field(
        default_factory=lambda: InMemoryRepository("UserProfile")
    )
    financial_data: InMemoryRepository[BorrowerFinancialData] = field(
        default_factory=lambda: InMemoryRepository("BorrowerFinancialData", key_field="user_id")
    )
    offers: InMemoryRepository[LoanOffer] = field(
        default_factory=lambda: InMemoryRepository("LoanOffer")
    )
    events: EventBus = field(default_factory=EventBus)


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: Store | None = None


def init_store(cfg: Settings) -> Store:
    """Initialise the singleton (called once from app lifespan)."""
    global _store  # noqa: PLW0603
    _store = Store()
    if cfg.SEED_DEMO_DATA:
        from .seed.seeder import seed_store

        seed_store(_store)
    logger.info(
        "Store initialised (profiles=%d, offers=%d)",
        len(_store.profiles),
        len(_store.offers),
    )
    return _store


def get_store() -> Store:
    """Return the initialised Store singleton."""
    if _store is None:
        raise RuntimeError("Store not initialised -- call init_store() first")
    return _store
