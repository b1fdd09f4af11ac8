# This project was developed with assistance from AI tools.
"""Process-local repositories.

Stand-ins for a real backend: each entity type lives in its own
``InMemoryRepository`` keyed by a chosen attribute. The scoring engine never
touches these directly; routes resolve data here and pass plain models in.
"""

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel

from .errors import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class InMemoryRepository(Generic[T]):
    """Dict-backed store with insertion-ordered listing."""

    def __init__(self, entity: str, key_field: str = "id", items: Iterable[T] = ()):
        self._entity = entity
        self._key_field = key_field
        self._items: dict[str, T] = {}
        for item in items:
            self.put(item)

    def get(self, key: str) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(self._entity, key) from None

    def list(self) -> list[T]:
        return list(self._items.values())

    def put(self, item: T) -> T:
        key = getattr(item, self._key_field)
        self._items[key] = item
        logger.debug("Stored %s '%s'", self._entity, key)
        return item

    def __len__(self) -> int:
        return len(self._items)
