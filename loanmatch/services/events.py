# This project was developed with assistance from AI tools.
"""In-process publish/subscribe.

Handlers run synchronously in subscription order. A failing handler is
logged and does not stop delivery to the others.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[[str, dict[str, Any]], None]

RECOMMENDATIONS_GENERATED = "recommendations.generated"


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, topic: str, handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for ``topic``; call the returned function to unsubscribe."""
        self._handlers[topic].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(topic, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, topic: str, payload: dict[str, Any]) -> int:
        """Deliver to current subscribers and return how many were called."""
        handlers = list(self._handlers.get(topic, []))
        for handler in handlers:
            try:
                handler(topic, payload)
            except Exception:
                logger.exception("Event handler failed for topic %s", topic)
        return len(handlers)
