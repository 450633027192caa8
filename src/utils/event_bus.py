"""
In-process event bus.

Fire-and-forget delivery of events to subscribed handlers.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus:
    """
    Synchronous publish/subscribe hub.

    Handlers run in subscription order. A failing handler is logged and
    does not stop delivery to the others; nothing is acknowledged.
    """

    def __init__(self):
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def post(self, event: Any) -> None:
        """Deliver an event to every subscribed handler."""
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception(
                    f"Handler {getattr(handler, '__name__', handler)!r} "
                    f"failed for {type(event).__name__}"
                )
