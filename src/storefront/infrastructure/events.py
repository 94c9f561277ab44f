"""In-process EventBus, the default EventPublisher.

Every event is logged, then handed to each subscriber in
subscription order. Events are published after the state change is
saved, so a failing subscriber is logged and skipped; it never turns
a committed call into an error.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.model.events import DomainEvent
from storefront.domain.ports import EventPublisher
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[[DomainEvent], None]


class EventBus(EventPublisher):

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def publish(self, event: DomainEvent) -> None:
        logger.debug("domain_event", event_type=event.event_type, **event.payload())
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("event_listener_failed", event_type=event.event_type)
