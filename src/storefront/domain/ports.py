"""Ports to the hosting environment.

The ledger reads time from a Clock and announces state changes through
an EventPublisher. Both are supplied by whoever hosts the ledger.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.events import DomainEvent


class Clock(ABC):

    @abstractmethod
    def current_tick(self) -> int:
        """Return the current logical tick. Never decreases."""


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Deliver an event to external observers."""
