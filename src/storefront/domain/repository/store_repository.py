"""Abstract repository for store-wide settings: owner and refund policy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.refund_policy import RefundPolicy


class StoreRepository(ABC):

    @abstractmethod
    def get_owner(self) -> str:
        """Return the current owner identity."""

    @abstractmethod
    def save_owner(self, owner: str) -> None:
        """Persist a new owner identity."""

    @abstractmethod
    def get_refund_policy(self) -> RefundPolicy:
        """Return the current refund policy."""

    @abstractmethod
    def save_refund_policy(self, policy: RefundPolicy) -> None:
        """Persist a new refund policy."""
