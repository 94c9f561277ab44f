"""Abstract repository for PurchaseRecord aggregate and buyer history.

Records are reset on refund; the history only ever grows, so the two
are stored apart.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.purchase import PurchaseRecord


class PurchaseRepository(ABC):

    @abstractmethod
    def get_record(self, product_id: int, buyer: str) -> PurchaseRecord | None:
        """Return the buyer's record for a product, or None if never bought."""

    @abstractmethod
    def save_record(self, record: PurchaseRecord) -> None:
        """Persist a new or updated purchase record."""

    @abstractmethod
    def record_purchase(self, record: PurchaseRecord) -> None:
        """Persist an activated record and append its buyer to the history.

        Both changes are written together.
        """

    @abstractmethod
    def list_buyers(self, product_id: int) -> list[str]:
        """Return every buyer of a product, in purchase order."""
