"""Application service: Show Product Buyers use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.purchase_repository import PurchaseRepository


class ShowBuyersHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        purchase_repo: PurchaseRepository,
    ) -> None:
        self._product_repo = product_repo
        self._purchase_repo = purchase_repo

    def handle(self, product_id: int) -> list[str]:
        """Return everyone who ever bought the product, refunds included."""
        if self._product_repo.get_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)
        return list(self._purchase_repo.list_buyers(product_id))
