"""Application service: Refund Product use case.

A refund is accepted while the ticks elapsed since the purchase do
not exceed the store's refund window.
"""

from __future__ import annotations

from structlog import get_logger

from storefront.domain.exceptions import (
    NotPurchasedOrAlreadyRefundedError,
    ProductNotFoundError,
    RefundWindowExpiredError,
)
from storefront.domain.model.events import ProductRefund
from storefront.domain.ports import Clock, EventPublisher
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.purchase_repository import PurchaseRepository
from storefront.domain.repository.store_repository import StoreRepository

logger = get_logger(__name__)


class RefundProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        purchase_repo: PurchaseRepository,
        store_repo: StoreRepository,
        clock: Clock,
        publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._purchase_repo = purchase_repo
        self._store_repo = store_repo
        self._clock = clock
        self._publisher = publisher

    def handle(self, caller: str, product_id: int) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        record = self._purchase_repo.get_record(product_id, caller)
        if record is None or not record.has_purchased:
            raise NotPurchasedOrAlreadyRefundedError(product_id, caller)

        policy = self._store_repo.get_refund_policy()
        elapsed = record.ticks_held(self._clock.current_tick())
        if not policy.allows(elapsed):
            raise RefundWindowExpiredError(product_id, elapsed, policy.window_ticks)

        record.refund()
        product.return_one()
        self._purchase_repo.save_record(record)
        self._product_repo.save(product)

        logger.info(
            "product_refunded",
            product_id=product_id,
            buyer=caller,
            elapsed_ticks=elapsed,
            remaining=product.quantity,
        )
        self._publisher.publish(ProductRefund(id=product_id))
