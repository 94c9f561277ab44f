"""Application service: Buy Product use case.

Every precondition is checked before anything is mutated, so a
rejected purchase leaves stock, records and history untouched.
"""

from __future__ import annotations

from structlog import get_logger

from storefront.domain.exceptions import ProductNotFoundError, ZeroQuantityError
from storefront.domain.model.events import ProductBought
from storefront.domain.model.purchase import PurchaseRecord
from storefront.domain.ports import Clock, EventPublisher
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.purchase_repository import PurchaseRepository

logger = get_logger(__name__)


class BuyProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        purchase_repo: PurchaseRepository,
        clock: Clock,
        publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._purchase_repo = purchase_repo
        self._clock = clock
        self._publisher = publisher

    def handle(self, caller: str, product_id: int) -> None:
        """Buy one unit of a product on behalf of *caller*."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if not product.in_stock:
            raise ZeroQuantityError()

        record = self._purchase_repo.get_record(product_id, caller)
        if record is None:
            record = PurchaseRecord(product_id=product_id, buyer=caller)

        tick = self._clock.current_tick()
        # Raises AlreadyPurchasedError without touching the record.
        record.purchase(tick)
        product.take_one()

        self._product_repo.save(product)
        self._purchase_repo.record_purchase(record)

        logger.info(
            "product_bought",
            product_id=product_id,
            buyer=caller,
            tick=tick,
            remaining=product.quantity,
        )
        self._publisher.publish(ProductBought(id=product_id, buyer=caller))
