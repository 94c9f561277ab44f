"""Application service: Update Product Quantity use case."""

from __future__ import annotations

from structlog import get_logger

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import InvalidQuantityError, ProductNotFoundError
from storefront.domain.model.events import ProductUpdated
from storefront.domain.ports import EventPublisher
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.access_gate import AccessGate

logger = get_logger(__name__)


class UpdateProductQuantityHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        gate: AccessGate,
        publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._gate = gate
        self._publisher = publisher

    def handle(self, caller: str, product_id: int, quantity: int) -> ProductDTO:
        """Force-set a product's quantity. Zero is allowed."""
        self._gate.require_owner(caller)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if quantity < 0:
            raise InvalidQuantityError(quantity)

        product.set_quantity(quantity)
        self._product_repo.save(product)

        logger.info("product_updated", product_id=product.id, quantity=quantity)
        self._publisher.publish(
            ProductUpdated(id=product.id, name=product.name, quantity=quantity)
        )
        return ProductDTO.from_domain(product)
