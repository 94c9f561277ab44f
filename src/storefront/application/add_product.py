"""Application service: Add Product use case.

Adding a name that already exists overwrites its quantity instead of
creating a second product.
"""

from __future__ import annotations

from structlog import get_logger

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import (
    EmptyNameError,
    InvalidQuantityError,
    ZeroQuantityError,
)
from storefront.domain.model.events import DomainEvent, ProductAdded, ProductUpdated
from storefront.domain.model.product import Product
from storefront.domain.ports import EventPublisher
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.access_gate import AccessGate

logger = get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        gate: AccessGate,
        publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._gate = gate
        self._publisher = publisher

    def handle(self, caller: str, name: str, quantity: int) -> ProductDTO:
        """Add a product to the catalog, or restock it if the name is known."""
        self._gate.require_owner(caller)

        if not name:
            raise EmptyNameError()
        if quantity == 0:
            raise ZeroQuantityError()
        if quantity < 0:
            raise InvalidQuantityError(quantity)

        event: DomainEvent
        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            existing.set_quantity(quantity)
            self._product_repo.save(existing)
            product = existing
            event = ProductUpdated(id=product.id, name=product.name, quantity=quantity)
            logger.info("product_updated", product_id=product.id, quantity=quantity)
        else:
            product = Product(id=self._product_repo.next_id(), name=name, quantity=quantity)
            self._product_repo.save(product)
            event = ProductAdded(id=product.id, name=product.name, quantity=quantity)
            logger.info(
                "product_added", product_id=product.id, name=name, quantity=quantity
            )

        self._publisher.publish(event)
        return ProductDTO.from_domain(product)
