"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.store_service import StoreService
from storefront.infrastructure.clock import JsonBlockClock
from storefront.infrastructure.config import Settings
from storefront.infrastructure.events import EventBus
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_purchase_repository import (
    JsonPurchaseRepository,
)
from storefront.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def purchase_repository(settings: Settings) -> JsonPurchaseRepository:
    return JsonPurchaseRepository(settings.data_dir / "purchases.json")


def store_repository(settings: Settings) -> JsonStoreRepository:
    return JsonStoreRepository(
        settings.data_dir / "store.json",
        initial_owner=settings.owner,
        initial_refund_window=settings.refund_window_ticks,
    )


def block_clock(settings: Settings) -> JsonBlockClock:
    return JsonBlockClock(settings.data_dir / "chain.json")


def store_service(settings: Settings, bus: EventBus | None = None) -> StoreService:
    return StoreService(
        product_repo=product_repository(settings),
        purchase_repo=purchase_repository(settings),
        store_repo=store_repository(settings),
        clock=block_clock(settings),
        publisher=bus if bus is not None else EventBus(),
    )
