"""Shared fixtures: a StoreService wired to in-memory fakes."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from storefront.application.store_service import StoreService
from tests.fakes import (
    FakeClock,
    FakeProductRepository,
    FakePurchaseRepository,
    FakeStoreRepository,
    RecordingPublisher,
)

OWNER = "owner"
ALICE = "alice"
BOB = "bob"


@dataclass
class Harness:
    service: StoreService
    products: FakeProductRepository
    purchases: FakePurchaseRepository
    store: FakeStoreRepository
    clock: FakeClock
    publisher: RecordingPublisher


@pytest.fixture
def harness() -> Harness:
    products = FakeProductRepository()
    purchases = FakePurchaseRepository()
    store = FakeStoreRepository(owner=OWNER, refund_window=100)
    clock = FakeClock()
    publisher = RecordingPublisher()
    service = StoreService(products, purchases, store, clock, publisher)
    return Harness(service, products, purchases, store, clock, publisher)
