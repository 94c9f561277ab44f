"""Integration tests for the BuyProduct use case."""

import pytest

from storefront.domain.exceptions import (
    AlreadyPurchasedError,
    ProductNotFoundError,
    ZeroQuantityError,
)
from storefront.domain.model.events import ProductBought


@pytest.fixture
def stocked(harness):
    harness.service.add_product("owner", "Product A", 10)
    harness.publisher.events.clear()
    return harness


class TestBuyProductHappyPath:

    def test_buy_decrements_and_records_buyer(self, stocked):
        stocked.service.buy_product("client1", 0)

        assert stocked.publisher.events == [ProductBought(id=0, buyer="client1")]
        assert stocked.service.get_product_buyers_by_id(0) == ["client1"]
        assert stocked.service.get_product_by_id(0).quantity == 9

    def test_purchase_is_stamped_with_current_tick(self, stocked):
        stocked.clock.tick = 42
        stocked.service.buy_product("client1", 0)

        record = stocked.purchases.get_record(0, "client1")
        assert record.has_purchased
        assert record.purchased_at_tick == 42

    def test_owner_can_buy_too(self, stocked):
        stocked.service.buy_product("owner", 0)
        assert stocked.service.get_product_buyers_by_id(0) == ["owner"]

    def test_different_buyers_each_take_a_unit(self, stocked):
        stocked.service.buy_product("alice", 0)
        stocked.service.buy_product("bob", 0)
        assert stocked.service.get_product_by_id(0).quantity == 8
        assert stocked.service.get_product_buyers_by_id(0) == ["alice", "bob"]

    def test_last_unit_can_be_bought(self, stocked):
        stocked.service.update_product_quantity("owner", 0, 1)
        stocked.service.buy_product("client1", 0)
        assert stocked.service.get_product_by_id(0).quantity == 0


class TestBuyProductValidation:

    def test_sold_out_rejected(self, stocked):
        stocked.service.update_product_quantity("owner", 0, 0)
        stocked.publisher.events.clear()

        with pytest.raises(ZeroQuantityError, match="Quantity can't be 0!"):
            stocked.service.buy_product("client1", 0)

        assert stocked.service.get_product_buyers_by_id(0) == []
        assert stocked.publisher.events == []

    def test_second_purchase_rejected(self, stocked):
        stocked.service.buy_product("client1", 0)

        with pytest.raises(AlreadyPurchasedError, match="more than once"):
            stocked.service.buy_product("client1", 0)

        assert stocked.service.get_product_by_id(0).quantity == 9
        assert stocked.service.get_product_buyers_by_id(0) == ["client1"]

    def test_unknown_product_rejected(self, stocked):
        with pytest.raises(ProductNotFoundError, match="does not exist"):
            stocked.service.buy_product("owner", 1)

    def test_negative_id_rejected(self, stocked):
        with pytest.raises(ProductNotFoundError):
            stocked.service.buy_product("owner", -1)
