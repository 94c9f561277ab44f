"""Integration tests for the AddProduct use case."""

import pytest

from storefront.domain.exceptions import (
    EmptyNameError,
    InvalidQuantityError,
    UnauthorizedError,
    ZeroQuantityError,
)
from storefront.domain.model.events import ProductAdded, ProductUpdated


class TestAddProductHappyPath:

    def test_add_assigns_first_id_and_emits_event(self, harness):
        dto = harness.service.add_product("owner", "Product A", 10)

        assert dto.id == 0
        assert dto.quantity == 10
        assert harness.publisher.events == [ProductAdded(id=0, name="Product A", quantity=10)]

        product = harness.service.get_product_by_id(0)
        assert product.name == "Product A"
        assert product.quantity == 10

    def test_ids_are_sequential(self, harness):
        a = harness.service.add_product("owner", "A", 1)
        b = harness.service.add_product("owner", "B", 1)
        c = harness.service.add_product("owner", "C", 1)
        assert [a.id, b.id, c.id] == [0, 1, 2]

    def test_same_name_updates_quantity_instead_of_duplicating(self, harness):
        harness.service.add_product("owner", "Product A", 10)
        dto = harness.service.add_product("owner", "Product A", 17)

        assert dto.id == 0
        assert harness.publisher.events[-1] == ProductUpdated(
            id=0, name="Product A", quantity=17
        )
        assert len(harness.service.get_all_products()) == 1
        assert harness.service.get_product_by_name("Product A").quantity == 17

    def test_name_match_is_case_sensitive(self, harness):
        harness.service.add_product("owner", "Widget", 1)
        dto = harness.service.add_product("owner", "widget", 1)
        assert dto.id == 1


class TestAddProductValidation:

    def test_empty_name_rejected(self, harness):
        with pytest.raises(EmptyNameError, match="You have to enter a name!"):
            harness.service.add_product("owner", "", 5)
        assert harness.service.get_all_products() == []
        assert harness.publisher.events == []

    def test_empty_name_checked_before_zero_quantity(self, harness):
        with pytest.raises(EmptyNameError):
            harness.service.add_product("owner", "", 0)

    def test_zero_quantity_rejected(self, harness):
        with pytest.raises(ZeroQuantityError, match="Quantity can't be 0!"):
            harness.service.add_product("owner", "Valid Product", 0)
        assert harness.service.get_all_products() == []

    def test_negative_quantity_rejected(self, harness):
        with pytest.raises(InvalidQuantityError):
            harness.service.add_product("owner", "Valid Product", -4)

    def test_zero_quantity_on_existing_name_leaves_it_untouched(self, harness):
        harness.service.add_product("owner", "Widget", 3)
        with pytest.raises(ZeroQuantityError):
            harness.service.add_product("owner", "Widget", 0)
        assert harness.service.get_product_by_id(0).quantity == 3

    def test_non_owner_rejected(self, harness):
        harness.service.add_product("owner", "Widget", 10)
        harness.publisher.events.clear()

        with pytest.raises(UnauthorizedError) as exc_info:
            harness.service.add_product("client1", "Widget", 99)

        assert exc_info.value.caller == "client1"
        assert harness.service.get_product_by_id(0).quantity == 10
        assert harness.publisher.events == []
