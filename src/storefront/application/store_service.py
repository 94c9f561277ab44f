"""StoreService: the single entry point to the ledger.

Owns the shared state (the repositories) and wires every use case
handler to it. Each method is one atomic state transition: handlers
validate everything before they mutate, and publish only afterwards.

    service = StoreService(product_repo, purchase_repo, store_repo, clock, bus)
    service.add_product("owner", "Widget", 10)
    service.buy_product("alice", 0)
"""

from __future__ import annotations

from storefront.application.add_product import AddProductHandler
from storefront.application.buy_product import BuyProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.list_products import ListProductsHandler
from storefront.application.refund_product import RefundProductHandler
from storefront.application.set_refund_policy import SetRefundPolicyHandler
from storefront.application.show_buyers import ShowBuyersHandler
from storefront.application.show_product import (
    ShowProductByIdHandler,
    ShowProductByNameHandler,
)
from storefront.application.show_store import ShowOwnerHandler, ShowRefundPolicyHandler
from storefront.application.transfer_ownership import TransferOwnershipHandler
from storefront.application.update_product import UpdateProductQuantityHandler
from storefront.domain.ports import Clock, EventPublisher
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.purchase_repository import PurchaseRepository
from storefront.domain.repository.store_repository import StoreRepository
from storefront.domain.service.access_gate import AccessGate


class StoreService:

    def __init__(
        self,
        product_repo: ProductRepository,
        purchase_repo: PurchaseRepository,
        store_repo: StoreRepository,
        clock: Clock,
        publisher: EventPublisher,
    ) -> None:
        gate = AccessGate(store_repo)

        self._add_product = AddProductHandler(product_repo, gate, publisher)
        self._update_quantity = UpdateProductQuantityHandler(product_repo, gate, publisher)
        self._buy = BuyProductHandler(product_repo, purchase_repo, clock, publisher)
        self._refund = RefundProductHandler(
            product_repo, purchase_repo, store_repo, clock, publisher
        )
        self._set_refund_policy = SetRefundPolicyHandler(store_repo, gate, publisher)
        self._transfer_ownership = TransferOwnershipHandler(store_repo, gate, publisher)

        self._show_by_id = ShowProductByIdHandler(product_repo)
        self._show_by_name = ShowProductByNameHandler(product_repo)
        self._list_products = ListProductsHandler(product_repo)
        self._show_buyers = ShowBuyersHandler(product_repo, purchase_repo)
        self._show_refund_policy = ShowRefundPolicyHandler(store_repo)
        self._show_owner = ShowOwnerHandler(store_repo)

    # --- Catalog --------------------------------------------------------------

    def add_product(self, caller: str, name: str, quantity: int) -> ProductDTO:
        return self._add_product.handle(caller, name, quantity)

    def update_product_quantity(
        self, caller: str, product_id: int, quantity: int
    ) -> ProductDTO:
        return self._update_quantity.handle(caller, product_id, quantity)

    def get_product_by_id(self, product_id: int) -> ProductDTO:
        return self._show_by_id.handle(product_id)

    def get_product_by_name(self, name: str) -> ProductDTO:
        return self._show_by_name.handle(name)

    def get_all_products(self) -> list[ProductDTO]:
        return self._list_products.handle()

    # --- Purchases ------------------------------------------------------------

    def buy_product(self, caller: str, product_id: int) -> None:
        self._buy.handle(caller, product_id)

    def refund_product(self, caller: str, product_id: int) -> None:
        self._refund.handle(caller, product_id)

    def get_product_buyers_by_id(self, product_id: int) -> list[str]:
        return self._show_buyers.handle(product_id)

    # --- Refund policy --------------------------------------------------------

    def set_refund_policy_number(self, caller: str, window_ticks: int) -> None:
        self._set_refund_policy.handle(caller, window_ticks)

    def get_refund_policy_number(self) -> int:
        return self._show_refund_policy.handle()

    # --- Ownership ------------------------------------------------------------

    def get_owner(self) -> str:
        return self._show_owner.handle()

    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        self._transfer_ownership.handle(caller, new_owner)
