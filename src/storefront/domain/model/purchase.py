"""PurchaseRecord aggregate: one buyer's holding of one product.

The record only knows whether the buyer currently holds a unit and the
tick at which it was bought. Who ever bought a product is kept apart,
in the append-only buyer history of the PurchaseRepository.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import (
    AlreadyPurchasedError,
    NotPurchasedOrAlreadyRefundedError,
)


@dataclass
class PurchaseRecord:
    """State machine per ``(product_id, buyer)``.

    NotPurchased --purchase--> Purchased --refund--> NotPurchased
    """

    product_id: int
    buyer: str
    has_purchased: bool = False
    purchased_at_tick: int = 0

    def purchase(self, tick: int) -> None:
        if self.has_purchased:
            raise AlreadyPurchasedError(self.product_id, self.buyer)
        self.has_purchased = True
        self.purchased_at_tick = tick

    def refund(self) -> None:
        if not self.has_purchased:
            raise NotPurchasedOrAlreadyRefundedError(self.product_id, self.buyer)
        self.has_purchased = False
        self.purchased_at_tick = 0

    def ticks_held(self, current_tick: int) -> int:
        return current_tick - self.purchased_at_tick
