"""Product aggregate.

Products are created by the owner and never removed. The name is a
secondary unique key; the id is assigned once and never reused.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import (
    EmptyNameError,
    InvalidQuantityError,
    ZeroQuantityError,
)


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` is never empty
    - ``quantity`` is never negative
    """

    id: int
    name: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.name:
            raise EmptyNameError()
        if self.quantity < 0:
            raise InvalidQuantityError(self.quantity)

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    def set_quantity(self, quantity: int) -> None:
        """Overwrite the stock level. Zero is allowed."""
        if quantity < 0:
            raise InvalidQuantityError(quantity)
        self.quantity = quantity

    def take_one(self) -> None:
        """Remove one unit for a purchase."""
        if not self.in_stock:
            raise ZeroQuantityError()
        self.quantity -= 1

    def return_one(self) -> None:
        """Put back one unit after a refund."""
        self.quantity += 1
