"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
handing out the mutable aggregates themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as seen by callers."""

    id: int
    name: str
    quantity: int

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(id=product.id, name=product.name, quantity=product.quantity)
