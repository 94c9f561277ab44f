"""Application service: Show Product use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EmptyNameError, ProductNotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductByIdHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductDTO.from_domain(product)


class ShowProductByNameHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> ProductDTO:
        if not name:
            raise EmptyNameError()
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise ProductNotFoundError(name)
        return ProductDTO.from_domain(product)
