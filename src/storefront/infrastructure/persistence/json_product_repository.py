"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        # Ids are dense, so the count is the next free id.
        return len(self._load_raw())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        products = self._load()
        product_id = self._name_index(products).get(name)
        if product_id is None:
            return None
        return products[product_id]

    def list_all(self) -> list[Product]:
        return sorted(self._load().values(), key=lambda p: p.id)

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _name_index(products: dict[int, Product]) -> dict[str, int]:
        return {p.name: p.id for p in products.values()}

    def _load(self) -> dict[int, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                quantity=item["quantity"],
            )
            for item in self._load_raw()
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {"id": p.id, "name": p.name, "quantity": p.quantity}
            for p in sorted(products.values(), key=lambda p: p.id)
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
