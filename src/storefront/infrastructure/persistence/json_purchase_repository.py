"""JSON-file-backed implementation of PurchaseRepository.

Layout::

    {
      "records": [{"product_id": 0, "buyer": "alice",
                   "has_purchased": true, "purchased_at_tick": 3}],
      "buyers": {"0": ["alice"]}
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.purchase import PurchaseRecord
from storefront.domain.repository.purchase_repository import PurchaseRepository


class JsonPurchaseRepository(PurchaseRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PurchaseRepository interface -----------------------------------------

    def get_record(self, product_id: int, buyer: str) -> PurchaseRecord | None:
        for raw in self._load_raw()["records"]:
            if raw["product_id"] == product_id and raw["buyer"] == buyer:
                return self._to_domain(raw)
        return None

    def save_record(self, record: PurchaseRecord) -> None:
        data = self._load_raw()
        self._upsert(data["records"], record)
        self._persist_raw(data)

    def record_purchase(self, record: PurchaseRecord) -> None:
        data = self._load_raw()
        self._upsert(data["records"], record)
        data["buyers"].setdefault(str(record.product_id), []).append(record.buyer)
        self._persist_raw(data)

    def list_buyers(self, product_id: int) -> list[str]:
        return list(self._load_raw()["buyers"].get(str(product_id), []))

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _upsert(cls, records: list[dict], record: PurchaseRecord) -> None:
        for i, raw in enumerate(records):
            if raw["product_id"] == record.product_id and raw["buyer"] == record.buyer:
                records[i] = cls._to_raw(record)
                return
        records.append(cls._to_raw(record))

    @staticmethod
    def _to_raw(record: PurchaseRecord) -> dict:
        return {
            "product_id": record.product_id,
            "buyer": record.buyer,
            "has_purchased": record.has_purchased,
            "purchased_at_tick": record.purchased_at_tick,
        }

    @staticmethod
    def _to_domain(raw: dict) -> PurchaseRecord:
        return PurchaseRecord(
            product_id=raw["product_id"],
            buyer=raw["buyer"],
            has_purchased=raw["has_purchased"],
            purchased_at_tick=raw.get("purchased_at_tick", 0),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"records": [], "buyers": {}})
