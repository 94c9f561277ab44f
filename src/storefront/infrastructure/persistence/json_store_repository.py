"""JSON-file-backed implementation of StoreRepository.

The file is created on first use with the initial owner and refund
window; afterwards only the owner-gated use cases change it.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.refund_policy import RefundPolicy
from storefront.domain.repository.store_repository import StoreRepository


class JsonStoreRepository(StoreRepository):

    def __init__(
        self,
        file_path: Path,
        initial_owner: str,
        initial_refund_window: int,
    ) -> None:
        self._file_path = file_path
        self._ensure_file(initial_owner, initial_refund_window)

    # --- StoreRepository interface --------------------------------------------

    def get_owner(self) -> str:
        return self._load_raw()["owner"]

    def save_owner(self, owner: str) -> None:
        data = self._load_raw()
        data["owner"] = owner
        self._persist_raw(data)

    def get_refund_policy(self) -> RefundPolicy:
        return RefundPolicy(self._load_raw()["refund_window_ticks"])

    def save_refund_policy(self, policy: RefundPolicy) -> None:
        data = self._load_raw()
        data["refund_window_ticks"] = policy.window_ticks
        self._persist_raw(data)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, owner: str, refund_window: int) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"owner": owner, "refund_window_ticks": refund_window})
