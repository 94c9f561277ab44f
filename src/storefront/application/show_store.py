"""Application service: store-wide queries (owner, refund policy)."""

from __future__ import annotations

from storefront.domain.repository.store_repository import StoreRepository


class ShowRefundPolicyHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self) -> int:
        return self._store_repo.get_refund_policy().window_ticks


class ShowOwnerHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self) -> str:
        return self._store_repo.get_owner()
