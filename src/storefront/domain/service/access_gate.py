"""Domain service: Access Gate.

A single owner check shared by every owner-only use case, so the
comparison is never repeated inline.
"""

from __future__ import annotations

from storefront.domain.exceptions import UnauthorizedError
from storefront.domain.repository.store_repository import StoreRepository


class AccessGate:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def is_owner(self, caller: str) -> bool:
        return caller == self._store_repo.get_owner()

    def require_owner(self, caller: str) -> None:
        """Raise UnauthorizedError unless *caller* is the current owner."""
        if not self.is_owner(caller):
            raise UnauthorizedError(caller)
