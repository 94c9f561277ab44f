"""Application service: Transfer Ownership use case.

Hands the owner-only operations to a new identity. The previous owner
loses access immediately.
"""

from __future__ import annotations

from structlog import get_logger

from storefront.domain.exceptions import InvalidOwnerError
from storefront.domain.model.events import OwnershipTransferred
from storefront.domain.ports import EventPublisher
from storefront.domain.repository.store_repository import StoreRepository
from storefront.domain.service.access_gate import AccessGate

logger = get_logger(__name__)


class TransferOwnershipHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        gate: AccessGate,
        publisher: EventPublisher,
    ) -> None:
        self._store_repo = store_repo
        self._gate = gate
        self._publisher = publisher

    def handle(self, caller: str, new_owner: str) -> None:
        self._gate.require_owner(caller)
        if not new_owner or not new_owner.strip():
            raise InvalidOwnerError(new_owner)

        self._store_repo.save_owner(new_owner)

        logger.info("ownership_transferred", previous_owner=caller, new_owner=new_owner)
        self._publisher.publish(
            OwnershipTransferred(previous_owner=caller, new_owner=new_owner)
        )
