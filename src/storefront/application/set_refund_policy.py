"""Application service: Set Refund Policy use case."""

from __future__ import annotations

from structlog import get_logger

from storefront.domain.model.events import RefundPolicyChanged
from storefront.domain.model.refund_policy import RefundPolicy
from storefront.domain.ports import EventPublisher
from storefront.domain.repository.store_repository import StoreRepository
from storefront.domain.service.access_gate import AccessGate

logger = get_logger(__name__)


class SetRefundPolicyHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        gate: AccessGate,
        publisher: EventPublisher,
    ) -> None:
        self._store_repo = store_repo
        self._gate = gate
        self._publisher = publisher

    def handle(self, caller: str, window_ticks: int) -> None:
        self._gate.require_owner(caller)

        policy = RefundPolicy(window_ticks)
        self._store_repo.save_refund_policy(policy)

        logger.info("refund_policy_changed", window_ticks=window_ticks)
        self._publisher.publish(RefundPolicyChanged(window_ticks=window_ticks))
