"""Per-invocation CLI state shared by every command group."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.store_service import StoreService
from storefront.infrastructure.bootstrap import block_clock, store_service
from storefront.infrastructure.clock import JsonBlockClock
from storefront.infrastructure.config import Settings


@dataclass
class CliContext:
    settings: Settings
    caller_override: str | None = None

    def service(self) -> StoreService:
        return store_service(self.settings)

    def clock(self) -> JsonBlockClock:
        return block_clock(self.settings)

    def caller(self, service: StoreService) -> str:
        """The identity commands act as: ``--as``, else the current owner."""
        if self.caller_override:
            return self.caller_override
        return service.get_owner()
