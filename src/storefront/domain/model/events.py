"""Domain events emitted after a successful state transition.

Events are immutable and carry only what an external observer needs
to follow the ledger.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class DomainEvent:

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def payload(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProductAdded(DomainEvent):
    id: int
    name: str
    quantity: int


@dataclass(frozen=True)
class ProductUpdated(DomainEvent):
    id: int
    name: str
    quantity: int


@dataclass(frozen=True)
class ProductBought(DomainEvent):
    id: int
    buyer: str


@dataclass(frozen=True)
class ProductRefund(DomainEvent):
    id: int


@dataclass(frozen=True)
class RefundPolicyChanged(DomainEvent):
    window_ticks: int


@dataclass(frozen=True)
class OwnershipTransferred(DomainEvent):
    previous_owner: str
    new_owner: str
