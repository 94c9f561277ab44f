"""RefundPolicy value object."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import InvalidRefundWindowError


@dataclass(frozen=True)
class RefundPolicy:
    """Number of ticks after a purchase during which a refund is accepted."""

    window_ticks: int

    def __post_init__(self) -> None:
        if self.window_ticks < 0:
            raise InvalidRefundWindowError(self.window_ticks)

    def allows(self, elapsed_ticks: int) -> bool:
        return elapsed_ticks <= self.window_ticks
