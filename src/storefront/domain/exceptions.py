"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied input violates a precondition."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthorizationError(DomainException):
    """The caller is not allowed to perform the operation."""


class StateConflictError(DomainException):
    """The operation is not valid in the caller's current purchase state."""


# --- Validation ---------------------------------------------------------------


class EmptyNameError(ValidationError):

    def __init__(self) -> None:
        super().__init__("You have to enter a name!")


class ZeroQuantityError(ValidationError):

    def __init__(self) -> None:
        super().__init__("Quantity can't be 0!")


class InvalidQuantityError(ValidationError):

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity can't be negative, got {quantity}")


class InvalidRefundWindowError(ValidationError):

    def __init__(self, window_ticks: int) -> None:
        self.window_ticks = window_ticks
        super().__init__(f"Refund window can't be negative, got {window_ticks}")


class InvalidOwnerError(ValidationError):

    def __init__(self, owner: str) -> None:
        self.owner = owner
        super().__init__(f"Invalid owner: {owner!r}")


# --- Lookup -------------------------------------------------------------------


class ProductNotFoundError(EntityNotFoundError):
    """Raised for an id that was never assigned or a name with no match."""

    def __init__(self, key: int | str) -> None:
        self.key = key
        super().__init__("This product does not exist!")


# --- Access -------------------------------------------------------------------


class UnauthorizedError(AuthorizationError):
    """An owner-only operation was invoked by someone else."""

    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__(f"Unauthorized account: {caller}")


# --- Purchase state -----------------------------------------------------------


class AlreadyPurchasedError(StateConflictError):

    def __init__(self, product_id: int, buyer: str) -> None:
        self.product_id = product_id
        self.buyer = buyer
        super().__init__("You cannot buy the same product more than once!")


class NotPurchasedOrAlreadyRefundedError(StateConflictError):

    def __init__(self, product_id: int, buyer: str) -> None:
        self.product_id = product_id
        self.buyer = buyer
        super().__init__(
            "You've already returned your product or didn't even bought it."
        )


class RefundWindowExpiredError(StateConflictError):

    def __init__(self, product_id: int, elapsed_ticks: int, window_ticks: int) -> None:
        self.product_id = product_id
        self.elapsed_ticks = elapsed_ticks
        self.window_ticks = window_ticks
        super().__init__("Sorry, your request for refund has been denied.")
