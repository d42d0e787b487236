"""Domain-level exceptions.

All business rule violations and remote failures are expressed as
subclasses of DomainException so the CLI layer can catch them uniformly
and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """A product does not have enough stock for the requested quantity."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product #{product_id} "
            f"(need {requested}, have {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class RemoteServiceError(DomainException):
    """A remote service call failed, timed out or answered with an error.

    The message names the service and the entity id only; transport
    details stay on the chained cause.
    """

    def __init__(self, service: str, entity_id: int, message: str | None = None) -> None:
        super().__init__(
            message or f"{service} service unavailable for #{entity_id}"
        )
        self.service = service
        self.entity_id = entity_id


class StockAdjustmentError(RemoteServiceError):
    """A remote stock increase/reduction did not succeed."""

    def __init__(self, operation: str, product_id: int, quantity: int) -> None:
        super().__init__(
            "product",
            product_id,
            f"Could not {operation} stock of product #{product_id} by {quantity}",
        )
        self.operation = operation
        self.quantity = quantity
