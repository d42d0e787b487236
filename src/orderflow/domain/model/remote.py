"""Read-only snapshots of entities owned by other services.

These are never persisted with an order; they are fetched per request
to validate a write or to decorate a response.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderflow.domain.model.value_objects import Money


@dataclass(frozen=True)
class ClientRecord:
    """A client as reported by the client directory."""

    id: int
    name: str
    document: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ProductRecord:
    """A catalog product with its current price and stock level."""

    id: int
    name: str
    price: Money
    stock: int
    code: str | None = None
    description: str | None = None

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity
