"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Details are owned by their order and are stored and
deleted together with it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order, in id order."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order, assigning an id to new ones."""

    @abstractmethod
    def delete_by_id(self, order_id: int) -> None:
        """Remove an order and its details."""
