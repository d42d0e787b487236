"""Port to the remote product catalog.

The catalog owns stock levels.  Stock mutations are plain increments
and decrements with no idempotency or compare-and-set guarantee.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.remote import ProductRecord


class ProductGateway(ABC):

    @abstractmethod
    def get_product(self, product_id: int) -> ProductRecord | None:
        """Return the product, or None if the catalog does not know it.

        Raises RemoteServiceError on transport failure or timeout.
        """

    @abstractmethod
    def reduce_stock(self, product_id: int, quantity: int) -> None:
        """Decrement remote stock; raises StockAdjustmentError on failure."""

    @abstractmethod
    def increase_stock(self, product_id: int, quantity: int) -> None:
        """Increment remote stock; raises StockAdjustmentError on failure."""
