"""Domain service: Stock Reservation against the remote catalog.

Stock lives in the catalog service, so "reserving" means issuing
remote decrements and "releasing" means remote increments.  The service
keeps a two-phase shape:

  Phase 1: look up, check and price every detail
           without touching remote state.
  Phase 2: issue the stock mutations, in detail order.

Every mutation that succeeds is appended to the caller's ledger so a
failure half-way through can be reported for reconciliation.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import EntityNotFoundError, InsufficientStockError
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.model.order import OrderDetail
from orderflow.domain.model.remote import ProductRecord
from orderflow.domain.reconciliation import StockAdjustment

logger = logging.getLogger(__name__)


class StockReservationService:

    def __init__(self, product_gateway: ProductGateway) -> None:
        self._products = product_gateway

    def require_product(self, product_id: int) -> ProductRecord:
        product = self._products.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def price_details(self, details: list[OrderDetail]) -> dict[int, ProductRecord]:
        """Validate and price every detail, in input order.

        Overwrites each detail's price with the catalog price.  Returns
        the product records keyed by id for display purposes.  Raises
        before any remote mutation when a product is missing or short.
        """
        products: dict[int, ProductRecord] = {}
        for detail in details:
            product = self.require_product(detail.product_id)
            qty = detail.quantity.value
            if not product.has_stock_for(qty):
                raise InsufficientStockError(product.id, qty, product.stock)
            detail.price_from(product)
            products[product.id] = product
        return products

    def reduce_for(
        self,
        details: list[OrderDetail],
        ledger: list[StockAdjustment],
    ) -> None:
        """Decrement remote stock once per detail."""
        for detail in details:
            qty = detail.quantity.value
            self._products.reduce_stock(detail.product_id, qty)
            ledger.append(StockAdjustment(detail.product_id, -qty))
            logger.info("Stock reduced for product #%s by %s", detail.product_id, qty)

    def restore_for(
        self,
        details: list[OrderDetail],
        ledger: list[StockAdjustment],
        verify_products: bool = False,
    ) -> None:
        """Increment remote stock once per detail.

        With ``verify_products`` each product is looked up first and a
        missing product aborts the restoration with EntityNotFoundError.
        """
        for detail in details:
            if verify_products:
                self.require_product(detail.product_id)
            qty = detail.quantity.value
            self._products.increase_stock(detail.product_id, qty)
            ledger.append(StockAdjustment(detail.product_id, qty))
            logger.info("Stock restored for product #%s by %s", detail.product_id, qty)
