"""Application service: Delete Order use case.

Stock reserved by the order is restored first.  The order is removed
only when every restoration went through; otherwise it stays in the
store as the record of what still needs reconciling.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.reconciliation import (
    ReconciliationListener,
    StockAdjustment,
    StockDriftEvent,
)
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_gateway: ProductGateway,
        listener: ReconciliationListener,
    ) -> None:
        self._order_repo = order_repo
        self._stock = StockReservationService(product_gateway)
        self._listener = listener

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        ledger: list[StockAdjustment] = []
        try:
            self._stock.restore_for(order.details, ledger)
        except Exception as exc:
            if ledger:
                self._listener.stock_out_of_sync(
                    StockDriftEvent(
                        operation="delete",
                        order_id=order_id,
                        reason=str(exc),
                        applied=tuple(ledger),
                    )
                )
            raise

        self._order_repo.delete_by_id(order_id)
        logger.info("Order #%s deleted", order_id)
