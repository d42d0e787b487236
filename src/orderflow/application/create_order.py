"""Application service: Create Order use case.

Orchestrates the flow between the client directory, the product
catalog and the order store:

1. Check the client exists.
2. Price every detail from the catalog and check its stock.
3. Only then reduce remote stock, one call per detail.
4. Persist the order as PENDING.

Steps 1-2 have no side effects.  If step 3 or 4 fails, whatever stock
was already reduced stays reduced and the reconciliation listener is
told about it.
"""

from __future__ import annotations

import logging

from orderflow.application.clients import require_client
from orderflow.application.dto import OrderDTO, OrderPayload
from orderflow.application.mapping import build_details, to_order_dto
from orderflow.domain.gateway.client_gateway import ClientGateway
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.model.order import Order
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


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        client_gateway: ClientGateway,
        product_gateway: ProductGateway,
        listener: ReconciliationListener,
    ) -> None:
        self._order_repo = order_repo
        self._clients = client_gateway
        self._stock = StockReservationService(product_gateway)
        self._listener = listener

    def handle(self, payload: OrderPayload) -> OrderDTO:
        order = Order.create(
            client_id=payload.client_id,
            number=payload.number,
            details=build_details(payload.details),
        )

        client = require_client(self._clients, order.client_id)
        products = self._stock.price_details(order.details)

        ledger: list[StockAdjustment] = []
        try:
            self._stock.reduce_for(order.details, ledger)
            self._order_repo.save(order)
        except Exception as exc:
            if ledger:
                self._listener.stock_out_of_sync(
                    StockDriftEvent(
                        operation="create",
                        order_id=None,
                        reason=str(exc),
                        applied=tuple(ledger),
                    )
                )
            raise

        logger.info(
            "Order #%s created for client #%s (total %s)",
            order.id, order.client_id, order.total_price,
        )
        return to_order_dto(order, client, products)
