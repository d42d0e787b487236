"""Application service: Update Order use case.

The order of operations matters and is kept strict:

1. Check the client exists.
2. Load the stored order.
3. Restore stock for every detail of the *stored* order, whether or
   not the new version still wants it.
4. Validate and price every *new* detail against the restored stock.
5. Replace the order's fields and details, then persist.
6. Reduce stock for every new detail.

Unchanged details therefore make a restore-then-reduce round trip.
Failures after step 3 has started are reported to the reconciliation
listener and re-raised; nothing is undone.
"""

from __future__ import annotations

import logging

from orderflow.application.clients import require_client
from orderflow.application.dto import OrderDTO, OrderPayload
from orderflow.application.mapping import build_details, to_order_dto
from orderflow.domain.exceptions import EntityNotFoundError, ValidationError
from orderflow.domain.gateway.client_gateway import ClientGateway
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


class UpdateOrderHandler:

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

    def handle(self, order_id: int, payload: OrderPayload) -> OrderDTO:
        details = build_details(payload.details)
        if not details:
            raise ValidationError("Order must contain at least one detail")

        client = require_client(self._clients, payload.client_id)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        ledger: list[StockAdjustment] = []
        saved = False
        try:
            self._stock.restore_for(order.details, ledger, verify_products=True)
            products = self._stock.price_details(details)

            order.replace_with(
                client_id=payload.client_id,
                number=payload.number,
                status=payload.status,
                details=details,
            )
            self._order_repo.save(order)
            saved = True

            self._stock.reduce_for(order.details, ledger)
        except Exception as exc:
            if ledger or saved:
                self._listener.stock_out_of_sync(
                    StockDriftEvent(
                        operation="update",
                        order_id=order_id,
                        reason=str(exc),
                        applied=tuple(ledger),
                        order_saved=saved,
                    )
                )
            raise

        logger.info(
            "Order #%s updated (status %s, total %s)",
            order.id, order.status, order.total_price,
        )
        return to_order_dto(order, client, products)
