"""Facade exposing the order operations to an outer layer.

Each method maps onto one use-case handler; the facade only wires them
to a shared set of ports.
"""

from __future__ import annotations

from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.delete_order import DeleteOrderHandler
from orderflow.application.dto import OrderDTO, OrderPayload
from orderflow.application.enrichment import OrderEnricher
from orderflow.application.list_orders import ListOrdersHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.application.update_order import UpdateOrderHandler
from orderflow.domain.gateway.client_gateway import ClientGateway
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.reconciliation import ReconciliationListener
from orderflow.domain.repository.order_repository import OrderRepository


class OrderWorkflow:

    def __init__(
        self,
        order_repo: OrderRepository,
        client_gateway: ClientGateway,
        product_gateway: ProductGateway,
        listener: ReconciliationListener,
    ) -> None:
        enricher = OrderEnricher(client_gateway, product_gateway)
        self._list = ListOrdersHandler(order_repo, enricher)
        self._show = ShowOrderHandler(order_repo, enricher)
        self._create = CreateOrderHandler(
            order_repo, client_gateway, product_gateway, listener
        )
        self._update = UpdateOrderHandler(
            order_repo, client_gateway, product_gateway, listener
        )
        self._delete = DeleteOrderHandler(order_repo, product_gateway, listener)

    def list_orders(self) -> list[OrderDTO]:
        return self._list.handle()

    def get_order(self, order_id: int) -> OrderDTO:
        return self._show.handle(order_id)

    def create_order(self, payload: OrderPayload) -> OrderDTO:
        return self._create.handle(payload)

    def update_order(self, order_id: int, payload: OrderPayload) -> OrderDTO:
        return self._update.handle(order_id, payload)

    def delete_order(self, order_id: int) -> None:
        self._delete.handle(order_id)
