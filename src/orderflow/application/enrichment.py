"""Best-effort decoration of stored orders with remote display data.

A failed client or product lookup never fails the read: the matching
field on the DTO is simply left as None.  Each distinct id is looked up
at most once per call.
"""

from __future__ import annotations

import logging

from orderflow.application.dto import OrderDTO
from orderflow.application.mapping import to_order_dto
from orderflow.domain.exceptions import RemoteServiceError
from orderflow.domain.gateway.client_gateway import ClientGateway
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.model.order import Order
from orderflow.domain.model.remote import ClientRecord, ProductRecord

logger = logging.getLogger(__name__)


class OrderEnricher:

    def __init__(
        self,
        client_gateway: ClientGateway,
        product_gateway: ProductGateway,
    ) -> None:
        self._clients = client_gateway
        self._products = product_gateway

    def enrich_all(self, orders: list[Order]) -> list[OrderDTO]:
        clients: dict[int, ClientRecord | None] = {}
        products: dict[int, ProductRecord | None] = {}
        return [self._enrich(order, clients, products) for order in orders]

    def enrich(self, order: Order) -> OrderDTO:
        return self.enrich_all([order])[0]

    # --- Internal helpers -----------------------------------------------------

    def _enrich(
        self,
        order: Order,
        clients: dict[int, ClientRecord | None],
        products: dict[int, ProductRecord | None],
    ) -> OrderDTO:
        if order.client_id not in clients:
            clients[order.client_id] = self._lookup_client(order.client_id)

        for product_id in order.product_ids:
            if product_id not in products:
                products[product_id] = self._lookup_product(product_id)

        found = {pid: p for pid, p in products.items() if p is not None}
        return to_order_dto(order, clients[order.client_id], found)

    def _lookup_client(self, client_id: int) -> ClientRecord | None:
        try:
            client = self._clients.get_client(client_id)
        except RemoteServiceError as exc:
            logger.warning("Client #%s not attached: %s", client_id, exc)
            return None
        if client is None:
            logger.warning("Client #%s not attached: not found", client_id)
        return client

    def _lookup_product(self, product_id: int) -> ProductRecord | None:
        try:
            product = self._products.get_product(product_id)
        except RemoteServiceError as exc:
            logger.warning("Product #%s not attached: %s", product_id, exc)
            return None
        if product is None:
            logger.warning("Product #%s not attached: not found", product_id)
        return product
