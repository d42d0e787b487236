"""Application service: Show Order use case (query)."""

from __future__ import annotations

from orderflow.application.dto import OrderDTO
from orderflow.application.enrichment import OrderEnricher
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, enricher: OrderEnricher) -> None:
        self._order_repo = order_repo
        self._enricher = enricher

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._enricher.enrich(order)
