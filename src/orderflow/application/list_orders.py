"""Application service: List Orders use case (query)."""

from __future__ import annotations

from orderflow.application.dto import OrderDTO
from orderflow.application.enrichment import OrderEnricher
from orderflow.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, enricher: OrderEnricher) -> None:
        self._order_repo = order_repo
        self._enricher = enricher

    def handle(self) -> list[OrderDTO]:
        return self._enricher.enrich_all(self._order_repo.list_all())
