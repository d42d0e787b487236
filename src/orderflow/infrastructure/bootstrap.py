"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import requests

from orderflow.application.order_workflow import OrderWorkflow
from orderflow.infrastructure.audit import LoggingReconciliationListener
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.http.client_gateway import HttpClientGateway
from orderflow.infrastructure.http.product_gateway import HttpProductGateway
from orderflow.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def order_workflow(settings: Settings | None = None) -> OrderWorkflow:
    settings = settings or Settings.from_env()
    session = requests.Session()
    return OrderWorkflow(
        order_repo=order_repository(settings),
        client_gateway=HttpClientGateway(settings.client_url, settings.timeout, session),
        product_gateway=HttpProductGateway(settings.product_url, settings.timeout, session),
        listener=LoggingReconciliationListener(),
    )
