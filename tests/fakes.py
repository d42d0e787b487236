"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON store and the
HTTP gateways but keep everything in dicts.  The gateways record every
call, in order, in a shared ``calls`` list so tests can assert on the
sequence of remote operations.
"""

from __future__ import annotations

import copy
import json
from dataclasses import replace

import requests

from orderflow.domain.exceptions import RemoteServiceError, StockAdjustmentError
from orderflow.domain.gateway.client_gateway import ClientGateway
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.model.order import Order
from orderflow.domain.model.remote import ClientRecord, ProductRecord
from orderflow.domain.model.value_objects import Money
from orderflow.domain.reconciliation import ReconciliationListener, StockDriftEvent
from orderflow.domain.repository.order_repository import OrderRepository


def make_product(product_id: int, price: str = "5.00", stock: int = 10) -> ProductRecord:
    return ProductRecord(
        id=product_id,
        name=f"Product {product_id}",
        price=Money.of(price),
        stock=stock,
    )


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.saves = 0
        self.deletes = 0

    def list_all(self) -> list[Order]:
        return [copy.deepcopy(self._store[k]) for k in sorted(self._store)]

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def save(self, order: Order) -> Order:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = copy.deepcopy(order)
        self.saves += 1
        return order

    def delete_by_id(self, order_id: int) -> None:
        self._store.pop(order_id, None)
        self.deletes += 1


class FakeClientGateway(ClientGateway):

    def __init__(
        self,
        clients: list[ClientRecord] | None = None,
        calls: list[tuple] | None = None,
    ) -> None:
        self._store = {c.id: c for c in clients or []}
        self.calls = calls if calls is not None else []
        self.unavailable = False

    def get_client(self, client_id: int) -> ClientRecord | None:
        self.calls.append(("get_client", client_id))
        if self.unavailable:
            raise RemoteServiceError("client", client_id)
        return self._store.get(client_id)


class FakeProductGateway(ProductGateway):
    """Catalog double that tracks stock like the real service would.

    ``unavailable`` holds product ids whose lookups fail; ``failing``
    holds ``(operation, product_id)`` pairs whose stock calls fail.
    """

    def __init__(
        self,
        products: list[ProductRecord] | None = None,
        calls: list[tuple] | None = None,
    ) -> None:
        self._store = {p.id: p for p in products or []}
        self.calls = calls if calls is not None else []
        self.unavailable: set[int] = set()
        self.failing: set[tuple[str, int]] = set()

    def stock_of(self, product_id: int) -> int:
        return self._store[product_id].stock

    def get_product(self, product_id: int) -> ProductRecord | None:
        self.calls.append(("get_product", product_id))
        if product_id in self.unavailable:
            raise RemoteServiceError("product", product_id)
        return self._store.get(product_id)

    def reduce_stock(self, product_id: int, quantity: int) -> None:
        self._adjust("reduce", product_id, -quantity, quantity)

    def increase_stock(self, product_id: int, quantity: int) -> None:
        self._adjust("increase", product_id, quantity, quantity)

    def stock_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] in ("reduce_stock", "increase_stock")]

    def _adjust(self, operation: str, product_id: int, delta: int, quantity: int) -> None:
        self.calls.append((f"{operation}_stock", product_id, quantity))
        if (operation, product_id) in self.failing or product_id not in self._store:
            raise StockAdjustmentError(operation, product_id, quantity)
        product = self._store[product_id]
        self._store[product_id] = replace(product, stock=product.stock + delta)


class RecordingReconciliationListener(ReconciliationListener):

    def __init__(self) -> None:
        self.events: list[StockDriftEvent] = []

    def stock_out_of_sync(self, event: StockDriftEvent) -> None:
        self.events.append(event)


def json_response(status: int, body=None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return r


class FakeSession:
    """Stands in for ``requests.Session``; answers every call the same way."""

    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.requests: list[tuple] = []

    def get(self, url, timeout=None):
        self.requests.append(("GET", url, None, timeout))
        return self._answer()

    def post(self, url, params=None, timeout=None):
        self.requests.append(("POST", url, params, timeout))
        return self._answer()

    def _answer(self):
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome
