"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from orderflow.domain.model.order import Order, OrderDetail
from orderflow.domain.model.value_objects import Money, Quantity
from orderflow.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in sorted(self._load_raw(), key=lambda o: o["id"])]

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> Order:
        orders = self._load_raw()

        if order.id is None:
            order.id = max((o["id"] for o in orders), default=0) + 1

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        return order

    def delete_by_id(self, order_id: int) -> None:
        orders = [raw for raw in self._load_raw() if raw["id"] != order_id]
        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "client_id": order.client_id,
            "number": order.number,
            "status": order.status,
            "total_price": str(order.total_price.amount),
            "details": [
                {
                    "product_id": detail.product_id,
                    "quantity": detail.quantity.value,
                    "price": (
                        str(detail.price.amount) if detail.price is not None else None
                    ),
                    "amount": str(detail.amount.amount),
                }
                for detail in order.details
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        # "total_price" and "amount" are derived and recomputed on load.
        details = [
            OrderDetail(
                product_id=d["product_id"],
                quantity=Quantity(d["quantity"]),
                price=Money(Decimal(d["price"])) if d.get("price") is not None else None,
            )
            for d in raw["details"]
        ]
        return Order(
            id=raw["id"],
            client_id=raw["client_id"],
            number=raw.get("number"),
            details=details,
            status=raw["status"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
