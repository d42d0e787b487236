"""Integration tests for the UpdateOrder use case."""

import pytest

from orderflow.application.dto import OrderDetailSpec, OrderPayload
from orderflow.application.update_order import UpdateOrderHandler
from orderflow.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    StockAdjustmentError,
    ValidationError,
)
from orderflow.domain.model.order import Order, OrderDetail
from orderflow.domain.model.remote import ClientRecord
from orderflow.domain.model.value_objects import Money, Quantity
from orderflow.domain.reconciliation import StockAdjustment
from tests.fakes import (
    FakeClientGateway,
    FakeOrderRepository,
    FakeProductGateway,
    RecordingReconciliationListener,
    make_product,
)


def _setup():
    """Order #1 holds 2 x product 10; the catalog already reflects that."""
    calls: list[tuple] = []
    clients = FakeClientGateway(
        [ClientRecord(id=1, name="Ada"), ClientRecord(id=2, name="Grace")], calls
    )
    products = FakeProductGateway(
        [make_product(10, price="5.00", stock=3), make_product(11, price="1.50", stock=4)],
        calls,
    )
    order_repo = FakeOrderRepository()
    order_repo.save(
        Order(
            id=None,
            client_id=1,
            number="ORD-1",
            details=[OrderDetail(10, Quantity(2), Money.of("4.00"))],
        )
    )
    listener = RecordingReconciliationListener()
    handler = UpdateOrderHandler(order_repo, clients, products, listener)
    return handler, order_repo, products, listener


def _payload(*items: tuple[int, int], client_id: int = 1, status: str | None = None):
    return OrderPayload(
        client_id=client_id,
        number="ORD-1b",
        status=status,
        details=[OrderDetailSpec(pid, qty) for pid, qty in items],
    )


class TestUpdateOrderSequence:

    def test_restores_old_items_before_validating_new_ones(self):
        handler, _, products, _ = _setup()
        handler.handle(1, _payload((11, 1)))
        assert products.calls == [
            ("get_client", 1),
            ("get_product", 10),
            ("increase_stock", 10, 2),
            ("get_product", 11),
            ("reduce_stock", 11, 1),
        ]

    def test_unchanged_item_round_trips_through_remote_stock(self):
        handler, _, products, _ = _setup()
        handler.handle(1, _payload((10, 2)))
        assert products.stock_calls() == [
            ("increase_stock", 10, 2),
            ("reduce_stock", 10, 2),
        ]
        assert products.stock_of(10) == 3

    def test_validation_sees_restored_stock(self):
        # 3 left in the catalog + 2 held by the order = 5 available.
        handler, _, products, _ = _setup()
        dto = handler.handle(1, _payload((10, 5)))
        assert dto.details[0].quantity == 5
        assert products.stock_of(10) == 0


class TestUpdateOrderFields:

    def test_details_replaced_and_repriced(self):
        handler, order_repo, _, _ = _setup()
        dto = handler.handle(1, _payload((11, 2), client_id=2))

        saved = order_repo.get_by_id(1)
        assert saved.product_ids == [11]
        assert saved.client_id == 2
        assert saved.number == "ORD-1b"
        assert saved.total_price == Money.of("3.00")
        assert dto.total_price == "$3.00"
        assert dto.client.name == "Grace"

    def test_price_refreshed_from_catalog(self):
        handler, order_repo, _, _ = _setup()
        handler.handle(1, _payload((10, 2)))
        assert order_repo.get_by_id(1).details[0].price == Money.of("5.00")

    def test_status_passes_through(self):
        handler, order_repo, _, _ = _setup()
        handler.handle(1, _payload((10, 1), status="SHIPPED"))
        assert order_repo.get_by_id(1).status == "SHIPPED"

    def test_missing_status_defaults_to_pending(self):
        handler, order_repo, _, _ = _setup()
        handler.handle(1, _payload((10, 1), status="SHIPPED"))
        handler.handle(1, _payload((10, 1)))
        assert order_repo.get_by_id(1).status == "PENDING"


class TestUpdateOrderValidation:

    def test_unknown_client_has_no_side_effects(self):
        handler, order_repo, products, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Client #9 not found"):
            handler.handle(1, _payload((10, 1), client_id=9))
        assert products.stock_calls() == []
        assert order_repo.saves == 1  # the seed

    def test_unknown_order_rejected(self):
        handler, _, products, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #42 not found"):
            handler.handle(42, _payload((10, 1)))
        assert products.stock_calls() == []

    def test_empty_details_rejected_before_remote_calls(self):
        handler, _, products, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(1, _payload())
        assert products.calls == []


class TestUpdateOrderPartialFailure:

    def test_conflict_after_restore_keeps_restored_stock_and_reports(self):
        handler, order_repo, products, listener = _setup()
        with pytest.raises(InsufficientStockError):
            handler.handle(1, _payload((11, 10)))

        assert products.stock_of(10) == 5  # restored, not re-reduced
        stored = order_repo.get_by_id(1)
        assert stored.product_ids == [10]
        assert order_repo.saves == 1

        assert len(listener.events) == 1
        event = listener.events[0]
        assert event.operation == "update"
        assert event.order_id == 1
        assert event.applied == (StockAdjustment(10, 2),)
        assert event.order_saved is False

    def test_vanished_product_in_stored_order_rejected(self):
        handler, order_repo, products, listener = _setup()
        order_repo.save(
            Order(
                id=1,
                client_id=1,
                number=None,
                details=[
                    OrderDetail(10, Quantity(1), Money.of("5.00")),
                    OrderDetail(77, Quantity(1), Money.of("5.00")),
                ],
            )
        )
        with pytest.raises(EntityNotFoundError, match="Product #77"):
            handler.handle(1, _payload((10, 1)))
        assert listener.events[0].applied == (StockAdjustment(10, 1),)

    def test_reduction_failure_after_save_is_reported(self):
        handler, order_repo, products, listener = _setup()
        products.failing.add(("reduce", 11))

        with pytest.raises(StockAdjustmentError):
            handler.handle(1, _payload((10, 1), (11, 1)))

        assert order_repo.get_by_id(1).product_ids == [10, 11]
        event = listener.events[0]
        assert event.order_saved is True
        assert event.applied == (
            StockAdjustment(10, 2),
            StockAdjustment(10, -1),
        )
