"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its details.  Derived values
(``amount`` per detail, ``total_price`` per order) are computed from the
details, so they can never drift from the prices and quantities they
are built from.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.remote import ProductRecord
from orderflow.domain.model.value_objects import Money, Quantity

PENDING = "PENDING"


@dataclass
class OrderDetail:
    """A single product line of an order.

    ``price`` is a snapshot of the catalog price taken when the order was
    placed or last updated.  It is ``None`` until the detail has been
    priced against a product record.
    """

    product_id: int
    quantity: Quantity
    price: Money | None = None

    @property
    def amount(self) -> Money:
        if self.price is None:
            return Money.zero()
        return self.price * self.quantity.value

    def price_from(self, product: ProductRecord) -> None:
        """Overwrite the price with the product's current catalog price."""
        if product.id != self.product_id:
            raise ValidationError(
                f"Cannot price product #{self.product_id} from product #{product.id}"
            )
        self.price = product.price


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders.  The ``__init__``
    is intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    client_id: int
    number: str | None
    details: list[OrderDetail] = field(default_factory=list)
    status: str = PENDING

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        client_id: int,
        number: str | None,
        details: list[OrderDetail],
    ) -> Order:
        """Build an unsaved PENDING order, enforcing the structural invariants."""
        _check_details(details)
        return Order(
            id=None,
            client_id=client_id,
            number=number,
            details=list(details),
        )

    # --- Mutations ------------------------------------------------------------

    def replace_with(
        self,
        client_id: int,
        number: str | None,
        status: str | None,
        details: list[OrderDetail],
    ) -> None:
        """Overwrite every mutable field.

        Details are replaced wholesale, never merged.  A missing status
        falls back to PENDING; any other value is stored as given.
        """
        _check_details(details)
        self.client_id = client_id
        self.number = number
        self.status = status or PENDING
        self.details = list(details)

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for detail in self.details:
            result = result + detail.amount
        return result

    @property
    def product_ids(self) -> list[int]:
        return [detail.product_id for detail in self.details]


def _check_details(details: list[OrderDetail]) -> None:
    if not details:
        raise ValidationError("Order must contain at least one detail")
