"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Remote client and
product data only ever appears here, attached for a single response.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderDetailSpec:
    """Input: one requested product line (price is never taken from input)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderPayload:
    """Input: an order as submitted for creation or update."""

    client_id: int
    details: list[OrderDetailSpec]
    number: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class ClientDTO:
    id: int
    name: str
    document: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "$5.00"
    stock: int
    code: str | None = None


@dataclass(frozen=True)
class OrderDetailDTO:
    """Output: a single detail as displayed to the user."""

    product_id: int
    quantity: int
    price: str | None
    amount: str
    product: ProductDTO | None = None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user.

    ``client`` and each detail's ``product`` are best-effort decorations
    and are None when the remote lookup did not succeed.
    """

    id: int
    client_id: int
    number: str | None
    status: str
    total_price: str
    details: list[OrderDetailDTO] = field(default_factory=list)
    client: ClientDTO | None = None
