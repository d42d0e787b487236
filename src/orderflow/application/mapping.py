"""Conversions between DTOs and the Order aggregate."""

from __future__ import annotations

from orderflow.application.dto import (
    ClientDTO,
    OrderDetailDTO,
    OrderDetailSpec,
    OrderDTO,
    ProductDTO,
)
from orderflow.domain.model.order import Order, OrderDetail
from orderflow.domain.model.remote import ClientRecord, ProductRecord
from orderflow.domain.model.value_objects import Quantity


def build_details(specs: list[OrderDetailSpec]) -> list[OrderDetail]:
    return [
        OrderDetail(product_id=spec.product_id, quantity=Quantity(spec.quantity))
        for spec in specs
    ]


def to_order_dto(
    order: Order,
    client: ClientRecord | None,
    products: dict[int, ProductRecord],
) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        client_id=order.client_id,
        number=order.number,
        status=order.status,
        total_price=str(order.total_price),
        details=[
            OrderDetailDTO(
                product_id=detail.product_id,
                quantity=detail.quantity.value,
                price=str(detail.price) if detail.price is not None else None,
                amount=str(detail.amount),
                product=_product_dto(products.get(detail.product_id)),
            )
            for detail in order.details
        ],
        client=_client_dto(client),
    )


def _client_dto(client: ClientRecord | None) -> ClientDTO | None:
    if client is None:
        return None
    return ClientDTO(
        id=client.id,
        name=client.name,
        document=client.document,
        email=client.email,
    )


def _product_dto(product: ProductRecord | None) -> ProductDTO | None:
    if product is None:
        return None
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        stock=product.stock,
        code=product.code,
    )
