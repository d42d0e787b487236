"""HTTP implementation of ProductGateway backed by ``requests``.

Catalog endpoints:

    GET  /producto/{id}
    POST /producto/{id}/reduce-stock?stock={qty}
    POST /producto/{id}/increase-stock?stock={qty}
"""

from __future__ import annotations

import logging

import requests

from orderflow.domain.exceptions import (
    RemoteServiceError,
    StockAdjustmentError,
    ValidationError,
)
from orderflow.domain.gateway.product_gateway import ProductGateway
from orderflow.domain.model.remote import ProductRecord
from orderflow.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class HttpProductGateway(ProductGateway):

    def __init__(
        self,
        base_url: str,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def get_product(self, product_id: int) -> ProductRecord | None:
        url = f"{self._base_url}/producto/{product_id}"
        try:
            r = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise RemoteServiceError("product", product_id) from exc

        if r.status_code == 404:
            return None
        if not r.ok:
            logger.debug("GET %s answered %s", url, r.status_code)
            raise RemoteServiceError("product", product_id)

        # An empty body on a 2xx answer counts as not found.
        if not r.content:
            return None
        # A null or negative "precio" surfaces as ValidationError from Money.
        try:
            return self._to_record(r.json())
        except (ValueError, KeyError, TypeError, ValidationError) as exc:
            raise RemoteServiceError("product", product_id) from exc

    def reduce_stock(self, product_id: int, quantity: int) -> None:
        self._adjust("reduce", product_id, quantity)

    def increase_stock(self, product_id: int, quantity: int) -> None:
        self._adjust("increase", product_id, quantity)

    # --- Internal helpers -----------------------------------------------------

    def _adjust(self, operation: str, product_id: int, quantity: int) -> None:
        url = f"{self._base_url}/producto/{product_id}/{operation}-stock"
        try:
            r = self._session.post(
                url, params={"stock": quantity}, timeout=self._timeout
            )
            r.raise_for_status()
        except requests.RequestException as exc:
            logger.debug("POST %s failed: %s", url, exc)
            raise StockAdjustmentError(operation, product_id, quantity) from exc

    @staticmethod
    def _to_record(raw: dict | None) -> ProductRecord | None:
        if not raw:
            return None
        price = raw["precio"] if "precio" in raw else raw["price"]
        return ProductRecord(
            id=int(raw["id"]),
            name=raw.get("name") or "",
            price=Money.of(price),
            stock=int(raw.get("stock") or 0),
            code=raw.get("code"),
            description=raw.get("description"),
        )
