"""HTTP implementation of ClientGateway backed by ``requests``."""

from __future__ import annotations

import logging

import requests

from orderflow.domain.exceptions import RemoteServiceError
from orderflow.domain.gateway.client_gateway import ClientGateway
from orderflow.domain.model.remote import ClientRecord

logger = logging.getLogger(__name__)


class HttpClientGateway(ClientGateway):

    def __init__(
        self,
        base_url: str,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def get_client(self, client_id: int) -> ClientRecord | None:
        url = f"{self._base_url}/cliente/{client_id}"
        try:
            r = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise RemoteServiceError("client", client_id) from exc

        if r.status_code == 404:
            return None
        if not r.ok:
            logger.debug("GET %s answered %s", url, r.status_code)
            raise RemoteServiceError("client", client_id)

        # An empty body on a 2xx answer counts as not found.
        if not r.content:
            return None
        try:
            return self._to_record(r.json())
        except (ValueError, KeyError, TypeError) as exc:
            raise RemoteServiceError("client", client_id) from exc

    @staticmethod
    def _to_record(raw: dict | None) -> ClientRecord | None:
        if not raw:
            return None
        return ClientRecord(
            id=int(raw["id"]),
            name=raw.get("name") or "",
            document=raw.get("document"),
            email=raw.get("email"),
        )
