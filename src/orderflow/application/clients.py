"""Client existence check shared by the write use cases."""

from __future__ import annotations

from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.gateway.client_gateway import ClientGateway
from orderflow.domain.model.remote import ClientRecord


def require_client(gateway: ClientGateway, client_id: int) -> ClientRecord:
    client = gateway.get_client(client_id)
    if client is None:
        raise EntityNotFoundError(f"Client #{client_id} not found")
    return client
