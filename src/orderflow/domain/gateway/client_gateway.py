"""Port to the remote client directory."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.remote import ClientRecord


class ClientGateway(ABC):

    @abstractmethod
    def get_client(self, client_id: int) -> ClientRecord | None:
        """Return the client, or None if the directory does not know it.

        Raises RemoteServiceError when the directory cannot be reached,
        times out or answers with an error.
        """
