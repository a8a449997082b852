"""Domain port for secret-management services."""

from __future__ import annotations

from typing import Optional, Protocol

from src.domain.entities.secret import Secret


class ISecretStore(Protocol):
    """Interface for retrieving secrets from a remote store."""

    async def get_secret(self, name: str, version: Optional[str] = None) -> Secret:
        """
        Fetch a secret by name.

        Raises:
            SecretRequestError: When the store rejects or cannot serve the request
        """
        ...
