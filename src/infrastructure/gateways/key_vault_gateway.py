"""
Infrastructure Gateway - Azure Key Vault Implementation

This module reads secrets from Azure Key Vault through its REST API,
authenticating as a service principal with the OAuth2 client-credentials
flow.
"""

import time
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import httpx
import structlog

from src.domain.entities.errors import SecretRequestError
from src.domain.entities.secret import Secret
from src.domain.ports.secret_store import ISecretStore

logger = structlog.get_logger(__name__)

KEY_VAULT_SCOPE = "https://vault.azure.net/.default"
DEFAULT_AUTHORITY_HOST = "https://login.microsoftonline.com"
DEFAULT_API_VERSION = "7.4"

# Refresh tokens this many seconds before they expire.
TOKEN_REFRESH_MARGIN_SECONDS = 60.0


class KeyVaultSecretGateway(ISecretStore):
    """Secret store backed by the Azure Key Vault REST API."""

    def __init__(
        self,
        vault_url: str,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        *,
        authority_host: str = DEFAULT_AUTHORITY_HOST,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the Key Vault gateway.

        Args:
            vault_url: Vault base URL (e.g., "https://myvault.vault.azure.net")
            tenant_id: Azure AD tenant of the service principal
            client_id: Application (client) ID of the service principal
            client_secret: Client secret of the service principal
            authority_host: Azure AD authority used to issue tokens
            api_version: Key Vault REST api-version
            timeout: Request timeout in seconds
            clock: Monotonic clock used for token expiry
        """
        self.vault_url = (vault_url or "").rstrip("/")
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret
        self.authority_host = authority_host.rstrip("/")
        self.api_version = api_version
        self.timeout = timeout
        self._clock = clock
        self._access_token: Optional[str] = None
        self._token_expires_at = 0.0

    @property
    def is_configured(self) -> bool:
        return bool(
            self.vault_url and self.tenant_id and self.client_id and self.client_secret
        )

    async def get_secret(self, name: str, version: Optional[str] = None) -> Secret:
        """Fetch the current (or a specific) version of a secret."""

        if not self.is_configured:
            raise SecretRequestError("Key Vault connection is not configured")

        path = quote(name, safe="")
        if version:
            path = f"{path}/{quote(version, safe='')}"
        url = f"{self.vault_url}/secrets/{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                token = await self._get_access_token(client)
                response = await client.get(
                    url,
                    params={"api-version": self.api_version},
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code == 401:
                self._access_token = None
            message = self._error_message(e.response)
            logger.error(
                "Key Vault HTTP error",
                status_code=status_code,
                error=message,
                secret_name=name,
            )
            raise SecretRequestError(
                f"Key Vault HTTP error {status_code}: {message}",
                status_code=status_code,
                details={"secret_name": name},
            ) from e

        except httpx.RequestError as e:
            logger.error("Key Vault request error", error=str(e), secret_name=name)
            raise SecretRequestError(
                f"Key Vault request failed: {str(e)}",
                details={"secret_name": name},
            ) from e

        return self._parse_secret(name, payload)

    async def _get_access_token(self, client: httpx.AsyncClient) -> str:
        now = self._clock()
        if self._access_token and now < self._token_expires_at:
            return self._access_token

        token_url = f"{self.authority_host}/{self.tenant_id}/oauth2/v2.0/token"
        response = await client.post(
            token_url,
            data={
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "scope": KEY_VAULT_SCOPE,
            },
        )
        response.raise_for_status()
        payload = response.json()

        self._access_token = payload["access_token"]
        expires_in = float(payload.get("expires_in", 0))
        lifetime = max(0.0, expires_in - TOKEN_REFRESH_MARGIN_SECONDS)
        self._token_expires_at = now + lifetime

        logger.debug("Key Vault access token acquired", expires_in=expires_in)
        return self._access_token

    def _parse_secret(self, name: str, payload: Dict[str, Any]) -> Secret:
        secret_id = payload.get("id") or ""
        # ids look like https://{vault}/secrets/{name}/{version}
        parts = secret_id.rstrip("/").split("/")
        version = parts[-1] if len(parts) >= 2 and parts[-2] == name else None

        attributes = payload.get("attributes") or {}
        return Secret(
            name=name,
            value=payload.get("value"),
            version=version,
            content_type=payload.get("contentType"),
            enabled=bool(attributes.get("enabled", True)),
            tags=dict(payload.get("tags") or {}),
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(body, dict) and body.get("error_description"):
            return str(body["error_description"])
        return response.text
