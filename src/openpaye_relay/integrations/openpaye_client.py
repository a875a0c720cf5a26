"""OpenPaye REST client backed by httpx.AsyncClient."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from openpaye_relay.core.exceptions import UpstreamHTTPError
from openpaye_relay.models.credentials import Credential

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openpaye.co/v1"


class OpenPayeClient:
    """Production IPayrollClient.

    One request per call: no retries, no idempotency key. Every path is
    scoped by the credential's dossier id and authenticated with its key.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url, timeout=httpx.Timeout(timeout),
        )
        self._owns_client = client is None

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _post(self, credential: Credential, path: str, payload: dict[str, Any]) -> Any:
        response = await self._client.post(
            path,
            json=payload,
            headers={"Authorization": credential.bearer},
        )
        if not response.is_success:
            logger.warning(
                "OpenPaye POST %s -> %s for client_id=%r",
                path, response.status_code, credential.client_id,
            )
            raise UpstreamHTTPError(response.status_code, response.text)
        return response.json()

    async def create_employee(self, credential: Credential, payload: dict[str, Any]) -> Any:
        """POST /companies/{dossier}/employees and return the parsed body."""
        return await self._post(
            credential, f"/companies/{credential.dossier_id}/employees", payload,
        )

    async def create_contract(
        self, credential: Credential, employee_id: str, payload: dict[str, Any]
    ) -> Any:
        """POST /companies/{dossier}/employees/{employee}/contracts."""
        return await self._post(
            credential,
            f"/companies/{credential.dossier_id}/employees/{employee_id}/contracts",
            payload,
        )
