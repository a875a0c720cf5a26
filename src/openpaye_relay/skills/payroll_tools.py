"""Payroll tool handlers: credential lookup, one outbound call, envelope.

Every handler returns a ToolEnvelope. Missing credentials, upstream non-2xx
answers and transport failures are folded into ``ok=False`` envelopes so a
failing call never tears down the MCP session it arrived on.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from openpaye_relay.core.exceptions import CredentialNotFoundError, UpstreamHTTPError
from openpaye_relay.core.protocols import ICredentialStore, IPayrollClient
from openpaye_relay.models.credentials import Credential
from openpaye_relay.models.payroll import ContractInput, EmployeeInput, ToolEnvelope

logger = logging.getLogger(__name__)


class PayrollToolDispatcher:
    """Resolves a client's credential and forwards tool calls to OpenPaye."""

    def __init__(self, *, credentials: ICredentialStore, payroll: IPayrollClient) -> None:
        self._credentials = credentials
        self._payroll = payroll

    def _credential_for(self, client_id: str) -> Credential:
        credential = self._credentials.get(client_id)
        if credential is None:
            raise CredentialNotFoundError(client_id)
        return credential

    async def _dispatch(
        self,
        tool: str,
        client_id: str,
        call: Callable[[Credential], Awaitable[Any]],
    ) -> ToolEnvelope:
        try:
            credential = self._credential_for(client_id)
        except CredentialNotFoundError as exc:
            logger.info("%s refused: no credential for client_id=%r", tool, client_id)
            return ToolEnvelope.failure(str(exc))

        try:
            data = await call(credential)
        except UpstreamHTTPError as exc:
            return ToolEnvelope.failure(str(exc))
        except Exception as exc:
            logger.warning("%s failed for client_id=%r: %r", tool, client_id, exc)
            return ToolEnvelope.failure(str(exc))

        logger.info("%s succeeded for client_id=%r", tool, client_id)
        return ToolEnvelope.success(data)

    async def create_employee(self, client_id: str, employee: EmployeeInput) -> ToolEnvelope:
        """Create an employee in the client's OpenPaye dossier."""
        payload = employee.to_payload()
        return await self._dispatch(
            "create_employee",
            client_id,
            lambda credential: self._payroll.create_employee(credential, payload),
        )

    async def create_contract(
        self, client_id: str, employee_id: str, contract: ContractInput
    ) -> ToolEnvelope:
        """Create a contract for an existing employee."""
        payload = contract.to_payload()
        return await self._dispatch(
            "create_contract",
            client_id,
            lambda credential: self._payroll.create_contract(credential, employee_id, payload),
        )
