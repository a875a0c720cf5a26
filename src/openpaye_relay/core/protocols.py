"""Protocol interfaces for the relay's injected collaborators.

Structural typing only: the in-memory backends, the httpx-backed OpenPaye
client and the test fakes all satisfy these without inheriting from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from openpaye_relay.models.credentials import Credential
    from openpaye_relay.sessions.transport import SseSession


# ---------------------------------------------------------------------------
# Persistence: Credential Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ICredentialStore(Protocol):
    """Client id -> OpenPaye credential mapping. Last write wins."""

    def get(self, client_id: str) -> Credential | None: ...

    def set(self, client_id: str, dossier_id: str, api_key: str) -> None: ...

    def delete(self, client_id: str) -> None: ...


# ---------------------------------------------------------------------------
# Sessions: Session Registry
# ---------------------------------------------------------------------------

@runtime_checkable
class ISessionRegistry(Protocol):
    """Session id -> open SSE transport mapping."""

    def open(self, endpoint: str) -> SseSession: ...

    def get(self, session_id: str) -> SseSession | None: ...

    def remove(self, session_id: str) -> None: ...

    def close_all(self) -> None: ...

    def __len__(self) -> int: ...


# ---------------------------------------------------------------------------
# Integrations: OpenPaye API
# ---------------------------------------------------------------------------

@runtime_checkable
class IPayrollClient(Protocol):
    """Outbound payroll API calls scoped by a client's credential."""

    async def create_employee(
        self, credential: Credential, payload: dict[str, Any]
    ) -> Any: ...

    async def create_contract(
        self, credential: Credential, employee_id: str, payload: dict[str, Any]
    ) -> Any: ...

    async def aclose(self) -> None: ...
