"""In-memory credential store: dict-backed, process-wide, no persistence."""

from __future__ import annotations

import logging

from openpaye_relay.models.credentials import Credential

logger = logging.getLogger(__name__)


class MemoryCredentialStore:
    """Dict-backed ICredentialStore.

    Placeholder for a real database. Entries never expire and a second
    registration for the same client id silently replaces the first.
    """

    def __init__(self) -> None:
        self._credentials: dict[str, Credential] = {}

    def get(self, client_id: str) -> Credential | None:
        return self._credentials.get(client_id)

    def set(self, client_id: str, dossier_id: str, api_key: str) -> None:
        replaced = client_id in self._credentials
        self._credentials[client_id] = Credential(
            client_id=client_id, dossier_id=dossier_id, api_key=api_key,
        )
        logger.info(
            "Credential %s for client_id=%r (dossier_id=%r)",
            "replaced" if replaced else "registered", client_id, dossier_id,
        )

    def delete(self, client_id: str) -> None:
        self._credentials.pop(client_id, None)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._credentials

    def __len__(self) -> int:
        return len(self._credentials)
