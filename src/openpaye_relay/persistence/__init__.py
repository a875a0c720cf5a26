"""Pluggable credential persistence behind the ICredentialStore protocol."""

from __future__ import annotations

from openpaye_relay.persistence.memory_backend import MemoryCredentialStore
from openpaye_relay.persistence.protocols import ICredentialStore


def create_credential_store() -> ICredentialStore:
    """Create the process-wide credential store.

    Only the in-memory backend exists today, so every environment gets it.
    """
    return MemoryCredentialStore()


__all__ = ["ICredentialStore", "MemoryCredentialStore", "create_credential_store"]
