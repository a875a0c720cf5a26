"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from openpaye_relay.core.protocols import ICredentialStore

__all__ = ["ICredentialStore"]
