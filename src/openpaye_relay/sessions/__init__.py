"""Streaming (SSE) sessions and the registry that tracks them."""

from __future__ import annotations

from openpaye_relay.sessions.registry import SessionRegistry
from openpaye_relay.sessions.transport import SessionState, SseSession

__all__ = ["SessionRegistry", "SessionState", "SseSession"]
