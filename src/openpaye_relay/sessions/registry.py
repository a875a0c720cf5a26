"""Process-wide registry of open SSE sessions."""

from __future__ import annotations

import logging
from typing import Iterator

from openpaye_relay.sessions.transport import SseSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Dict-backed ISessionRegistry.

    Entries are added by :meth:`open` and removed by the session's own
    teardown. Sessions whose close event never fires are never evicted.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, SseSession] = {}

    def open(self, endpoint: str) -> SseSession:
        session = SseSession(endpoint, on_close=self.remove)
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str | None) -> SseSession | None:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def close_all(self) -> None:
        for session in list(self._sessions.values()):
            session.close()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sessions))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
