"""OpenPaye relay exception hierarchy."""

from __future__ import annotations


class RelayError(Exception):
    """Base exception for all relay errors."""


class CredentialNotFoundError(RelayError):
    """No OpenPaye credential registered for a client."""

    def __init__(self, client_id: str) -> None:
        self.client_id = client_id
        super().__init__(
            f'No access found for "{client_id}". Visit /connect to register your API key.'
        )


class UpstreamHTTPError(RelayError):
    """OpenPaye answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"OpenPaye {status_code}: {body}")


class SessionError(RelayError):
    """Error on the streaming session layer."""


class UnknownSessionError(SessionError):
    """Message posted for a session id that is not registered."""

    def __init__(self, session_id: str | None) -> None:
        self.session_id = session_id
        super().__init__(f"Unknown sessionId: {session_id!r}")


class SessionClosedError(SessionError):
    """Message delivered to a session that has already been torn down."""


class InvalidMessageError(SessionError):
    """Posted body is not a valid JSON-RPC message."""
