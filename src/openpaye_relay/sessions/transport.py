"""Server-sent-events transport for one MCP session.

The session owns two memory streams: client -> server messages posted to
``/messages`` and server -> client messages streamed as SSE ``message``
events. The MCP server runs on the pair yielded by :meth:`SseSession.connect`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from enum import StrEnum
from typing import Any, AsyncIterator, Callable, Optional
from uuid import uuid4

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
from mcp import types
from mcp.shared.message import SessionMessage
from pydantic import ValidationError
from sse_starlette.sse import EventSourceResponse
from starlette.types import Receive, Scope, Send

from openpaye_relay.core.exceptions import InvalidMessageError, SessionClosedError

logger = logging.getLogger(__name__)

INCOMING_BUFFER_SIZE = 16


class SessionState(StrEnum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class SseSession:
    """One open SSE connection, identified by a generated session id."""

    def __init__(
        self, endpoint: str, on_close: Optional[Callable[[str], None]] = None
    ) -> None:
        self.session_id = uuid4().hex
        self.endpoint = endpoint
        self.state = SessionState.OPEN
        self._on_close = on_close

        incoming: tuple[MemoryObjectSendStream[Any], MemoryObjectReceiveStream[Any]] = (
            anyio.create_memory_object_stream(INCOMING_BUFFER_SIZE)
        )
        outgoing: tuple[MemoryObjectSendStream[Any], MemoryObjectReceiveStream[Any]] = (
            anyio.create_memory_object_stream(0)
        )
        self._incoming_writer, self._incoming_reader = incoming
        self._outgoing_writer, self._outgoing_reader = outgoing

    def __repr__(self) -> str:
        return f"SseSession(session_id={self.session_id!r}, state={self.state})"

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    @property
    def server_streams(
        self,
    ) -> tuple[MemoryObjectReceiveStream[Any], MemoryObjectSendStream[Any]]:
        """(read_stream, write_stream) as seen by the MCP server."""
        return self._incoming_reader, self._outgoing_writer

    def endpoint_url(self, root_path: str = "") -> str:
        return f"{root_path}{self.endpoint}?sessionId={self.session_id}"

    @asynccontextmanager
    async def connect(
        self, scope: Scope, receive: Receive, send: Send
    ) -> AsyncIterator[tuple[MemoryObjectReceiveStream[Any], MemoryObjectSendStream[Any]]]:
        """Stream SSE events to the client while the MCP server runs.

        The first event tells the client where to post its messages. The
        session closes when the client disconnects.
        """
        if self.closed:
            raise SessionClosedError(f"Session {self.session_id} is closed")

        sse_writer, sse_reader = anyio.create_memory_object_stream(0)
        endpoint = self.endpoint_url(scope.get("root_path", ""))

        async def pump_events() -> None:
            async with sse_writer, self._outgoing_reader:
                await sse_writer.send({"event": "endpoint", "data": endpoint})
                async for session_message in self._outgoing_reader:
                    await sse_writer.send({
                        "event": "message",
                        "data": session_message.message.model_dump_json(
                            by_alias=True, exclude_none=True,
                        ),
                    })

        async def stream_response() -> None:
            try:
                await EventSourceResponse(
                    content=sse_reader, data_sender_callable=pump_events,
                )(scope, receive, send)
            finally:
                logger.debug("Client disconnected from session %s", self.session_id)
                self.close()

        logger.info("Session %s opened", self.session_id)
        async with anyio.create_task_group() as tg:
            tg.start_soon(stream_response)
            yield self.server_streams

    async def deliver(self, body: bytes | str) -> None:
        """Hand a posted JSON-RPC message to the MCP server."""
        if self.closed:
            raise SessionClosedError(f"Session {self.session_id} is closed")
        try:
            message = types.JSONRPCMessage.model_validate_json(body)
        except ValidationError as exc:
            raise InvalidMessageError(f"Could not parse message: {exc}") from exc
        try:
            await self._incoming_writer.send(SessionMessage(message))
        except (anyio.ClosedResourceError, anyio.BrokenResourceError) as exc:
            raise SessionClosedError(f"Session {self.session_id} is closed") from exc

    def close(self) -> None:
        """Tear the session down. Only the first call has any effect."""
        if self.closed:
            return
        self.state = SessionState.CLOSED
        for stream in (self._incoming_writer, self._outgoing_reader):
            try:
                stream.close()
            except Exception:
                logger.debug("Ignoring error closing stream of session %s",
                             self.session_id, exc_info=True)
        if self._on_close is not None:
            self._on_close(self.session_id)
        logger.info("Session %s closed", self.session_id)
