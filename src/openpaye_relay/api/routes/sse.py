"""MCP over SSE: stream opening and message posting."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from openpaye_relay.core.exceptions import SessionError, UnknownSessionError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["mcp"])

SESSION_ID_QUERY_PARAM = "sessionId"
SESSION_ID_HEADERS = ("Mcp-Session-Id", "x-session-id")


def resolve_session_id(request: Request) -> str | None:
    """Session id from the query string, else from either session header."""
    session_id = request.query_params.get(SESSION_ID_QUERY_PARAM)
    if session_id:
        return session_id
    for header in SESSION_ID_HEADERS:
        session_id = request.headers.get(header)
        if session_id:
            return session_id
    return None


class SseStreamEndpoint:
    """Raw ASGI endpoint for ``GET /sse``.

    The session writes the streaming response itself, so this is mounted as
    an ASGI app rather than a request/response handler.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        state = scope["app"].state
        session = state.sessions.open(state.settings.server.messages_path)
        lowlevel = state.mcp_server._mcp_server
        try:
            async with session.connect(scope, receive, send) as (read_stream, write_stream):
                await lowlevel.run(
                    read_stream,
                    write_stream,
                    lowlevel.create_initialization_options(),
                )
        finally:
            session.close()


router.add_route("/sse", SseStreamEndpoint(), methods=["GET"], include_in_schema=False)


@router.post("/messages")
async def post_message(request: Request) -> Response:
    """Forward a JSON-RPC message to the session named by the request."""
    session_id = resolve_session_id(request)
    session = request.app.state.sessions.get(session_id)
    if session is None:
        raise UnknownSessionError(session_id)

    body = await request.body()
    try:
        await session.deliver(body)
    except SessionError:
        raise
    except Exception as exc:
        logger.error("Delivering message to session %s failed: %s", session_id, exc,
                     exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return PlainTextResponse("Accepted", status_code=202)
