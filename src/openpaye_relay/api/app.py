"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from openpaye_relay import __version__
from openpaye_relay.api.routes import connect, health, sse
from openpaye_relay.core.config import AppSettings
from openpaye_relay.core.exceptions import SessionError
from openpaye_relay.core.protocols import ICredentialStore, IPayrollClient, ISessionRegistry
from openpaye_relay.integrations.openpaye_client import OpenPayeClient
from openpaye_relay.mcp_servers.payroll_server import create_payroll_server
from openpaye_relay.persistence import create_credential_store
from openpaye_relay.sessions import SessionRegistry
from openpaye_relay.skills.payroll_tools import PayrollToolDispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Tear down open sessions and the outbound HTTP client on shutdown."""
    yield
    app.state.sessions.close_all()
    await app.state.payroll_client.aclose()


async def session_error_handler(request: Request, exc: SessionError) -> PlainTextResponse:
    logger.info("Rejected message: %s", exc)
    return PlainTextResponse(str(exc), status_code=400)


def create_app(
    settings: AppSettings | None = None,
    *,
    credentials: ICredentialStore | None = None,
    payroll_client: IPayrollClient | None = None,
    sessions: ISessionRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators are built from ``settings`` unless injected.
    """
    if settings is None:
        settings = AppSettings()
    if credentials is None:
        credentials = create_credential_store()
    if payroll_client is None:
        payroll_client = OpenPayeClient(
            base_url=settings.openpaye.base_url, timeout=settings.openpaye.timeout,
        )
    if sessions is None:
        sessions = SessionRegistry()

    dispatcher = PayrollToolDispatcher(credentials=credentials, payroll=payroll_client)

    app = FastAPI(
        title="OpenPaye MCP Relay",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.credentials = credentials
    app.state.payroll_client = payroll_client
    app.state.dispatcher = dispatcher
    app.state.sessions = sessions
    app.state.mcp_server = create_payroll_server(dispatcher, name=settings.server_name)

    app.add_exception_handler(SessionError, session_error_handler)
    app.include_router(health.router)
    app.include_router(sse.router)
    app.include_router(connect.router)
    return app
