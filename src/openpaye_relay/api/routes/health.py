"""Liveness and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

READY_MESSAGE = "OpenPaye MCP ready"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return READY_MESSAGE


@router.get("/health")
async def health(request: Request) -> dict[str, str | int]:
    return {"status": "healthy", "sessions": len(request.app.state.sessions)}
