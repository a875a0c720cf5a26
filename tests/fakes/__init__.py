"""Shared test doubles: memory backends and a recording OpenPaye API."""

from __future__ import annotations

from typing import Any

import httpx

from openpaye_relay.integrations.openpaye_client import OpenPayeClient
from openpaye_relay.persistence.memory_backend import MemoryCredentialStore

OPENPAYE_TEST_URL = "https://openpaye.test/v1"


class FakeOpenPayeAPI:
    """OpenPaye double on httpx.MockTransport. Records every request it sees."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = 201
        self._json: Any = {"id": "emp_1"}
        self._text: str | None = None
        self._error: Exception | None = None

    def respond(self, status_code: int, *, json: Any = None, text: str | None = None) -> None:
        self._status_code = status_code
        self._json = json
        self._text = text
        self._error = None

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._text is not None:
            return httpx.Response(self._status_code, text=self._text)
        return httpx.Response(self._status_code, json=self._json)

    def client(self) -> OpenPayeClient:
        http = httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler), base_url=OPENPAYE_TEST_URL,
        )
        return OpenPayeClient(base_url=OPENPAYE_TEST_URL, client=http)


__all__ = ["FakeOpenPayeAPI", "MemoryCredentialStore", "OPENPAYE_TEST_URL"]
