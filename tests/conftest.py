"""Shared fixtures: credential store, fake OpenPaye API, dispatcher, app."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from openpaye_relay.api.app import create_app
from openpaye_relay.core.config import AppSettings
from openpaye_relay.skills.payroll_tools import PayrollToolDispatcher
from tests.fakes import FakeOpenPayeAPI, MemoryCredentialStore


@pytest.fixture
def store():
    return MemoryCredentialStore()


@pytest.fixture
def fake_api():
    return FakeOpenPayeAPI()


@pytest.fixture
def payroll_client(fake_api):
    return fake_api.client()


@pytest.fixture
def dispatcher(store, payroll_client):
    return PayrollToolDispatcher(credentials=store, payroll=payroll_client)


@pytest.fixture
def app(store, payroll_client):
    return create_app(AppSettings(), credentials=store, payroll_client=payroll_client)


@pytest.fixture
def client(app):
    return TestClient(app)
