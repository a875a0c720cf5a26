"""Tests for credential, tool input and envelope models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from openpaye_relay.models import ContractInput, Credential, EmployeeInput, ToolEnvelope


class TestEmployeeInput:
    def test_payload_omits_unset_optionals(self):
        employee = EmployeeInput(firstname="Ada", lastname="Lovelace")
        assert employee.to_payload() == {"firstname": "Ada", "lastname": "Lovelace"}

    def test_payload_keeps_provided_optionals(self):
        employee = EmployeeInput(
            firstname="Ada", lastname="Lovelace", email="ada@example.com", start_date="2025-01-06",
        )
        assert employee.to_payload()["email"] == "ada@example.com"
        assert employee.to_payload()["start_date"] == "2025-01-06"

    def test_unknown_fields_are_dropped(self):
        employee = EmployeeInput.model_validate(
            {"firstname": "Ada", "lastname": "Lovelace", "salary": 1}
        )
        assert "salary" not in employee.to_payload()

    def test_lastname_required(self):
        with pytest.raises(ValidationError):
            EmployeeInput(firstname="Ada")


class TestContractInput:
    def test_start_date_required(self):
        with pytest.raises(ValidationError):
            ContractInput(position="Engineer")

    def test_payload(self):
        contract = ContractInput(start_date="2025-02-01", position="Engineer")
        assert contract.to_payload() == {"start_date": "2025-02-01", "position": "Engineer"}


class TestToolEnvelope:
    def test_success_carries_data(self):
        envelope = ToolEnvelope.success({"id": "emp_1"})
        assert envelope.ok is True
        assert envelope.data == {"id": "emp_1"}
        assert envelope.error is None

    def test_failure_carries_error(self):
        envelope = ToolEnvelope.failure("OpenPaye 500: boom")
        assert envelope.ok is False
        assert envelope.data is None
        assert envelope.error == "OpenPaye 500: boom"

    def test_success_serializes_without_error_key(self):
        envelope = ToolEnvelope.success({"id": "emp_1"})
        assert envelope.model_dump() == {"ok": True, "data": {"id": "emp_1"}}
        assert json.loads(envelope.model_dump_json()) == {"ok": True, "data": {"id": "emp_1"}}

    def test_failure_serializes_without_data_key(self):
        envelope = ToolEnvelope.failure("OpenPaye 422: invalid email")
        assert envelope.model_dump() == {"ok": False, "error": "OpenPaye 422: invalid email"}

    def test_success_keeps_null_payload(self):
        assert ToolEnvelope.success(None).model_dump() == {"ok": True, "data": None}


class TestCredential:
    def test_bearer_header(self):
        credential = Credential(client_id="acme", dossier_id="4000", api_key="sk_x")
        assert credential.bearer == "Bearer sk_x"

    def test_repr_hides_api_key(self):
        credential = Credential(client_id="acme", dossier_id="4000", api_key="sk_x")
        assert "sk_x" not in repr(credential)
