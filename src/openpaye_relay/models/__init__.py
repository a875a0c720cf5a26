"""Pydantic models for credentials, tool inputs and tool results."""

from __future__ import annotations

from openpaye_relay.models.credentials import Credential
from openpaye_relay.models.payroll import ContractInput, EmployeeInput, ToolEnvelope

__all__ = ["ContractInput", "Credential", "EmployeeInput", "ToolEnvelope"]
