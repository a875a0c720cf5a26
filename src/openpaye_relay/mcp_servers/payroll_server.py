"""FastMCP server: OpenPaye payroll tools.

Exposes create_employee and create_contract. Argument validation, JSON-RPC
framing and result serialization are handled by the MCP SDK; the handlers
delegate to PayrollToolDispatcher.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from openpaye_relay.models.payroll import ContractInput, EmployeeInput, ToolEnvelope
from openpaye_relay.skills.payroll_tools import PayrollToolDispatcher

TOOL_NAMES = ("create_employee", "create_contract")


def create_payroll_server(
    dispatcher: PayrollToolDispatcher, name: str = "openpaye-mcp"
) -> FastMCP:
    """Build a FastMCP server with the payroll tools bound to ``dispatcher``."""
    server = FastMCP(name)

    @server.tool(
        name="create_employee",
        title="Create Employee",
        description="Create an employee in OpenPaye using the client's stored credentials.",
    )
    async def create_employee(client_id: str, employee: EmployeeInput) -> ToolEnvelope:
        return await dispatcher.create_employee(client_id, employee)

    @server.tool(
        name="create_contract",
        title="Create Contract",
        description="Create a contract for an existing OpenPaye employee.",
    )
    async def create_contract(
        client_id: str, employee_id: str, contract: ContractInput
    ) -> ToolEnvelope:
        return await dispatcher.create_contract(client_id, employee_id, contract)

    return server
