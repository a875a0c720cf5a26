"""Payroll tools dispatched by the MCP server."""
