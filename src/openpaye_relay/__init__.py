"""OpenPaye MCP relay: payroll tools exposed over MCP/SSE."""

__version__ = "1.0.0"
