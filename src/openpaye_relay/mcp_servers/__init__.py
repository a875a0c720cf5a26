"""MCP servers exposed by the relay."""
