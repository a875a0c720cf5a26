"""HTTP front door: liveness, MCP over SSE, credential registration."""
