"""Resource services exposed as MCP tools; each function takes the client first."""
