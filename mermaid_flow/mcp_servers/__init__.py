"""MCP servers bundled with mermaid_flow."""
