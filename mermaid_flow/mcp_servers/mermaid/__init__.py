"""Mermaid flowchart MCP server."""

from .server import FULL_TOOLS, CORE_TOOLS, ToolDispatcher, ToolSpec, build_server

__all__ = ["FULL_TOOLS", "CORE_TOOLS", "ToolDispatcher", "ToolSpec", "build_server"]
