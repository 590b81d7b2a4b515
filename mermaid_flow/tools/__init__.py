"""LangChain tools exposing the flowchart helpers to agents."""

from .flowchart import analyze_flowchart, generate_flowchart, normalize_quotes
from .mcp_client import mermaid_mcp

__all__ = ["analyze_flowchart", "generate_flowchart", "normalize_quotes", "mermaid_mcp"]
