"""Documentation tools: flowchart analysis and generation.

These wrap the deterministic keyword compiler in ``mermaid_flow.flowchart`` as
LangChain tools so supervisors can call them directly, without going through
the MCP server.
"""

from __future__ import annotations

import json

from langchain.tools import tool

from mermaid_flow import flowchart as core
from mermaid_flow.mcp_servers.mermaid.formatters import format_analysis, format_flowchart


@tool("analyze_flowchart")
def analyze_flowchart(description: str) -> str:
    """Check a process description for a start, step connectors and decisions.

    - description: free text describing the steps of a process.

    Returns a numbered preview of the detected steps followed by any missing
    elements the description should mention.
    """
    return format_analysis(core.analyze_flowchart_description(description))


@tool("generate_flowchart")
def generate_flowchart(description: str) -> str:
    """Generate Mermaid flowchart code from a process description.

    Steps are split on periods, commas and newlines. Steps mentioning
    'if', 'decide' or 'check' branch Yes/No towards the next step and the
    next step mentioning 'else' or 'otherwise'.
    """
    return format_flowchart(core.generate_flowchart(description))


@tool("normalize_quotes")
def normalize_quotes(description: str) -> str:
    """Remove quote characters from text and wrap it in one pair of double quotes.

    Returns JSON with `convertedDescription` and `replacementCount`.
    """
    return json.dumps(core.normalize_quotes(description).as_dict(), ensure_ascii=False)


__all__ = ["analyze_flowchart", "generate_flowchart", "normalize_quotes"]
