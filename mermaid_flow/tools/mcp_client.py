"""MCP client tool for the bundled Mermaid flowchart server.

Launches ``mermaid_flow.mcp_servers.mermaid.main`` as a stdio subprocess and
exposes a LangChain tool that any agent can call.

Usage (by an agent tool call):
    mermaid_mcp(action="generate-flowchart", args_json='{"description": "Start. Then stop."}')
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable

from langchain.tools import tool

SERVER_MODULE = "mermaid_flow.mcp_servers.mermaid.main"


def _repo_root() -> Path:
    # mermaid_flow/tools/mcp_client.py -> repo root
    return Path(__file__).resolve().parents[2]


def _iter_text(items: Iterable[Any]) -> Iterable[str]:
    for item in items:
        if getattr(item, "type", None) == "text":
            text = getattr(item, "text", None)
            if text:
                yield str(text)


async def _call_mcp_tool(action: str, arguments: Dict[str, Any]) -> str:
    from mcp.client.session import ClientSession
    from mcp.client.stdio import StdioServerParameters, stdio_client

    command = os.environ.get("PYTHON") or sys.executable
    params = StdioServerParameters(
        command=command,
        args=["-m", SERVER_MODULE, "--tool-set", "full"],
        cwd=str(_repo_root()),
    )
    async with stdio_client(params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            result = await session.call_tool(action, arguments)
            return "\n".join(_iter_text(result.content)) or "(no text response)"


async def _direct_call(action: str, arguments: Dict[str, Any]) -> str:
    # Lazy import to keep tool import light
    from mermaid_flow.mcp_servers.mermaid.server import FULL_TOOLS, ToolDispatcher

    contents = await ToolDispatcher(FULL_TOOLS).call_tool(action, arguments)
    return "\n".join(_iter_text(contents)) or "(no text response)"


@tool("mermaid_mcp")
def mermaid_mcp(action: str, args_json: str) -> str:
    """Call a Mermaid flowchart MCP action.

    Parameters:
    - action: One of 'analyze-flowchart', 'generate-flowchart', 'normalize-quotes'.
    - args_json: JSON string of the action's arguments, e.g.
      '{"description": "Start the order. Then check stock. Otherwise cancel."}'.

    Returns the server's text response.
    """

    try:
        arguments = json.loads(args_json) if args_json else {}
    except json.JSONDecodeError as e:
        return f"Invalid JSON for args_json: {e}"

    # Try MCP first; if it fails, answer in-process with the same tool list.
    try:
        return asyncio.run(_call_mcp_tool(action, arguments))
    except Exception as e:
        print(f"[ERROR] MCP call failed, using in-process tools: {e}", file=sys.stderr)
        fallback = asyncio.run(_direct_call(action, arguments))
        return f"[fallback: MCP failed with {type(e).__name__}]\n\n{fallback}"


__all__ = ["mermaid_mcp"]
