from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_SERVER_NAME = "mermaid-mcp"
DEFAULT_SERVER_VERSION = "1.0.0"
DEFAULT_TOOL_SET = "full"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

TOOL_SETS = ("full", "core")


@dataclass
class ServerSettings:
    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = DEFAULT_SERVER_VERSION
    tool_set: str = DEFAULT_TOOL_SET
    openai_model: str = DEFAULT_OPENAI_MODEL


def _check_tool_set(tool_set: str) -> str:
    normalized = tool_set.strip().lower()
    if normalized not in TOOL_SETS:
        raise ValueError(
            f"Unknown tool set '{tool_set}'. Expected one of: {', '.join(TOOL_SETS)}"
        )
    return normalized


def load_settings(tool_set: Optional[str] = None) -> ServerSettings:
    """Read server settings from the environment (and a `.env` file, if any).

    An explicit ``tool_set`` argument, typically a CLI flag, wins over
    ``MERMAID_MCP_TOOL_SET``.
    """

    load_dotenv()
    resolved_tool_set = tool_set or os.getenv("MERMAID_MCP_TOOL_SET", DEFAULT_TOOL_SET)
    return ServerSettings(
        server_name=os.getenv("MERMAID_MCP_SERVER_NAME", DEFAULT_SERVER_NAME),
        server_version=os.getenv("MERMAID_MCP_SERVER_VERSION", DEFAULT_SERVER_VERSION),
        tool_set=_check_tool_set(resolved_tool_set),
        openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
    )


__all__ = ["ServerSettings", "load_settings", "TOOL_SETS"]
