from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv
from langchain.agents import create_agent
from langchain_core.tools import BaseTool
from langchain_openai import ChatOpenAI

from mermaid_flow.tools.flowchart import (
    analyze_flowchart,
    generate_flowchart,
    normalize_quotes,
)
from mermaid_flow.tools.mcp_client import mermaid_mcp


SYSTEM = (
    "You are the Documentation Supervisor. You turn process descriptions into "
    "Mermaid flowcharts.\n"
    "1. Call `analyze_flowchart` first. If it reports missing elements, ask the user "
    "for them before drawing.\n"
    "2. Call `generate_flowchart` with a description written as short sentences: "
    "one step per sentence, decisions phrased with 'if' or 'check', and the "
    "alternative branch phrased with 'otherwise'.\n"
    "3. Use `normalize_quotes` when the user wants quoted text cleaned up for a label.\n"
    "Return the Mermaid code block unchanged."
)

MCP_SYSTEM = (
    "You are the Documentation Supervisor. You turn process descriptions into "
    "Mermaid flowcharts through the `mermaid_mcp` tool.\n"
    "1. Call it with action 'analyze-flowchart' first. If it reports missing elements, "
    "ask the user for them before drawing.\n"
    "2. Call it with action 'generate-flowchart' and a description written as short "
    "sentences: one step per sentence, decisions phrased with 'if' or 'check', and the "
    "alternative branch phrased with 'otherwise'.\n"
    "3. Use action 'normalize-quotes' when the user wants quoted text cleaned up.\n"
    "Always pass args_json as a JSON object with a 'description' string. "
    "Return the Mermaid code block unchanged."
)


def supervisor_tools(use_mcp_server: bool = False) -> List[BaseTool]:
    if use_mcp_server:
        return [mermaid_mcp]
    return [analyze_flowchart, generate_flowchart, normalize_quotes]


def build_documentation_supervisor(
    model: Optional[str] = None,
    temperature: float = 0.2,
    api_key: Optional[str] = None,
    use_mcp_server: bool = False,
):
    """Build an agent that drafts flowcharts with the deterministic flowchart tools.

    With ``use_mcp_server`` the agent reaches the tools through the bundled MCP
    server instead of calling them in-process.

    Invoke with ``{"messages": [{"role": "user", "content": "..."}]}``.
    """
    load_dotenv()
    model_id = model or os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    llm = ChatOpenAI(
        model=model_id,
        temperature=temperature,
        api_key=api_key or os.getenv("OPENAI_API_KEY"),
    )
    system_prompt = MCP_SYSTEM if use_mcp_server else SYSTEM
    return create_agent(llm, tools=supervisor_tools(use_mcp_server), system_prompt=system_prompt)


__all__ = ["build_documentation_supervisor", "supervisor_tools"]
