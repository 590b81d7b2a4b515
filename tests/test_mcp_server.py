import asyncio

import pytest
from mcp.server import Server

from mermaid_flow.mcp_servers.mermaid import server as mermaid_server
from mermaid_flow.mcp_servers.mermaid.server import (
    CORE_TOOLS,
    FULL_TOOLS,
    ToolDispatcher,
    ToolSpec,
    build_server,
    tools_for,
)


def _call(dispatcher, name, arguments):
    contents = asyncio.run(dispatcher.call_tool(name, arguments))
    assert len(contents) == 1
    assert contents[0].type == "text"
    return contents[0].text


def test_tool_sets():
    assert [spec.name for spec in FULL_TOOLS] == [
        "analyze-flowchart",
        "generate-flowchart",
        "normalize-quotes",
    ]
    assert [spec.name for spec in CORE_TOOLS] == ["analyze-flowchart", "generate-flowchart"]
    assert tools_for("core") is CORE_TOOLS


def test_unknown_tool_set():
    with pytest.raises(ValueError):
        tools_for("everything")


def test_list_tools_declares_description_schema():
    tools = ToolDispatcher(CORE_TOOLS).list_tools()

    assert [tool.name for tool in tools] == ["analyze-flowchart", "generate-flowchart"]
    for tool in tools:
        assert tool.inputSchema["required"] == ["description"]
        assert tool.inputSchema["properties"]["description"]["type"] == "string"


def test_duplicate_tool_names_are_rejected():
    with pytest.raises(ValueError):
        ToolDispatcher([FULL_TOOLS[0], FULL_TOOLS[0]])


def test_analyze_incomplete_response():
    text = _call(ToolDispatcher(FULL_TOOLS), "analyze-flowchart", {"description": "Start then process"})

    assert text.startswith("Flow preview:\n1. Start then process\n\n\n")
    assert "⚠️ Your flowchart description might be missing some information:" in text
    assert "- Decision points (if any are needed in this flowchart)\n" in text
    assert text.endswith("Consider adding more details for a better flowchart.")


def test_analyze_complete_response():
    text = _call(
        ToolDispatcher(FULL_TOOLS),
        "analyze-flowchart",
        {"description": "First, then if valid proceed else stop"},
    )

    assert "✅ Your flowchart description appears to be complete!" in text


def test_generate_response_wraps_mermaid_block():
    text = _call(ToolDispatcher(FULL_TOOLS), "generate-flowchart", {"description": "Start. Then next step."})

    assert "```mermaid\nflowchart TD\n" in text
    assert "    step1 --> step2\n" in text
    assert text.endswith("You can use this code in any Mermaid-compatible tool or editor.")


def test_generate_empty_description():
    text = _call(ToolDispatcher(FULL_TOOLS), "generate-flowchart", {"description": ""})

    assert "```mermaid\nflowchart TD\n\n```" in text


def test_normalize_quotes_response():
    text = _call(ToolDispatcher(FULL_TOOLS), "normalize-quotes", {"description": 'He said "hi"'})

    assert '"He said hi"' in text
    assert "Quote characters removed: 2" in text


def test_core_tool_set_does_not_expose_quote_tool():
    text = _call(ToolDispatcher(CORE_TOOLS), "normalize-quotes", {"description": "x"})

    assert "Unknown tool: normalize-quotes" in text


def test_missing_description_is_reported_as_text():
    text = _call(ToolDispatcher(FULL_TOOLS), "analyze-flowchart", {})

    assert text.startswith("❌ **Invalid Request**")
    assert "description" in text


def test_none_arguments_are_treated_as_empty():
    text = _call(ToolDispatcher(FULL_TOOLS), "generate-flowchart", None)

    assert "Missing required argument: description" in text


def test_non_string_description_is_reported_as_text():
    text = _call(ToolDispatcher(FULL_TOOLS), "generate-flowchart", {"description": 7})

    assert "must be a string" in text


def test_generate_failure_is_reported_not_raised(monkeypatch):
    def broken(description):
        raise RuntimeError("boom")

    monkeypatch.setattr(mermaid_server, "generate_flowchart", broken)
    text = _call(ToolDispatcher(FULL_TOOLS), "generate-flowchart", {"description": "Start"})

    assert text == "Error generating flowchart: boom"


def test_unexpected_failure_is_reported_not_raised():
    def explode(arguments):
        raise KeyError("lost")

    spec = ToolSpec(name="explode", description="", input_schema={"type": "object"}, handler=explode)
    text = _call(ToolDispatcher([spec]), "explode", {})

    assert text.startswith("❌ **Unexpected Error**")
    assert "Type: KeyError" in text


def test_build_server_returns_mcp_server():
    app = build_server("mermaid-mcp", CORE_TOOLS)

    assert isinstance(app, Server)
    assert app.name == "mermaid-mcp"
