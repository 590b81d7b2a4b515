#!/usr/bin/env python3
import sys
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from mcp.server import Server
from mcp.types import TextContent, Tool

from ...flowchart import (
    analyze_flowchart_description,
    generate_flowchart,
    normalize_quotes,
)
from .formatters import format_analysis, format_flowchart, format_quote_normalization


class ToolArgumentError(ValueError):
    """Raised when a tool call is missing arguments or has the wrong types."""


ToolHandler = Callable[[Dict[str, Any]], str]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: ToolHandler
    # Prefix for handler failures; None reports them as unexpected errors.
    failure_message: Optional[str] = None

    def to_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


# ============================================================================
# Tool Handlers
# ============================================================================

def _description_schema(purpose: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "description": {
                "type": "string",
                "description": f"The text description of the flowchart to {purpose}",
            }
        },
        "required": ["description"],
    }


def _description_argument(arguments: Dict[str, Any]) -> str:
    if "description" not in arguments:
        raise ToolArgumentError("Missing required argument: description")
    description = arguments["description"]
    if not isinstance(description, str):
        raise ToolArgumentError(
            f"Argument 'description' must be a string, got {type(description).__name__}"
        )
    return description


def handle_analyze(arguments: Dict[str, Any]) -> str:
    description = _description_argument(arguments)
    return format_analysis(analyze_flowchart_description(description))


def handle_generate(arguments: Dict[str, Any]) -> str:
    description = _description_argument(arguments)
    return format_flowchart(generate_flowchart(description))


def handle_normalize_quotes(arguments: Dict[str, Any]) -> str:
    description = _description_argument(arguments)
    return format_quote_normalization(normalize_quotes(description))


ANALYZE_TOOL = ToolSpec(
    name="analyze-flowchart",
    description="Analyze a flowchart description for completeness and provide a preview",
    input_schema=_description_schema("analyze"),
    handler=handle_analyze,
)

GENERATE_TOOL = ToolSpec(
    name="generate-flowchart",
    description="Generate a Mermaid flowchart from a text description",
    input_schema=_description_schema("generate"),
    handler=handle_generate,
    failure_message="Error generating flowchart",
)

NORMALIZE_QUOTES_TOOL = ToolSpec(
    name="normalize-quotes",
    description=(
        "Strip quote characters from a description and wrap it in a single pair "
        "of double quotes. Reports how many quote characters were removed."
    ),
    input_schema=_description_schema("normalize"),
    handler=handle_normalize_quotes,
)

FULL_TOOLS: Sequence[ToolSpec] = (ANALYZE_TOOL, GENERATE_TOOL, NORMALIZE_QUOTES_TOOL)
CORE_TOOLS: Sequence[ToolSpec] = (ANALYZE_TOOL, GENERATE_TOOL)

TOOL_SETS: Dict[str, Sequence[ToolSpec]] = {"full": FULL_TOOLS, "core": CORE_TOOLS}


# ============================================================================
# Dispatcher
# ============================================================================

class ToolDispatcher:
    """Route MCP tool calls to the handlers of an explicit tool list."""

    def __init__(self, tools: Sequence[ToolSpec]) -> None:
        self._tools: Dict[str, ToolSpec] = {}
        for spec in tools:
            if spec.name in self._tools:
                raise ValueError(f"Duplicate tool name: {spec.name}")
            self._tools[spec.name] = spec

    @property
    def tool_names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[Tool]:
        return [spec.to_tool() for spec in self._tools.values()]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Run a tool and always answer with text, even when it fails."""

        spec = self._tools.get(name)
        try:
            if spec is None:
                raise ValueError(f"Unknown tool: {name}")
            print(f"[DEBUG] Calling tool: {name}", file=sys.stderr)
            text = spec.handler(arguments or {})
            return [TextContent(type="text", text=text)]

        except ValueError as e:
            return [TextContent(type="text", text=f"❌ **Invalid Request**\n\n{str(e)}")]

        except Exception as e:
            print(f"[ERROR] {name} failed: {type(e).__name__}: {str(e)}", file=sys.stderr)
            traceback.print_exc(file=sys.stderr)
            if spec is not None and spec.failure_message:
                return [TextContent(type="text", text=f"{spec.failure_message}: {str(e)}")]
            error_msg = "❌ **Unexpected Error**\n\n"
            error_msg += f"Type: {type(e).__name__}\n"
            error_msg += f"Message: {str(e)}\n"
            return [TextContent(type="text", text=error_msg)]


# ============================================================================
# Server Setup
# ============================================================================

def tools_for(tool_set: str) -> Sequence[ToolSpec]:
    try:
        return TOOL_SETS[tool_set]
    except KeyError:
        raise ValueError(f"Unknown tool set: {tool_set}") from None


def build_server(server_name: str, tools: Sequence[ToolSpec]) -> Server:
    """Create an MCP server exposing exactly ``tools``."""

    dispatcher = ToolDispatcher(tools)
    app = Server(server_name)

    @app.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return dispatcher.list_tools()

    @app.call_tool()
    async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return await dispatcher.call_tool(name, arguments)

    return app


__all__ = [
    "ToolArgumentError",
    "ToolSpec",
    "ToolDispatcher",
    "FULL_TOOLS",
    "CORE_TOOLS",
    "TOOL_SETS",
    "tools_for",
    "build_server",
]
