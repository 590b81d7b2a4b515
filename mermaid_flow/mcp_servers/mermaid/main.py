#!/usr/bin/env python3
import argparse
import asyncio
import sys
from typing import List, Optional

from mcp.server import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from .config import TOOL_SETS, ServerSettings, load_settings
from .server import build_server, tools_for


async def serve(settings: ServerSettings) -> None:
    """Run the Mermaid flowchart MCP server over stdio."""
    tools = tools_for(settings.tool_set)
    app = build_server(settings.server_name, tools)
    print(
        f"[INFO] Starting {settings.server_name} ({settings.tool_set}: "
        f"{', '.join(spec.name for spec in tools)})...",
        file=sys.stderr,
    )
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=settings.server_name,
                server_version=settings.server_version,
                capabilities=app.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def run(settings: ServerSettings) -> None:
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user", file=sys.stderr)
    except Exception as e:
        print(f"[ERROR] Server crashed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Mermaid flowchart MCP server (stdio)")
    parser.add_argument(
        "--tool-set",
        choices=list(TOOL_SETS),
        help="Which tools to expose (defaults to MERMAID_MCP_TOOL_SET or 'full')",
    )
    args = parser.parse_args(argv)
    run(load_settings(tool_set=args.tool_set))


if __name__ == "__main__":
    main()
