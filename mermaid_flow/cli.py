"""Command line entry point for the Mermaid flowchart tools."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable, List, Optional

from mermaid_flow.flowchart import (
    analyze_flowchart_description,
    generate_flowchart,
    normalize_quotes,
)

BANNER = """
┌───────────────────────────────────────────┐
│           Mermaid MCP Server              │
│                                           │
│  A Mermaid flowchart generator for agents │
└───────────────────────────────────────────┘
"""


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def _read_description(args: argparse.Namespace) -> str:
    if args.description is None or args.description == "-":
        return sys.stdin.read()
    return args.description


def _handle_analyze(args: argparse.Namespace) -> None:
    analysis = analyze_flowchart_description(_read_description(args))

    if args.json:
        print(json.dumps(analysis.as_dict(), indent=2, ensure_ascii=False))
        return

    print(analysis.preview)
    if analysis.is_complete:
        print("Description looks complete.")
    else:
        print("Missing:")
        _print_lines(f"- {info}" for info in analysis.missing_info)


def _handle_generate(args: argparse.Namespace) -> None:
    sys.stdout.write(generate_flowchart(_read_description(args)))


def _handle_quotes(args: argparse.Namespace) -> None:
    result = normalize_quotes(_read_description(args))

    if args.json:
        print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
        return

    print(result.converted_description)
    print(f"Removed {result.replacement_count} quote character(s)", file=sys.stderr)


def _handle_serve(args: argparse.Namespace) -> None:
    # Imported lazily so the local subcommands work without the MCP runtime.
    from mermaid_flow.mcp_servers.mermaid.config import load_settings
    from mermaid_flow.mcp_servers.mermaid.main import run

    print(BANNER, file=sys.stderr)
    run(load_settings(tool_set=args.tool_set))


def _add_description(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "description",
        nargs="?",
        help="Process description (read from stdin when omitted or '-')",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze and draw process descriptions as Mermaid flowcharts")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Check a description for a start, connectors and decisions"
    )
    _add_description(analyze_parser)
    analyze_parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    analyze_parser.set_defaults(func=_handle_analyze)

    generate_parser = subparsers.add_parser(
        "generate", help="Print Mermaid flowchart code for a description"
    )
    _add_description(generate_parser)
    generate_parser.set_defaults(func=_handle_generate)

    quotes_parser = subparsers.add_parser(
        "quotes", help="Strip quote characters and wrap the text in double quotes"
    )
    _add_description(quotes_parser)
    quotes_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    quotes_parser.set_defaults(func=_handle_quotes)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server over stdio")
    serve_parser.add_argument(
        "--tool-set",
        choices=["full", "core"],
        help="Which tools to expose (defaults to MERMAID_MCP_TOOL_SET or 'full')",
    )
    serve_parser.set_defaults(func=_handle_serve)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
