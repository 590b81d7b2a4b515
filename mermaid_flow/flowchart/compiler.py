"""Compile a process description into a Mermaid flowchart.

Compilation happens in two passes. ``build_graph`` turns the extracted steps
into immutable ``Node`` and ``Edge`` records, and ``render_mermaid`` prints a
graph as ``flowchart TD`` source. Keeping the passes apart lets callers (and
tests) inspect which connections exist without parsing Mermaid text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .steps import extract_steps, strip_quotes

FLOWCHART_HEADER = "flowchart TD"
INDENT = "    "

DECISION_WORDS: Tuple[str, ...] = ("if", "decide", "check")
ELSE_WORDS: Tuple[str, ...] = ("else", "otherwise")

YES = "Yes"
NO = "No"


@dataclass(frozen=True)
class Node:
    id: str
    label: str


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    label: Optional[str] = None


@dataclass(frozen=True)
class FlowchartGraph:
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]


def node_id(position: int) -> str:
    """Identifier for the node at 1-based ``position``."""
    return f"step{position}"


def is_decision_node(node: Node) -> bool:
    label = node.label.lower()
    return any(word in label for word in DECISION_WORDS)


def is_else_node(node: Node) -> bool:
    label = node.label.lower()
    return any(word in label for word in ELSE_WORDS)


def _find_else(nodes: Sequence[Node], start: int) -> Optional[Node]:
    # Unbounded forward scan: one else node may answer several decisions.
    for candidate in nodes[start:]:
        if is_else_node(candidate):
            return candidate
    return None


def build_nodes(steps: Sequence[str]) -> Tuple[Node, ...]:
    return tuple(
        Node(id=node_id(position), label=strip_quotes(text))
        for position, text in enumerate(steps, start=1)
    )


def build_edges(nodes: Sequence[Node]) -> Tuple[Edge, ...]:
    """Connect nodes in order, splitting decisions into Yes/No branches.

    A decision node is followed by a ``Yes`` edge to the next node and a
    ``No`` edge to the first later else node. When no else node exists the
    decision gets a plain edge like any other node.
    """

    edges: List[Edge] = []
    for index in range(len(nodes) - 1):
        current = nodes[index]
        following = nodes[index + 1]

        if is_decision_node(current):
            alternative = _find_else(nodes, index + 1)
            if alternative is not None:
                edges.append(Edge(current.id, following.id, YES))
                edges.append(Edge(current.id, alternative.id, NO))
                continue

        edges.append(Edge(current.id, following.id))

    return tuple(edges)


def build_graph(description: str) -> FlowchartGraph:
    nodes = build_nodes(extract_steps(description))
    return FlowchartGraph(nodes=nodes, edges=build_edges(nodes))


def render_node(node: Node) -> str:
    return f'{INDENT}{node.id}["{node.label}"]'


def render_edge(edge: Edge) -> str:
    if edge.label:
        return f"{INDENT}{edge.source} -->|{edge.label}| {edge.target}"
    return f"{INDENT}{edge.source} --> {edge.target}"


def render_mermaid(graph: FlowchartGraph) -> str:
    """Serialize ``graph`` as Mermaid source, one newline-terminated line each."""

    lines = [FLOWCHART_HEADER]
    lines.extend(render_node(node) for node in graph.nodes)
    lines.extend(render_edge(edge) for edge in graph.edges)
    return "".join(f"{line}\n" for line in lines)


def generate_flowchart(description: str) -> str:
    """Return Mermaid ``flowchart TD`` source for a free-text description."""

    return render_mermaid(build_graph(description))


__all__ = [
    "Node",
    "Edge",
    "FlowchartGraph",
    "FLOWCHART_HEADER",
    "build_graph",
    "build_nodes",
    "build_edges",
    "render_mermaid",
    "generate_flowchart",
    "is_decision_node",
    "is_else_node",
    "node_id",
]
