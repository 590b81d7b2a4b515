"""Keyword-driven flowchart analysis and Mermaid compilation."""

from .analyzer import AnalysisResult, analyze_flowchart_description
from .compiler import (
    Edge,
    FlowchartGraph,
    Node,
    build_graph,
    generate_flowchart,
    render_mermaid,
)
from .quotes import QuoteNormalization, normalize_quotes
from .steps import extract_steps, strip_quotes

__all__ = [
    "AnalysisResult",
    "analyze_flowchart_description",
    "Edge",
    "FlowchartGraph",
    "Node",
    "build_graph",
    "generate_flowchart",
    "render_mermaid",
    "QuoteNormalization",
    "normalize_quotes",
    "extract_steps",
    "strip_quotes",
]
