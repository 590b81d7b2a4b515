"""Turn plain-language process descriptions into Mermaid flowcharts."""

from .flowchart import (
    AnalysisResult,
    Edge,
    FlowchartGraph,
    Node,
    QuoteNormalization,
    analyze_flowchart_description,
    build_graph,
    extract_steps,
    generate_flowchart,
    normalize_quotes,
    render_mermaid,
)

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "Edge",
    "FlowchartGraph",
    "Node",
    "QuoteNormalization",
    "analyze_flowchart_description",
    "build_graph",
    "extract_steps",
    "generate_flowchart",
    "normalize_quotes",
    "render_mermaid",
]
