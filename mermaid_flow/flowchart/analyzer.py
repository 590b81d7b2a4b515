"""Completeness heuristics for flowchart descriptions.

Each check is a case-insensitive substring test against the raw description.
The checks are independent, so a description can be missing any combination
of a starting point, connectors between steps and decision points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .steps import ensure_text, extract_steps, strip_quotes

START_WORDS: Tuple[str, ...] = ("start", "begin", "first")
CONNECTION_WORDS: Tuple[str, ...] = (
    "then",
    "next",
    "after",
    "followed by",
    "goes to",
    "leads to",
    "connects to",
    "->",
)
DECISION_WORDS: Tuple[str, ...] = (
    "if",
    "else",
    "otherwise",
    "when",
    "case",
    "condition",
    "decision",
)

MISSING_START = "Starting point of the flowchart"
MISSING_CONNECTIONS = (
    "Connections between steps (use words like 'then', 'next', 'after', etc.)"
)
# Advisory: plenty of flowcharts never branch.
MISSING_DECISIONS = "Decision points (if any are needed in this flowchart)"

PREVIEW_HEADER = "Flow preview:\n"


@dataclass
class AnalysisResult:
    is_complete: bool
    missing_info: List[str] = field(default_factory=list)
    preview: str = PREVIEW_HEADER

    def as_dict(self) -> Dict[str, object]:
        return {
            "isComplete": self.is_complete,
            "missingInfo": list(self.missing_info),
            "preview": self.preview,
        }


def _mentions_any(text: str, words: Tuple[str, ...]) -> bool:
    return any(word in text for word in words)


def build_preview(steps: List[str]) -> str:
    preview = PREVIEW_HEADER
    for index, step in enumerate(steps, start=1):
        preview += f"{index}. {strip_quotes(step)}\n"
    return preview


def analyze_flowchart_description(description: str) -> AnalysisResult:
    """Report which structural elements a description appears to be missing."""

    text = ensure_text(description)
    lowered = text.lower()

    missing: List[str] = []
    if not _mentions_any(lowered, START_WORDS):
        missing.append(MISSING_START)
    if not _mentions_any(lowered, CONNECTION_WORDS):
        missing.append(MISSING_CONNECTIONS)
    if not _mentions_any(lowered, DECISION_WORDS):
        missing.append(MISSING_DECISIONS)

    return AnalysisResult(
        is_complete=not missing,
        missing_info=missing,
        preview=build_preview(extract_steps(text)),
    )


__all__ = [
    "AnalysisResult",
    "analyze_flowchart_description",
    "build_preview",
    "START_WORDS",
    "CONNECTION_WORDS",
    "DECISION_WORDS",
    "MISSING_START",
    "MISSING_CONNECTIONS",
    "MISSING_DECISIONS",
]
