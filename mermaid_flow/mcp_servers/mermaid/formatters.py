from __future__ import annotations

from ...flowchart import AnalysisResult, QuoteNormalization

COMPLETE_MESSAGE = (
    "✅ Your flowchart description appears to be complete! "
    "You can now generate a Mermaid flowchart."
)
INCOMPLETE_MESSAGE = "⚠️ Your flowchart description might be missing some information:\n"
INCOMPLETE_HINT = "\nConsider adding more details for a better flowchart."


def format_analysis(analysis: AnalysisResult) -> str:
    output = analysis.preview + "\n\n"
    if analysis.is_complete:
        output += COMPLETE_MESSAGE
        return output

    output += INCOMPLETE_MESSAGE
    for info in analysis.missing_info:
        output += f"- {info}\n"
    output += INCOMPLETE_HINT
    return output


def format_flowchart(mermaid_code: str) -> str:
    output = "Here's your Mermaid flowchart code:\n\n"
    output += f"```mermaid\n{mermaid_code}\n```\n\n"
    output += "You can use this code in any Mermaid-compatible tool or editor."
    return output


def format_quote_normalization(result: QuoteNormalization) -> str:
    output = f"Converted description:\n{result.converted_description}\n\n"
    output += f"🔁 Quote characters removed: {result.replacement_count}"
    return output


__all__ = ["format_analysis", "format_flowchart", "format_quote_normalization"]
