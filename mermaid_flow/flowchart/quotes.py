"""Quote normalization for text that will be embedded in diagram labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .steps import ensure_text, strip_quotes

WRAPPER = '"'


@dataclass(frozen=True)
class QuoteNormalization:
    converted_description: str
    replacement_count: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "convertedDescription": self.converted_description,
            "replacementCount": self.replacement_count,
        }


def _unwrap(text: str) -> str:
    if len(text) >= 2 and text.startswith(WRAPPER) and text.endswith(WRAPPER):
        return text[1:-1]
    return text


def normalize_quotes(description: str) -> QuoteNormalization:
    """Strip inner quotes and wrap the text in a single pair of double quotes.

    An existing outer pair of double quotes counts as the wrapper rather than
    as content, so normalizing an already normalized string reports zero
    replacements and returns it unchanged.
    """

    inner = _unwrap(ensure_text(description))
    cleaned = strip_quotes(inner)
    return QuoteNormalization(
        converted_description=f"{WRAPPER}{cleaned}{WRAPPER}",
        replacement_count=len(inner) - len(cleaned),
    )


__all__ = ["QuoteNormalization", "normalize_quotes"]
