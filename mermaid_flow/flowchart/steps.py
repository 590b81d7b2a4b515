"""Split a process description into ordered step fragments."""

from __future__ import annotations

import re
from typing import List

_STEP_DELIMITERS = re.compile(r"[.,\n]")
_QUOTE_CHARS = re.compile(r"['\"]")
# Whitespace and line terminators trimmed around each step; U+FEFF counts,
# the \x1c-\x1f separators and U+0085 do not.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def ensure_text(description: object) -> str:
    if not isinstance(description, str):
        raise TypeError(
            f"description must be a string, got {type(description).__name__}"
        )
    return description


def extract_steps(description: str) -> List[str]:
    """Return the trimmed, non-empty fragments between `.`, `,` and newlines."""

    text = ensure_text(description)
    fragments = (fragment.strip(_TRIM_CHARS) for fragment in _STEP_DELIMITERS.split(text))
    return [fragment for fragment in fragments if fragment]


def strip_quotes(text: str) -> str:
    return _QUOTE_CHARS.sub("", text)


__all__ = ["ensure_text", "extract_steps", "strip_quotes"]
