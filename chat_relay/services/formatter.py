"""
Reply structure enforcer.

Heuristic post-processor that makes plain replies look like the markdown the
front-end expects. It is not a markdown parser: it knows nothing about code
blocks, tables or nesting, and it mis-splits abbreviations and decimals
("e.g. 3.5 apples").
"""

from __future__ import annotations

import re
from typing import List, Optional

RESPONSE_HEADING = "## 📌 Response\n\n"
STRUCTURE_MARKERS = ("##", "- ", "**")

_SENTENCE_END_RE = re.compile(r"[.?!]\s+")


def is_structured(text: str) -> bool:
    return any(marker in text for marker in STRUCTURE_MARKERS)


def split_sentences(text: str) -> List[str]:
    fragments = _SENTENCE_END_RE.split(text)
    return [f.strip() for f in fragments if f.strip()]


def enforce_markdown_structure(text: Optional[str]) -> str:
    """
    Return text unchanged if it already carries a markdown marker; otherwise
    re-emit each sentence fragment as a bullet under a fixed heading.
    """
    if not text:
        return ""
    if is_structured(text):
        return text

    lines = [RESPONSE_HEADING]
    for fragment in split_sentences(text):
        lines.append(f"- {fragment}\n")
    return "".join(lines)
