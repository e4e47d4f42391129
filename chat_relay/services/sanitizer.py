"""
Best-effort cleanup of free text before it is stored or forwarded.

Not a security boundary: only <script> blocks are removed whole. Any other tag
merely loses its angle brackets, leaving inner text and attribute fragments in
place (e.g. "<b>hi</b>" becomes "bhi/b").
"""

from __future__ import annotations

import re
from typing import Optional

_SCRIPT_BLOCK_RE = re.compile(r"<script.*?>.*?</script>", flags=re.IGNORECASE)
_ANGLE_BRACKETS_RE = re.compile(r"[<>]")


def sanitize(text: Optional[str] = "") -> str:
    """Strip script blocks, then every remaining '<' or '>', then trim."""
    if not text:
        return ""
    text = _SCRIPT_BLOCK_RE.sub("", text)
    text = _ANGLE_BRACKETS_RE.sub("", text)
    return text.strip()
