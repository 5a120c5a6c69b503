from __future__ import annotations

import re

_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


def normalize_text(text: str | None) -> str:
    """Drop carriage returns, squeeze spaces/tabs and keep at most one blank line."""
    value = (text or "").replace("\r", "")
    value = _HORIZONTAL_WS.sub(" ", value)
    value = _EXTRA_BLANK_LINES.sub("\n\n", value)
    return value.strip()
