from __future__ import annotations

import re
from typing import Any, List, Optional

from config.settings import get_settings


_TAG_RE = re.compile(r"<[^>]*>")
_SEPARATOR_RE = re.compile(r"^[ \t]*-{3,}[ \t]*$", re.MULTILINE)


def sanitize_value(value: Any, max_length: Optional[int] = None) -> str:
    """Strip markup and whitespace and cap the length of a stored field."""
    if value is None or value == "":
        return ""
    limit = max_length if max_length is not None else get_settings().max_field_length
    cleaned = _TAG_RE.sub("", str(value)).strip()
    return cleaned[:limit]


def split_messages(text: str) -> List[str]:
    """Split an export of several biodata messages into single messages.

    Messages are separated by a line of three or more dashes; without such a
    line, two or more consecutive blank lines separate messages.
    """
    if not text or not text.strip():
        return []
    if _SEPARATOR_RE.search(text):
        chunks = _SEPARATOR_RE.split(text)
    else:
        chunks = re.split(r"\n[ \t]*\n(?:[ \t]*\n)+", text)
    return [c.strip() for c in chunks if c.strip()]
