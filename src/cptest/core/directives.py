"""Parser for the in-source ``time-limit`` directive."""
from __future__ import annotations

import re
from pathlib import Path

from .models import DEFAULT_TIME_LIMIT_MS


def extract_time_limit(source_text: str, comment_marker: str) -> int:
    """Return the first ``<marker> time-limit: <ms>`` value, or the default.

    Only whole lines match: optional indentation, the comment marker, the
    ``time-limit`` keyword, a colon and an integer number of milliseconds.
    """

    pattern = re.compile(r"\s*" + re.escape(comment_marker) + r"\s*time-limit\s*:\s*([0-9]+)\s*")
    for line in source_text.splitlines():
        match = pattern.fullmatch(line)
        if match:
            return int(match.group(1))
    return DEFAULT_TIME_LIMIT_MS


def read_time_limit(path: Path, comment_marker: str) -> int:
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return extract_time_limit(text, comment_marker)
