"""
Rich-text cleanup for localization strings.

Descriptions arrive with HTML-like markup, literal '\\n' escape sequences
and uneven whitespace. These helpers turn them into plain display lines.
"""

import re
from typing import List, Optional

HTML_TAG_RE = re.compile(r"<.*?>", re.DOTALL)
EXTRA_WHITESPACE_RE = re.compile(r"\s{2,}")
LINE_BREAK_RE = re.compile(r"(?:\\n|<br>)+")
ESCAPED_NEWLINE = "\\n"


def strip_html_tags(text: str) -> str:
    """Remove every <...> tag (non-greedy)."""
    return HTML_TAG_RE.sub("", text)


def strip_extra_whitespace(text: Optional[str]) -> Optional[str]:
    """Collapse runs of two or more whitespace characters and trim. None passes through."""
    if text is None:
        return None
    return EXTRA_WHITESPACE_RE.sub(" ", text).strip()


def format_description(text: str) -> List[str]:
    """Split text into display lines.

    Splits on runs of literal '\\n' sequences or <br> tags, then strips
    markup and extra whitespace from each line.
    """
    return [
        strip_extra_whitespace(strip_html_tags(segment)) or ""
        for segment in LINE_BREAK_RE.split(text)
    ]
