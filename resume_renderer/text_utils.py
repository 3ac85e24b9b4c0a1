"""
Text helpers shared by the layout strategies.
- entry splitting for bulleted/timeline rendering
- bullet glyph stripping
- the "institution line" heuristic used by the executive template
"""

import re
from typing import List

BULLET_GLYPHS = ("•", "-", "*", "–", "·", "▪", "◆")

# Lines naming an employer or institution get bold treatment.
HEADING_KEYWORDS = ("University", "College", "Company", "Project", "Certificate")

TAG_SPLIT_RE = re.compile(r"[,;\n]")


def split_entries(text: str) -> List[str]:
    """Split a multi-line field into trimmed, non-empty entries."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def strip_bullet(line: str) -> str:
    line = line.strip()
    if line.startswith(BULLET_GLYPHS):
        return line[1:].strip()
    return line


def looks_like_heading_line(line: str) -> bool:
    """True when the line names an institution or employer (case-sensitive substring match)."""
    return any(keyword in line for keyword in HEADING_KEYWORDS)


def split_tags(text: str) -> List[str]:
    """Skills/languages as short chip labels: split on commas, semicolons and newlines."""
    if not text:
        return []
    tags = (strip_bullet(part) for part in TAG_SPLIT_RE.split(text))
    return [tag for tag in tags if tag]
