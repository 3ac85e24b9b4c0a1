"""
fonts.py
--------
Optional TrueType fonts for names and text outside the WinAnsi range.

The built-in PDF fonts only cover Western European characters. When
RESUME_PDF_FONT (and optionally RESUME_PDF_BOLD_FONT) point at TTF files,
they are embedded and replace the regular, italic and bold faces of every
template. Monospaced text keeps its built-in face.

Scripts that need glyph shaping (Devanagari, Arabic, ...) are not shaped
by ReportLab; pick a font that covers the characters and expect unjoined
glyphs for those scripts.
"""

import dataclasses
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def register_font(path: str) -> Optional[str]:
    """Register a TTF file under its file stem; returns the font name, or None if it cannot be loaded."""
    name = Path(path).stem
    if name in pdfmetrics.getRegisteredFontNames():
        return name
    try:
        pdfmetrics.registerFont(TTFont(name, path))
    except (OSError, TTFError) as e:
        logger.warning("Could not load font %s (%s); using the built-in fonts", path, e)
        return None
    return name


def with_document_fonts(config, settings):
    """Return `config` with its text faces swapped for the configured TTF fonts, if any."""
    if not settings.font:
        return config
    regular = register_font(settings.font)
    if regular is None:
        return config
    bold = register_font(settings.bold_font) if settings.bold_font else None
    typography = dataclasses.replace(config.typography, regular=regular, italic=regular, bold=bold or regular)
    return dataclasses.replace(config, typography=typography)
