# tests/test_fonts.py
import logging
from pathlib import Path

import pytest
import reportlab

from resume_renderer import parser
from resume_renderer.config import Settings
from resume_renderer.layout_engine.fonts import with_document_fonts
from resume_renderer.layout_engine.templates import CLASSIC

FONT_DIR = Path(reportlab.__file__).parent / "fonts"
VERA = FONT_DIR / "Vera.ttf"
VERA_BOLD = FONT_DIR / "VeraBd.ttf"

needs_vera = pytest.mark.skipif(not VERA.exists(), reason="reportlab was installed without its sample fonts")


def test_built_in_fonts_by_default():
    assert with_document_fonts(CLASSIC, Settings()) is CLASSIC


@needs_vera
def test_configured_fonts_replace_text_faces():
    config = with_document_fonts(CLASSIC, Settings(font=str(VERA), bold_font=str(VERA_BOLD)))
    assert (config.typography.regular, config.typography.italic, config.typography.bold) == ("Vera", "Vera", "VeraBd")
    assert config.typography.mono == CLASSIC.typography.mono
    assert config.sections == CLASSIC.sections


@needs_vera
def test_footer_separator_is_extracted_with_an_embedded_font(monkeypatch, render_template):
    monkeypatch.setenv("RESUME_PDF_FONT", str(VERA))
    monkeypatch.setenv("RESUME_PDF_BOLD_FONT", str(VERA_BOLD))
    _, pdf = render_template("elegant", {"skills": "Python"})
    text = parser.extract_pdf_text(pdf)
    assert "Asha Rao • Elegant Resume" in text
    assert "(cid:" not in text


def test_missing_font_file_keeps_built_in_fonts(monkeypatch, caplog, tmp_path, render_template):
    missing = tmp_path / "missing.ttf"
    monkeypatch.setenv("RESUME_PDF_FONT", str(missing))
    with caplog.at_level(logging.WARNING, logger="resume_renderer.layout_engine.fonts"):
        _, pdf = render_template("classic", {"skills": "Python"})
    assert "missing.ttf" in caplog.text
    assert "Python" in parser.extract_pdf_text(pdf)
