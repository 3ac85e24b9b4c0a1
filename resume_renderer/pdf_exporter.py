"""
resume_renderer/pdf_exporter.py
Resume PDF Exporter
-------------------
- Normalizes the caller's resume data and student info
- Resolves the requested template (unknown names render as classic)
- Renders the chosen design into memory, then writes the finished PDF to the caller's stream
- Falls back to a one-page error document if the design fails to render
"""

import logging
import re
from datetime import date
from io import BytesIO
from typing import Optional

from .layout_engine.fallback_renderer import render_error_pdf
from .layout_engine.template_mapper import available_templates, dispatch, normalize_layout
from .normalizer import normalize

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


# -------------------------------
# Rendering
# -------------------------------
def _render(resume_data, student_info, template, layout, today: Optional[date] = None) -> bytes:
    """Run the full pipeline into memory. Never raises: failures become the error document."""
    content, identity = normalize(resume_data, student_info)
    strategy = dispatch(template)
    layout = normalize_layout(layout)
    buffer = BytesIO()
    try:
        canvas = strategy.render(content, identity, buffer, layout=layout, today=today)
    except Exception as e:
        logger.exception("Error generating %s resume for %s", strategy.name, identity.name)
        return render_error_pdf(e)
    logger.info(
        "Generated %s resume for %s (%d page(s), %d bytes)",
        strategy.name, identity.name, canvas.page_number, buffer.tell(),
    )
    return buffer.getvalue()


# -------------------------------
# Public API
# -------------------------------
def generate_resume_pdf(resume_data, student_info, stream, template: str = "classic",
                        layout: str = "single-column", close_stream: bool = True,
                        today: Optional[date] = None) -> None:
    """
    Write a complete resume PDF to `stream` (any binary file-like object).

    The document is always terminated: if the chosen design fails, the
    stream receives the error document instead. The stream is flushed and
    then closed; pass `close_stream=False` to keep writing to it afterwards.
    """
    pdf_bytes = _render(resume_data, student_info, template, layout, today)
    try:
        stream.write(pdf_bytes)
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()
    finally:
        if close_stream:
            stream.close()


def resume_pdf_bytes(resume_data, student_info, template: str = "classic",
                     layout: str = "single-column", today: Optional[date] = None) -> bytes:
    """Same pipeline as generate_resume_pdf, returned as bytes (for downloads and previews)."""
    return _render(resume_data, student_info, template, layout, today)


def resume_filename(name, template: str = "classic") -> str:
    """Download name: `<Name>_<template>_Resume.pdf`, whitespace runs in the name become `_`."""
    if not isinstance(name, str) or not name.strip():
        name = "Student"
    return f"{_WHITESPACE_RE.sub('_', name.strip())}_{template}_Resume.pdf"


__all__ = ["available_templates", "generate_resume_pdf", "resume_filename", "resume_pdf_bytes"]
