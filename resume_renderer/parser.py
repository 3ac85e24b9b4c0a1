# resume_renderer/parser.py
"""
Read generated resumes back as text.

Accepts:
    * file path string (e.g. "out/Asha_Rao_technical_Resume.pdf")
    * raw bytes
    * file-like object with .read() (io.BytesIO, Streamlit UploadedFile)

Exposes:
    * extract_pdf_text(source, upright_only=True) -> str
    * page_count(source) -> int
"""
import io
from typing import Any, Union

import pdfplumber


def _open(source: Union[str, bytes, Any]):
    if isinstance(source, str):
        return pdfplumber.open(source)
    if isinstance(source, (bytes, bytearray)):
        return pdfplumber.open(io.BytesIO(bytes(source)))
    if hasattr(source, "read"):
        if hasattr(source, "seek"):
            source.seek(0)
        return pdfplumber.open(io.BytesIO(source.read()))
    raise ValueError("Unsupported source type. Provide a path, bytes, or a file-like object.")


def _upright_chars(obj) -> bool:
    # Rotated decoration (watermarks, vertical labels) is not resume text.
    if obj.get("object_type") != "char":
        return True
    matrix = obj.get("matrix")
    if matrix is None:
        return obj.get("upright", True)
    _, b, c, _, _, _ = matrix
    return b == 0 and c == 0


def extract_pdf_text(source, upright_only: bool = True) -> str:
    """Plain text of every page, pages separated by newlines."""
    text_parts = []
    with _open(source) as pdf:
        for page in pdf.pages:
            if upright_only:
                page = page.filter(_upright_chars)
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return "\n".join(text_parts)


def page_count(source) -> int:
    with _open(source) as pdf:
        return len(pdf.pages)
