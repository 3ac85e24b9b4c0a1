# resume_renderer/layout_engine/fallback_renderer.py
"""
Fallback Renderer: used when a layout strategy fails.
It ensures the caller still receives a complete single-page PDF that
states what went wrong instead of a truncated document.
"""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer

ERROR_TITLE = "Error Generating Resume PDF"
ERROR_PREFIX = "There was an error generating your resume: "
MESSAGE_LIMIT = 500


def error_message(error, limit: int = MESSAGE_LIMIT) -> str:
    """
    Message shown to the user; falls back to the exception class name when
    empty. Longer messages are cut at `limit` characters so the error
    document stays on one page.
    """
    if isinstance(error, BaseException):
        message = str(error) or type(error).__name__
    else:
        message = str(error)
    if len(message) > limit:
        message = message[:limit].rstrip() + "..."
    return message


def render_error_pdf(error) -> bytes:
    """Generates a one-page A4 document carrying the error title and message."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=50,
        leftMargin=50,
        topMargin=50,
        bottomMargin=40,
        title=ERROR_TITLE,
    )

    styles = getSampleStyleSheet()
    styles.add(
        ParagraphStyle(
            name="ErrorTitle",
            fontName="Helvetica-Bold",
            fontSize=20,
            leading=24,
            alignment=TA_CENTER,
            textColor=colors.HexColor("#B00020"),
            spaceAfter=10,
        )
    )
    styles.add(
        ParagraphStyle(
            name="ErrorMessage",
            fontName="Helvetica",
            fontSize=12,
            leading=16,
            alignment=TA_CENTER,
            textColor=colors.black,
        )
    )

    content = [
        Spacer(1, 40),
        Paragraph(ERROR_TITLE, styles["ErrorTitle"]),
        HRFlowable(width="100%", color=colors.HexColor("#CCCCCC"), thickness=0.6),
        Spacer(1, 20),
        Paragraph(escape(ERROR_PREFIX + error_message(error)), styles["ErrorMessage"]),
    ]

    doc.build(content)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes
