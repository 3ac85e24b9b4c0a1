"""Paragraph styles derived from a template's typography and palette."""

from typing import Dict

from reportlab.lib import colors
from reportlab.lib.enums import TA_JUSTIFY, TA_LEFT
from reportlab.lib.styles import ParagraphStyle


def make_style(name, font, size, color, leading=None, alignment=TA_LEFT, **kwargs) -> ParagraphStyle:
    return ParagraphStyle(
        name=name,
        fontName=font,
        fontSize=size,
        leading=leading if leading is not None else round(size * 1.2, 1),
        textColor=colors.HexColor(color) if isinstance(color, str) else color,
        alignment=alignment,
        **kwargs,
    )


def recolor(style: ParagraphStyle, color) -> ParagraphStyle:
    return ParagraphStyle(
        name=f"{style.name}-{color}",
        parent=style,
        textColor=colors.HexColor(color) if isinstance(color, str) else color,
    )


def build_styles(config, scale: float = 0.0) -> Dict[str, ParagraphStyle]:
    """
    Styles every layout strategy uses for section flow. `scale` shrinks or
    grows all sizes (sidebars use a negative scale).
    """
    t, p = config.typography, config.palette
    body_size = t.body_size + scale
    body_leading = round(body_size * 1.2 + t.line_gap, 1)
    return {
        "title": make_style("SectionTitle", t.bold, t.title_size + scale, p.primary),
        "body": make_style("Body", t.regular, body_size, p.text, leading=body_leading),
        "summary": make_style(
            "Summary", t.regular, body_size, p.text, leading=body_leading,
            alignment=TA_JUSTIFY if config.justify else TA_LEFT,
        ),
        "emphasis": make_style("Emphasis", t.bold, body_size, p.text, leading=body_leading),
        "chip": make_style("Chip", t.bold, body_size - 2, p.text),
        "code": make_style("Code", t.mono, body_size, p.text, leading=body_leading),
    }
