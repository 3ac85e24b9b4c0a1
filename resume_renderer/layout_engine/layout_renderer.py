"""
layout_renderer.py
------------------
Shared layout skeleton behind every resume template.

For a given TemplateConfig:
 1. open an A4 page canvas with the template margins
 2. paint background decorations (every page)
 3. paint the identity header (first page)
 4. render sidebar sections, then each main-column row in template order,
    skipping fields that are empty after trim (no header, no placeholder);
    sidebar sections that do not fit the first page follow the main rows
 5. paint the footer (every page)
 6. finalize the document into the buffer

The `layout` argument ("single-column" | "two-column") is accepted for API
compatibility; every template has a fixed column arrangement and ignores it.
"""

import logging
from datetime import date
from typing import List, Optional

from ..config import format_footer_date, get_settings
from ..normalizer import ResumeContent, StudentIdentity
from ..text_utils import looks_like_heading_line, split_tags
from . import primitives
from .canvas import Cursor, PageCanvas
from .fonts import with_document_fonts
from .styles import build_styles, recolor

logger = logging.getLogger(__name__)

LAYOUTS = ("single-column", "two-column")
FOOTER_SEPARATOR = " • "
SIDEBAR_SCALE = -1.5


# -------------------------
# Section bodies, one per mode
# -------------------------
def _role_color(config, spec):
    return config.palette.role(spec.color)


def _render_paragraph(canvas, config, styles, spec, text, cursor, width):
    return primitives.flow_paragraph(canvas, cursor, text, styles["body"], width)


def _render_summary(canvas, config, styles, spec, text, cursor, width):
    return primitives.flow_paragraph(canvas, cursor, text, styles["summary"], width)


def _render_bullets(canvas, config, styles, spec, text, cursor, width):
    return primitives.bullet_list(
        canvas, cursor, text, styles["body"], width,
        bullet=config.bullet, bullet_color=_role_color(config, spec),
    )


def _render_timeline(canvas, config, styles, spec, text, cursor, width):
    return primitives.timeline(
        canvas, cursor, text, styles["body"], width, _role_color(config, spec),
        radius=config.timeline_radius,
        step=config.timeline_step,
        emphasize=looks_like_heading_line if config.emphasize_headings else None,
        emphasis_style=styles["emphasis"],
    )


def _render_chips(canvas, config, styles, spec, text, cursor, width):
    return primitives.chip_row(canvas, cursor, split_tags(text), styles["chip"], width, fill=config.palette.highlight)


def _render_code(canvas, config, styles, spec, text, cursor, width):
    style = recolor(styles["code"], _role_color(config, spec))
    return primitives.code_block(canvas, cursor, text, style, width, fill=config.palette.surface)


SECTION_RENDERERS = {
    "paragraph": _render_paragraph,
    "summary": _render_summary,
    "bullets": _render_bullets,
    "timeline": _render_timeline,
    "chips": _render_chips,
    "code": _render_code,
}


def _title_style(config, styles, spec):
    if spec.color == "primary":
        return styles["title"]
    return recolor(styles["title"], _role_color(config, spec))


def render_section(canvas: PageCanvas, config, styles, spec, text: str, cursor: Cursor, width: float,
                   rule: Optional[str] = None) -> Cursor:
    """Section title followed by the body in the section's mode; returns the cursor below it."""
    rule = rule or config.title_rule
    title_style = _title_style(config, styles, spec)

    if spec.mode == "card":
        return primitives.card(
            canvas, cursor, spec.title, text, title_style, styles["body"], width, fill=config.palette.surface,
        )

    label_bottom = None
    if rule == "vertical":
        extent = canvas.string_width(spec.title, title_style.fontName, title_style.fontSize)
        cursor = canvas.ensure_space(cursor, max(2 * styles["body"].leading, extent))
        label_page = canvas.page_number
        label_bottom = cursor.y + primitives.vertical_label(canvas, config.label_x, cursor.y, spec.title, title_style)
    else:
        cursor = primitives.section_title(
            canvas, cursor, spec.title, title_style, width, rule=rule, rule_color=config.palette.accent,
        )

    indent = config.body_indent
    body_start = Cursor(cursor.x + indent, cursor.y)
    end = SECTION_RENDERERS[spec.mode](canvas, config, styles, spec, text, body_start, width - indent)
    y = end.y
    if label_bottom is not None and canvas.page_number == label_page:
        y = max(y, label_bottom)
    return Cursor(cursor.x, y)


def _measure_body(config, styles, spec, text, width):
    if spec.mode == "bullets":
        return primitives.measure_bullet_list(text, styles["body"], width)
    if spec.mode == "timeline":
        return primitives.measure_timeline(
            text, styles["body"], width, step=config.timeline_step,
            emphasize=looks_like_heading_line if config.emphasize_headings else None,
            emphasis_style=styles["emphasis"],
        )
    if spec.mode == "chips":
        return primitives.measure_chip_row(split_tags(text), styles["chip"], width)
    if spec.mode == "code":
        return primitives.measure_code_block(text, styles["code"], width)
    style = styles["summary"] if spec.mode == "summary" else styles["body"]
    return primitives.measure_paragraph(text, style, width)


def measure_section(config, styles, spec, text: str, width: float, rule: Optional[str] = None) -> float:
    """Height a section takes when drawn on one page; used to decide whether it fits where it is."""
    rule = rule or config.title_rule
    title_style = styles["title"]
    if spec.mode == "card":
        return primitives.measure_card(text, title_style, styles["body"], width)
    body = _measure_body(config, styles, spec, text, width - config.body_indent)
    if rule == "vertical":
        return max(body, PageCanvas.string_width(spec.title, title_style.fontName, title_style.fontSize))
    return primitives.section_title_height(title_style, rule) + body


# -------------------------
# Rows and columns
# -------------------------
def _column(config, styles, spec, text):
    if not text.strip():
        return None

    def draw(canvas, start, width):
        return render_section(canvas, config, styles, spec, text, start, width)

    return draw


def render_row(canvas: PageCanvas, config, styles, row, content: ResumeContent, cursor: Cursor,
               width: float) -> Optional[Cursor]:
    """Render one row; returns None when every field in it is empty."""
    texts = [content.field(spec.field) for spec in row]
    filled = [(spec, text) for spec, text in zip(row, texts) if text.strip()]
    if not filled:
        return None
    if len(row) == 1:
        return render_section(canvas, config, styles, row[0], texts[0], cursor, width)

    column = (width - config.gutter) / 2.0
    needed = max(measure_section(config, styles, spec, text, column) for spec, text in filled)
    if needed > canvas.bottom - canvas.top:
        logger.debug("Row %s does not fit one page; stacking columns", [spec.title for spec, _ in filled])
        for index, (spec, text) in enumerate(filled):
            if index:
                cursor = Cursor(cursor.x, cursor.y + config.section_spacing)
            cursor = render_section(canvas, config, styles, spec, text, cursor, width)
        end = cursor
    else:
        cursor = canvas.ensure_space(cursor, needed)
        with canvas.fixed_page():
            end = primitives.two_columns(
                canvas, cursor, width, config.gutter,
                _column(config, styles, row[0], texts[0]),
                _column(config, styles, row[1], texts[1]),
            )
    if config.after_row is not None:
        end = config.after_row(canvas, end, config)
    return end


def render_sections(canvas: PageCanvas, config, styles, content: ResumeContent, start_y: float,
                    extra_rows=()) -> Cursor:
    x, width = config.margins.left, canvas.content_width
    cursor = Cursor(x, start_y)
    for row in tuple(config.sections) + tuple(extra_rows):
        end = render_row(canvas, config, styles, row, content, cursor, width)
        if end is None:
            continue
        cursor = Cursor(x, end.y + config.section_spacing)
    return cursor


def render_sidebar(canvas: PageCanvas, config, content: ResumeContent, start_y: float) -> List:
    """
    Sidebar sections live on the first page only. A section that does not fit
    above the page bottom, and every section after it, is returned so the
    caller can render it in the main column instead.
    """
    sidebar = config.sidebar
    left = 0.0 if sidebar.side == "left" else canvas.width - sidebar.width
    x = left + sidebar.padding
    width = sidebar.width - 2 * sidebar.padding
    styles = build_styles(config, scale=SIDEBAR_SCALE)
    cursor = Cursor(x, start_y)
    specs = [spec for spec in sidebar.sections if content.field(spec.field).strip()]
    with canvas.fixed_page():
        for index, spec in enumerate(specs):
            text = content.field(spec.field)
            if cursor.y + measure_section(config, styles, spec, text, width, rule="none") > canvas.bottom:
                carried = specs[index:]
                logger.info(
                    "Sidebar of %s template is full; moving %s to the main column",
                    config.name, [spec.title for spec in carried],
                )
                return carried
            end = render_section(canvas, config, styles, spec, text, cursor, width, rule="none")
            cursor = Cursor(x, end.y + 14)
    return []


# -------------------------
# Public API
# -------------------------
def footer_text(config, identity: StudentIdentity, today: Optional[date] = None) -> str:
    return FOOTER_SEPARATOR.join((identity.name, config.label, format_footer_date(today)))


def render_layout(config, content: ResumeContent, identity: StudentIdentity, buffer,
                  layout: str = "single-column", today: Optional[date] = None) -> PageCanvas:
    """Render one complete document for `config` into `buffer`; returns the finished canvas."""
    settings = get_settings()
    config = with_document_fonts(config, settings)
    styles = build_styles(config)
    footer = footer_text(config, identity, today)
    logger.debug("Rendering %s template (layout %r is fixed for this template)", config.name, layout)

    background = config.paint_background
    canvas = PageCanvas(
        buffer,
        margins=config.margins,
        title=f"{identity.name} - {config.label}",
        author=identity.name,
        creator=settings.author,
        on_page_start=(lambda c: background(c, config)) if background else None,
        on_page_end=lambda c: config.paint_footer(c, config, styles, footer),
    )
    canvas.begin()
    main_y, sidebar_y = config.paint_header(canvas, config, styles, identity)
    carried = []
    if config.sidebar is not None:
        carried = render_sidebar(canvas, config, content, sidebar_y if sidebar_y is not None else main_y)
    render_sections(canvas, config, styles, content, main_y, extra_rows=[(spec,) for spec in carried])
    canvas.finish()
    logger.debug("%s template finished with %d page(s)", config.name, canvas.page_number)
    return canvas


class LayoutStrategy:
    """A template configuration bound to the shared renderer."""

    def __init__(self, config):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    def render(self, content: ResumeContent, identity: StudentIdentity, buffer,
               layout: str = "single-column", today: Optional[date] = None) -> PageCanvas:
        return render_layout(self.config, content, identity, buffer, layout, today)

    def __repr__(self) -> str:
        return f"LayoutStrategy({self.config.name!r})"
