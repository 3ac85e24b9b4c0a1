"""
primitives.py
-------------
Low-level drawing blocks the layout strategies are composed from.

Every primitive takes the current `Cursor` and returns the cursor below the
block it drew, so vertical flow is a chain of
    cursor = primitive(canvas, cursor, ...)
calls instead of hidden mutation of a shared "current y".

Heights are measured before drawing (ReportLab Paragraph.wrap / simpleSplit),
which is what lets variable-length content flow without overlapping.
"""

from typing import Callable, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.platypus import Paragraph

from ..text_utils import split_entries, strip_bullet
from .canvas import Cursor, PageCanvas

UNBOUNDED = 1e6

ColumnRenderer = Callable[[PageCanvas, Cursor, float], Cursor]


def _markup(text: str) -> str:
    return escape(text.strip()).replace("\n", "<br/>")


def _paragraph(text: str, style) -> Paragraph:
    return Paragraph(_markup(text), style)


# -------------------------
# Bands and decorations
# -------------------------
def header_band(canvas: PageCanvas, y, height, fill, text=None, style=None, align="center", text_y=None, padding=40.0):
    """Full-width filled band with an optional one-line text overlay."""
    canvas.rect(0, y, canvas.width, height, fill=fill)
    if text and style is not None:
        ty = text_y if text_y is not None else y + (height - style.fontSize) / 2.0
        if align == "left":
            canvas.text(padding, ty, text, style)
        else:
            canvas.text(padding, ty, text, style, align=align, width=canvas.width - 2 * padding)
    return Cursor(canvas.content_left, y + height)


def footer_band(canvas: PageCanvas, text, style, fill=None, height=40.0, align="center", text_offset=None, padding=0.0):
    """Band glued to the bottom edge of the page. `text_offset` is measured up from the page bottom."""
    top = canvas.height - height
    if fill is not None:
        canvas.rect(0, top, canvas.width, height, fill=fill)
    offset = text_offset if text_offset is not None else (height + style.fontSize) / 2.0
    canvas.text(padding, canvas.height - offset, text, style, align=align, width=canvas.width - 2 * padding)


def watermark(canvas: PageCanvas, text, style, x, y, angle=25.0, opacity=0.15):
    canvas.rotated_text(x, y, text, style, angle=angle, opacity=opacity)


def angled_band(canvas: PageCanvas, y, fill, rise=20.0, thickness=10.0):
    """Slanted divider running from the left edge at `y` down to the right edge at `y + rise`."""
    w = canvas.width
    canvas.polygon([(0, y), (w, y + rise), (w, y + rise + thickness), (0, y + thickness)], fill=fill)


# -------------------------
# Section titles
# -------------------------
TITLE_RULES = ("above", "below", "short", "dot", "prompt", "none")


def section_title_height(style, rule: str = "below") -> float:
    if rule == "above":
        return 8 + style.leading + 8
    if rule in ("below", "short"):
        return style.leading + 10
    return style.leading + 6


def section_title(canvas: PageCanvas, cursor: Cursor, title, style, width, rule="below", rule_color=None, rule_height=2.0):
    """
    Bold label plus an accent rule:
      above  - filled bar across the column, label underneath
      below  - label with a filled bar directly under it
      short  - label with a 100pt hairline under it
      dot    - accent dot to the left of the label
      prompt - terminal prompt ("$ label"), no rule
      none   - label only
    """
    height = section_title_height(style, rule)
    cursor = canvas.ensure_space(cursor, height + style.leading)
    x, y = cursor
    accent = rule_color if rule_color is not None else style.textColor
    canvas.mark("section_title", title, x, y)

    if rule == "above":
        canvas.rect(x, y, width, rule_height, fill=accent)
        canvas.text(x, y + 8, title, style)
    elif rule == "below":
        canvas.text(x, y, title, style)
        canvas.rect(x, y + style.leading + 2, width, rule_height, fill=accent)
    elif rule == "short":
        canvas.text(x, y, title, style)
        canvas.line(x, y + style.leading + 3, x + min(100.0, width), y + style.leading + 3, accent, 1.0)
    elif rule == "dot":
        canvas.circle(x + 4, y + style.fontSize / 2.0, 4, fill=accent)
        canvas.text(x + 15, y, title, style)
    elif rule == "prompt":
        canvas.text(x, y, f"$ {title}", style)
    else:
        canvas.text(x, y, title, style)
    return Cursor(x, y + height)


def vertical_label(canvas: PageCanvas, pivot_x, top, text, style) -> float:
    """
    Section tag rotated 90 degrees anti-clockwise, reading bottom-to-top,
    starting at `top`. Returns the vertical extent of the label.
    """
    extent = canvas.string_width(text, style.fontName, style.fontSize)
    canvas.mark("section_title", text, pivot_x, top)
    canvas.rotated_text(pivot_x, top + extent / 2.0, text, style, angle=90.0)
    return extent


# -------------------------
# Flowing text
# -------------------------
def measure_paragraph(text: str, style, width: float) -> float:
    if not text or not text.strip():
        return 0.0
    _, height = _paragraph(text, style).wrap(width, UNBOUNDED)
    return height


def flow_paragraph(canvas: PageCanvas, cursor: Cursor, text: str, style, width: float) -> Cursor:
    """
    Wrapped paragraph (alignment comes from the style). Splits across pages
    when pagination is active and returns the cursor below the last line.
    """
    if not text or not text.strip():
        return cursor
    para = _paragraph(text, style)
    x, y = cursor
    while para is not None:
        available = canvas.bottom - y if canvas.paginating else UNBOUNDED
        _, height = para.wrap(width, available)
        if height <= available:
            canvas.draw_flowable(para, x, y, height)
            return Cursor(x, y + height)
        parts = para.split(width, available) if available > 0 else []
        if len(parts) < 2:
            if y <= canvas.top:
                # Cannot be split and does not fit on a fresh page: draw it anyway.
                canvas.draw_flowable(para, x, y, height)
                return Cursor(x, y + height)
            y = canvas.new_page().y
            continue
        head, para = parts[0], parts[1]
        _, head_height = head.wrap(width, available)
        canvas.draw_flowable(head, x, y, head_height)
        y = canvas.new_page().y
    return Cursor(x, y)


def measure_bullet_list(text: str, style, width: float, indent: float = 12.0, gap: float = 4.0) -> float:
    entries = [strip_bullet(entry) for entry in split_entries(text)]
    entries = [entry for entry in entries if entry]
    total = sum(measure_paragraph(entry, style, width - indent) for entry in entries)
    return total + gap * max(len(entries) - 1, 0)


def bullet_list(canvas: PageCanvas, cursor: Cursor, text: str, style, width: float,
                bullet: str = "•", bullet_color=None, indent: float = 12.0, gap: float = 4.0) -> Cursor:
    """One flowed block per entry, each re-prefixed with the template's own bullet glyph."""
    x = cursor.x
    entries = [strip_bullet(entry) for entry in split_entries(text)]
    entries = [entry for entry in entries if entry]
    for index, entry in enumerate(entries):
        cursor = canvas.ensure_space(cursor, style.leading)
        canvas.text(x, cursor.y, bullet, style, color=bullet_color)
        end = flow_paragraph(canvas, Cursor(x + indent, cursor.y), entry, style, width - indent)
        cursor = Cursor(x, end.y + (gap if index < len(entries) - 1 else 0))
    return cursor


# -------------------------
# Timeline, cards, chips, code blocks
# -------------------------
def _timeline_entries(text, style, emphasize, emphasis_style):
    for entry in split_entries(text):
        if emphasize is not None and emphasis_style is not None and emphasize(entry):
            yield entry, emphasis_style
        else:
            yield entry, style


def measure_timeline(text: str, style, width: float, step: float = 30.0, text_offset: float = 20.0,
                     emphasize: Optional[Callable[[str], bool]] = None, emphasis_style=None) -> float:
    text_width = width - text_offset - 10
    return sum(
        max(step, measure_paragraph(entry, entry_style, text_width) + 6)
        for entry, entry_style in _timeline_entries(text, style, emphasize, emphasis_style)
    )


def timeline(canvas: PageCanvas, cursor: Cursor, text: str, style, width: float, color,
             radius: float = 5.0, step: float = 30.0, dot_offset: float = 6.0, text_offset: float = 20.0,
             emphasize: Optional[Callable[[str], bool]] = None, emphasis_style=None) -> Cursor:
    """
    One dot per entry at a fixed left offset, a connector between consecutive
    dots (none after the last) and the entry text to the right of the dot.

    An entry taller than a whole page flows across pages; its dot stays on
    the first page and no connector is drawn out of it.
    """
    entries = list(_timeline_entries(text, style, emphasize, emphasis_style))
    x, y = cursor
    text_width = width - text_offset - 10
    for index, (entry, entry_style) in enumerate(entries):
        block = measure_paragraph(entry, entry_style, text_width)
        oversized = canvas.paginating and block > canvas.bottom - canvas.top
        y = canvas.ensure_space(Cursor(x, y), 2 * entry_style.leading if oversized else block).y
        cx, cy = x + dot_offset, y + 7
        canvas.circle(cx, cy, radius, fill=color)
        if oversized:
            end = flow_paragraph(canvas, Cursor(x + text_offset, y), entry, entry_style, text_width)
            y = end.y + 6
            continue
        advance = max(step, block + 6)
        if index < len(entries) - 1:
            canvas.line(cx, cy + radius, cx, cy + advance - radius, color, 2.0)
        with canvas.fixed_page():
            flow_paragraph(canvas, Cursor(x + text_offset, y), entry, entry_style, text_width)
        y += advance
    return Cursor(x, y)


def measure_card(body: str, title_style, body_style, width: float, padding: float = 12.0,
                 min_height: float = 38.0) -> float:
    body_top = 6 + title_style.leading + 2
    return max(min_height, body_top + measure_paragraph(body, body_style, width - 2 * padding) + 8)


def card(canvas: PageCanvas, cursor: Cursor, title: str, body: str, title_style, body_style, width: float,
         fill, padding: float = 12.0, min_height: float = 38.0) -> Cursor:
    """Filled panel behind a title and a short body; grows to fit the body."""
    inner = width - 2 * padding
    body_top = 6 + title_style.leading + 2
    height = measure_card(body, title_style, body_style, width, padding, min_height)
    if height > canvas.bottom - canvas.top:
        # Too tall for any page: plain title and flowing body instead.
        cursor = section_title(canvas, cursor, title, title_style, width, rule="none")
        return flow_paragraph(canvas, cursor, body, body_style, width)
    cursor = canvas.ensure_space(cursor, height)
    x, y = cursor
    canvas.mark("section_title", title, x, y)
    canvas.rect(x, y, width, height, fill=fill)
    canvas.text(x + padding, y + 6, title, title_style)
    with canvas.fixed_page():
        flow_paragraph(canvas, Cursor(x + padding, y + body_top), body, body_style, inner)
    return Cursor(x, y + height)


def measure_chip_row(labels: Sequence[str], style, width: float, height: float = 18.0, gap: float = 8.0,
                     padding: float = 8.0, row_gap: float = 4.0) -> float:
    """Height chip_row will take for `labels`, using the same wrapping rule."""
    if not labels:
        return 0.0
    rows, x = 1, 0.0
    for label in labels:
        chip_width = min(width, PageCanvas.string_width(label, style.fontName, style.fontSize) + 2 * padding)
        if x + chip_width > width and x > 0:
            rows, x = rows + 1, 0.0
        x += chip_width + gap
    return rows * height + (rows - 1) * row_gap


def chip_row(canvas: PageCanvas, cursor: Cursor, labels: Sequence[str], style, width: float, fill,
             height: float = 18.0, gap: float = 8.0, radius: float = 8.0, padding: float = 8.0,
             row_gap: float = 4.0) -> Cursor:
    """Rounded tags laid out left to right, wrapping when the next chip would cross the column edge."""
    if not labels:
        return cursor
    left, right = cursor.x, cursor.x + width
    x, y = cursor
    for label in labels:
        chip_width = min(width, canvas.string_width(label, style.fontName, style.fontSize) + 2 * padding)
        if x + chip_width > right and x > left:
            x, y = left, y + height + row_gap
        y = canvas.ensure_space(Cursor(x, y), height).y
        canvas.rect(x, y, chip_width, height, fill=fill, radius=radius)
        canvas.text(x + padding, y + (height - style.fontSize) / 2.0, label, style,
                    align="center", width=chip_width - 2 * padding)
        x += chip_width + gap
    return Cursor(left, y + height)


def measure_code_block(text: str, style, width: float, padding: float = 12.0) -> float:
    lines = PageCanvas.wrap_lines(text.strip(), style.fontName, style.fontSize, width - 2 * padding)
    return len(lines) * style.leading + 2 * padding if lines else 0.0


def code_block(canvas: PageCanvas, cursor: Cursor, text: str, style, width: float, fill,
               padding: float = 12.0, radius: float = 8.0) -> Cursor:
    """Monospaced text on a rounded panel sized to the wrapped lines; long blocks continue on the next page."""
    lines = canvas.wrap_lines(text.strip(), style.fontName, style.fontSize, width - 2 * padding)
    x, y = cursor
    while lines:
        if canvas.paginating:
            count = int((canvas.bottom - y - 2 * padding) // style.leading)
            if count < 1 and y > canvas.top:
                y = canvas.new_page().y
                continue
            count = max(count, 1)
        else:
            count = len(lines)
        chunk, lines = lines[:count], lines[count:]
        height = len(chunk) * style.leading + 2 * padding
        canvas.rect(x, y, width, height, fill=fill, radius=radius)
        for index, line in enumerate(chunk):
            canvas.text(x + padding, y + padding + index * style.leading, line, style)
        y += height
        if lines:
            y = canvas.new_page().y
    return Cursor(x, y)


# -------------------------
# Columns
# -------------------------
def two_columns(canvas: PageCanvas, cursor: Cursor, width: float, gutter: float,
                left: Optional[ColumnRenderer], right: Optional[ColumnRenderer]) -> Cursor:
    """
    Render two blocks side by side from the same y; the returned cursor sits
    under whichever column ended lower.
    """
    column = (width - gutter) / 2.0
    left_end = left(canvas, Cursor(cursor.x, cursor.y), column) if left else cursor
    right_end = right(canvas, Cursor(cursor.x + column + gutter, cursor.y), column) if right else cursor
    return Cursor(cursor.x, max(left_end.y, right_end.y))
