"""
decorations.py
--------------
Per-template page painters: backgrounds (run at the start of every page),
first-page headers and footers (run at the end of every page).

Header painters return `(main_y, sidebar_y)`: where the main flow starts on
the first page and, for templates with a sidebar, where its sections start.
"""

from reportlab.lib.enums import TA_LEFT

from . import primitives
from .styles import make_style

WHITE = "#ffffff"


def _contact_parts(identity):
    return [part for part in (identity.email, identity.branch) if part]


def _fit_size(canvas, text, font, size, width, minimum=16):
    """Largest size down to `minimum` at which `text` fits on one line of `width`."""
    while size > minimum and canvas.string_width(text, font, size) > width:
        size -= 1
    return size


# -------------------------
# Classic: gold header band, watermark, two-column rows
# -------------------------
def classic_background(canvas, config):
    p = config.palette
    style = make_style("Watermark", config.typography.bold, 80, p.muted)
    primitives.watermark(canvas, "RESUME", style, canvas.width / 2.0, 380, angle=25.0, opacity=0.15)


def classic_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    primitives.header_band(canvas, 0, 90, p.primary)
    canvas.rect(0, 85, canvas.width, 5, fill=p.highlight)
    name = identity.name.upper()
    name_style = make_style("Name", t.bold, _fit_size(canvas, name, t.bold, 26, canvas.width - 80), p.text)
    canvas.text(0, 25, name, name_style, align="center", width=canvas.width)
    contact = identity.contact_line()
    if contact:
        canvas.text(0, 58, contact, make_style("Contact", t.regular, 11, p.text), align="center", width=canvas.width)
    return 110, None


def classic_footer(canvas, config, styles, text):
    p = config.palette
    style = make_style("Footer", config.typography.regular, 8, p.primary)
    primitives.footer_band(canvas, text, style, fill=p.background, height=40, text_offset=25)


# -------------------------
# Executive: left sidebar with name block and chips, timelines, cards
# -------------------------
EXECUTIVE_SIDEBAR = 180


def executive_background(canvas, config):
    canvas.rect(0, 0, EXECUTIVE_SIDEBAR, canvas.height, fill=config.palette.surface)


def executive_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    inner = EXECUTIVE_SIDEBAR - 40
    name_style = make_style("Name", t.bold, 20, WHITE, leading=24)
    contact_style = make_style("Contact", t.regular, 9.5, WHITE, leading=12)
    tagline_style = make_style("Tagline", t.italic, 9, p.highlight)

    name_lines = canvas.wrap_lines(identity.name.upper(), name_style.fontName, name_style.fontSize, inner)
    contact_lines = []
    for part in _contact_parts(identity):
        contact_lines.extend(canvas.wrap_lines(part, contact_style.fontName, contact_style.fontSize, inner))
    block = 40 + len(name_lines) * name_style.leading + 8 + len(contact_lines) * contact_style.leading + 30
    canvas.rect(0, 0, EXECUTIVE_SIDEBAR, block, fill=p.primary)

    y = 40
    for line in name_lines:
        y += canvas.text(20, y, line, name_style)
    y += 8
    for line in contact_lines:
        y += canvas.text(20, y, line, contact_style)
    canvas.text(20, y + 8, "EXECUTIVE PROFESSIONAL", tagline_style)
    return 50, block + 24


def executive_footer(canvas, config, styles, text):
    style = make_style("Footer", config.typography.regular, 10, WHITE)
    primitives.footer_band(canvas, text, style, fill=config.palette.accent, height=36, text_offset=26)


# -------------------------
# Minimalist: right sidebar carrying vertical section labels
# -------------------------
MINIMALIST_SIDEBAR = 120


def minimalist_background(canvas, config):
    p = config.palette
    x = canvas.width - MINIMALIST_SIDEBAR
    canvas.rect(x, 0, MINIMALIST_SIDEBAR, canvas.height, fill=p.surface)
    canvas.rect(x, 0, 8, canvas.height, fill=p.accent)


def minimalist_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    width = canvas.width - MINIMALIST_SIDEBAR - 80
    y = 40
    y += canvas.text_block(50, y, identity.name, make_style("Name", t.bold, 26, p.primary), width) + 4
    contact_style = make_style("Contact", t.regular, 11, p.muted)
    for part in _contact_parts(identity):
        y += canvas.text_block(50, y, part, contact_style, width) + 2
    return y + 18, None


def minimalist_footer(canvas, config, styles, text):
    style = make_style("Footer", config.typography.regular, 8, config.palette.muted)
    primitives.footer_band(canvas, text, style, height=30, align="right", text_offset=30, padding=20)


# -------------------------
# Creative: angled banner and slanted dividers
# -------------------------
def creative_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    w = canvas.width
    name_style = make_style("Name", t.bold, _fit_size(canvas, identity.name, t.bold, 28, w - 80), WHITE)
    name_lines = canvas.wrap_lines(identity.name, name_style.fontName, name_style.fontSize, w - 80)
    drop = max(len(name_lines) - 1, 0) * name_style.leading
    canvas.polygon([(0, 0), (w, 0), (w, 100 + drop), (0, 70 + drop)], fill=p.primary)
    y = 30
    for line in name_lines:
        y += canvas.text(40, y, line, name_style)
    contact_style = make_style("Contact", t.regular, 12, p.muted)
    x = 40.0
    for part in _contact_parts(identity):
        canvas.text(x, 65 + drop, part, contact_style)
        x = max(250.0, x + canvas.string_width(part, contact_style.fontName, contact_style.fontSize) + 30)
    primitives.angled_band(canvas, 120 + drop, p.accent)
    return 160 + drop, None


def creative_divider(canvas, cursor, config):
    """Slanted yellow divider drawn after the two-column row."""
    cursor = canvas.ensure_space(cursor, 40)
    primitives.angled_band(canvas, cursor.y, config.palette.surface)
    return cursor._replace(y=cursor.y + 40)


def creative_footer(canvas, config, styles, text):
    p = config.palette
    style = make_style("Footer", config.typography.regular, 9, p.primary)
    primitives.footer_band(canvas, text, style, fill=p.accent, height=30, text_offset=22)


# -------------------------
# Technical: terminal window chrome
# -------------------------
WINDOW_CONTROLS = ("#ff5f56", "#ffbd2e", "#27c93f")
TERMINAL_BAR = "#23272e"


def technical_background(canvas, config):
    p = config.palette
    w, h = canvas.width, canvas.height
    canvas.rect(30, 30, w - 60, h - 80, fill=p.background, radius=18)
    # Faint circuit traces: vector only, so they never show up as text.
    for x in range(50, int(w - 60), 60):
        for y in range(80, int(h - 60), 40):
            canvas.line(x, y, x + 12, y, p.muted, 0.8)
            canvas.line(x + 12, y, x + 12, y + 8, p.muted, 0.8)
            canvas.circle(x + 12, y + 8, 1.5, fill=p.muted)


def technical_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    canvas.rect(30, 30, canvas.width - 60, 38, fill=TERMINAL_BAR, radius=18)
    for index, color in enumerate(WINDOW_CONTROLS):
        canvas.circle(50 + index * 20, 49, 6, fill=color)
    name_size = _fit_size(canvas, identity.name, t.bold, 18, canvas.width - 200, minimum=11)
    canvas.text(120, 34, identity.name, make_style("Name", t.bold, name_size, p.primary))
    contact_style = make_style("Contact", t.regular, 10, p.highlight)
    if identity.email:
        canvas.text(120, 54, identity.email, contact_style)
    if identity.branch:
        x = 320.0
        if identity.email:
            email_width = canvas.string_width(identity.email, contact_style.fontName, contact_style.fontSize)
            x = max(x, 120 + email_width + 20)
        canvas.text(x, 54, identity.branch, contact_style, color=p.accent)
    return 90, None


def technical_footer(canvas, config, styles, text):
    style = make_style("Footer", config.typography.regular, 11, config.palette.primary)
    canvas.text(60, canvas.height - 42, f"$ exit  # {text}", style)


# -------------------------
# Professional: dark header band, right sidebar with accent bar
# -------------------------
PROFESSIONAL_SIDEBAR = 140


def professional_background(canvas, config):
    p = config.palette
    x = canvas.width - PROFESSIONAL_SIDEBAR
    canvas.rect(x, 0, PROFESSIONAL_SIDEBAR, canvas.height, fill=p.background)
    canvas.rect(x, 0, 8, canvas.height, fill=p.accent)


def professional_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    primitives.header_band(canvas, 0, 70, p.surface)
    name = identity.name.upper()
    name_style = make_style("Name", t.bold, _fit_size(canvas, name, t.bold, 28, canvas.width - 80), WHITE)
    canvas.text(40, 18, name, name_style)
    contact_style = make_style("Contact", t.regular, 12, p.highlight)
    x = 40.0
    for part in _contact_parts(identity):
        canvas.text(x, 52, part, contact_style)
        x = max(300.0, x + canvas.string_width(part, contact_style.fontName, contact_style.fontSize) + 30)
    return 90, 90


def professional_footer(canvas, config, styles, text):
    style = make_style("Footer", config.typography.regular, 10, config.palette.muted)
    primitives.footer_band(canvas, text, style, height=30, text_offset=30)


# -------------------------
# Academic: left sidebar with maroon name block
# -------------------------
ACADEMIC_SIDEBAR = 170


def academic_background(canvas, config):
    canvas.rect(0, 0, ACADEMIC_SIDEBAR, canvas.height, fill=config.palette.background)


def academic_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    inner = ACADEMIC_SIDEBAR - 40
    name_style = make_style("Name", t.bold, 22, p.highlight, leading=26)
    contact_style = make_style("Contact", t.regular, 11, p.highlight, leading=14, alignment=TA_LEFT)

    name_lines = canvas.wrap_lines(identity.name, name_style.fontName, name_style.fontSize, inner)
    contact_lines = []
    for part in _contact_parts(identity):
        contact_lines.extend(canvas.wrap_lines(part, contact_style.fontName, contact_style.fontSize, inner))
    block = max(80.0, 30 + len(name_lines) * name_style.leading + 8 + len(contact_lines) * contact_style.leading + 12)
    canvas.rect(0, 0, ACADEMIC_SIDEBAR, block, fill=p.surface)

    y = 30
    for line in name_lines:
        y += canvas.text(20, y, line, name_style)
    y += 8
    for line in contact_lines:
        y += canvas.text(20, y, line, contact_style)
    return 40, block + 16


def academic_footer(canvas, config, styles, text):
    style = make_style("Footer", config.typography.italic, 10, config.palette.muted)
    primitives.footer_band(canvas, text, style, height=30, text_offset=30)


# -------------------------
# Elegant: dotted background, gold border, centred header
# -------------------------
def elegant_background(canvas, config):
    p = config.palette
    for x in range(0, int(canvas.width), 60):
        for y in range(0, int(canvas.height), 60):
            canvas.circle(x + 30, y + 30, 18, fill=p.background, opacity=0.07)
    canvas.rect(8, 8, canvas.width - 16, canvas.height - 16, stroke=p.accent, line_width=4)


def elegant_header(canvas, config, styles, identity):
    p, t = config.palette, config.typography
    primitives.header_band(canvas, 0, 90, p.surface)
    canvas.rect(8, 8, canvas.width - 16, canvas.height - 16, stroke=p.accent, line_width=4)
    name = identity.name.upper()
    name_style = make_style("Name", t.bold, _fit_size(canvas, name, t.bold, 28, canvas.width - 80), p.highlight)
    canvas.text(0, 24, name, name_style, align="center", width=canvas.width)
    contact_style = make_style("Contact", t.regular, 12, "#212121")
    y = 60
    for part in _contact_parts(identity):
        canvas.text(0, y, part, contact_style, align="center", width=canvas.width)
        y += 16
    return 110, None


def elegant_footer(canvas, config, styles, text):
    style = make_style("Footer", config.typography.italic, 10, config.palette.muted)
    primitives.footer_band(canvas, text, style, height=30, text_offset=30)
