"""
canvas.py
---------
Top-down page canvas over ReportLab's pdfgen Canvas.

ReportLab puts the origin at the bottom-left corner of the page. Resume
layouts are easier to reason about as a vertical flow from the top, so every
coordinate passed to PageCanvas is measured from the top-left corner and
flipped right before it reaches ReportLab.

Every drawing call is also appended to `operations`, which lets callers
inspect what a layout drew without parsing the PDF.
"""

from collections import namedtuple
from contextlib import contextmanager
from typing import Callable, List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import getAscent, stringWidth
from reportlab.pdfgen import canvas as pdfgen_canvas

Cursor = namedtuple("Cursor", ["x", "y"])
Margins = namedtuple("Margins", ["top", "right", "bottom", "left"])
Operation = namedtuple("Operation", ["kind", "page", "args"])

PageHook = Callable[["PageCanvas"], None]


def to_color(value):
    """Accept ReportLab colors or '#rrggbb' strings."""
    if isinstance(value, colors.Color):
        return value
    return colors.HexColor(value)


class PageCanvas:
    def __init__(
        self,
        buffer,
        margins: Margins = Margins(40, 40, 40, 40),
        page_size: Tuple[float, float] = A4,
        title: Optional[str] = None,
        author: Optional[str] = None,
        creator: Optional[str] = None,
        on_page_start: Optional[PageHook] = None,
        on_page_end: Optional[PageHook] = None,
    ):
        self.width, self.height = page_size
        self.margins = margins
        self.page_number = 1
        self.operations: List[Operation] = []
        self.on_page_start = on_page_start
        self.on_page_end = on_page_end
        self._paginate = True
        self._canvas = pdfgen_canvas.Canvas(buffer, pagesize=page_size)
        if title:
            self._canvas.setTitle(title)
        if author:
            self._canvas.setAuthor(author)
        if creator:
            self._canvas.setCreator(creator)

    # ------------------------------------------------------------------
    # Page geometry and flow
    # ------------------------------------------------------------------
    @property
    def top(self) -> float:
        return self.margins.top

    @property
    def bottom(self) -> float:
        return self.height - self.margins.bottom

    @property
    def content_left(self) -> float:
        return self.margins.left

    @property
    def content_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def paginating(self) -> bool:
        return self._paginate

    def begin(self) -> Cursor:
        if self.on_page_start:
            self.on_page_start(self)
        return Cursor(self.content_left, self.top)

    def new_page(self) -> Cursor:
        if self.on_page_end:
            self.on_page_end(self)
        self._canvas.showPage()
        self.page_number += 1
        self._record("page")
        if self.on_page_start:
            self.on_page_start(self)
        return Cursor(self.content_left, self.top)

    def ensure_space(self, cursor: Cursor, height: float) -> Cursor:
        """Move to a fresh page when a block of `height` does not fit below the cursor."""
        if not self._paginate or cursor.y <= self.top or cursor.y + height <= self.bottom:
            return cursor
        return Cursor(cursor.x, self.new_page().y)

    @contextmanager
    def fixed_page(self):
        """Suspend pagination; blocks drawn inside stay on the current page."""
        previous = self._paginate
        self._paginate = False
        try:
            yield self
        finally:
            self._paginate = previous

    def finish(self) -> None:
        if self.on_page_end:
            self.on_page_end(self)
        self._canvas.showPage()
        self._canvas.save()

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------
    @staticmethod
    def string_width(value: str, font: str, size: float) -> float:
        return stringWidth(value, font, size)

    @staticmethod
    def wrap_lines(value: str, font: str, size: float, width: float) -> List[str]:
        return simpleSplit(value, font, size, width)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def _flip(self, y: float, height: float = 0.0) -> float:
        return self.height - y - height

    def _record(self, kind: str, *args) -> None:
        self.operations.append(Operation(kind, self.page_number, args))

    def mark(self, kind: str, *args) -> None:
        """Record a semantic marker (e.g. a section title) without drawing anything."""
        self._record(kind, *args)

    def rect(self, x, y, width, height, fill=None, stroke=None, line_width=1.0, radius=0.0, opacity=None):
        c = self._canvas
        c.saveState()
        if fill is not None:
            c.setFillColor(to_color(fill))
        if stroke is not None:
            c.setStrokeColor(to_color(stroke))
            c.setLineWidth(line_width)
        if opacity is not None:
            c.setFillAlpha(opacity)
        flags = {"stroke": int(stroke is not None), "fill": int(fill is not None)}
        if radius:
            c.roundRect(x, self._flip(y, height), width, height, radius, **flags)
        else:
            c.rect(x, self._flip(y, height), width, height, **flags)
        c.restoreState()
        self._record("rect", x, y, width, height)

    def circle(self, cx, cy, radius, fill, opacity=None):
        c = self._canvas
        c.saveState()
        c.setFillColor(to_color(fill))
        if opacity is not None:
            c.setFillAlpha(opacity)
        c.circle(cx, self._flip(cy), radius, stroke=0, fill=1)
        c.restoreState()
        self._record("circle", cx, cy, radius)

    def line(self, x1, y1, x2, y2, color, width=1.0):
        c = self._canvas
        c.saveState()
        c.setStrokeColor(to_color(color))
        c.setLineWidth(width)
        c.line(x1, self._flip(y1), x2, self._flip(y2))
        c.restoreState()
        self._record("line", x1, y1, x2, y2)

    def polygon(self, points: Sequence[Tuple[float, float]], fill):
        c = self._canvas
        c.saveState()
        c.setFillColor(to_color(fill))
        path = c.beginPath()
        first, *rest = points
        path.moveTo(first[0], self._flip(first[1]))
        for px, py in rest:
            path.lineTo(px, self._flip(py))
        path.close()
        c.drawPath(path, stroke=0, fill=1)
        c.restoreState()
        self._record("polygon", tuple(points))

    def text(self, x, y, value, style, align="left", width=None, char_space=0.0, color=None):
        """
        Draw one line of text whose top edge sits at `y`.
        `align` is resolved inside [x, x + width]; returns the line height used.
        """
        font, size = style.fontName, style.fontSize
        text_width = stringWidth(value, font, size) + char_space * max(len(value) - 1, 0)
        if align == "center" and width is not None:
            x = x + (width - text_width) / 2.0
        elif align == "right" and width is not None:
            x = x + width - text_width
        baseline = self._flip(y) - getAscent(font, size)
        c = self._canvas
        c.saveState()
        c.setFillColor(to_color(color if color is not None else style.textColor))
        text_object = c.beginText(x, baseline)
        text_object.setFont(font, size)
        if char_space:
            text_object.setCharSpace(char_space)
        text_object.textOut(value)
        c.drawText(text_object)
        c.restoreState()
        self._record("text", x, y, value)
        return style.leading

    def text_block(self, x, y, value, style, width, align="left", color=None) -> float:
        """Wrap `value` into `width` and draw it line by line; returns the block height."""
        lines = self.wrap_lines(value, style.fontName, style.fontSize, width)
        for index, line in enumerate(lines):
            self.text(x, y + index * style.leading, line, style, align=align, width=width, color=color)
        return len(lines) * style.leading

    def rotated_text(self, pivot_x, pivot_y, value, style, angle=90.0, opacity=None, color=None):
        """Text centred on a pivot and rotated anti-clockwise by `angle` degrees."""
        c = self._canvas
        c.saveState()
        c.setFillColor(to_color(color if color is not None else style.textColor))
        if opacity is not None:
            c.setFillAlpha(opacity)
        c.translate(pivot_x, self._flip(pivot_y))
        c.rotate(angle)
        c.setFont(style.fontName, style.fontSize)
        c.drawCentredString(0, -style.fontSize / 3.0, value)
        c.restoreState()
        self._record("rotated_text", pivot_x, pivot_y, value, angle)

    def draw_flowable(self, flowable, x, y, height):
        flowable.drawOn(self._canvas, x, self._flip(y, height))
        self._record("flowable", x, y, height)
