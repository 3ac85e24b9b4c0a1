"""Canvas, drawing primitives, template configuration and the shared layout renderer."""

from .fallback_renderer import render_error_pdf
from .layout_renderer import LayoutStrategy, render_layout
from .template_mapper import available_templates, dispatch, normalize_layout, normalize_template_name
from .templates import TEMPLATES, TemplateConfig

__all__ = [
    "LayoutStrategy",
    "TEMPLATES",
    "TemplateConfig",
    "available_templates",
    "dispatch",
    "normalize_layout",
    "normalize_template_name",
    "render_error_pdf",
    "render_layout",
]
