# resume_renderer/layout_engine/template_mapper.py
"""
Template Mapper: resolves a requested template name to the layout strategy
that renders it.

Names are matched case-insensitively after trimming. Unknown or blank names
never fail a request: they resolve to the classic strategy.
"""

import logging
from typing import Dict, List

from .layout_renderer import LAYOUTS, LayoutStrategy
from .templates import TEMPLATES

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "classic"
DEFAULT_LAYOUT = "single-column"

STRATEGIES: Dict[str, LayoutStrategy] = {config.name: LayoutStrategy(config) for config in TEMPLATES}

# Reserved slots for designs that have not shipped yet.
PLACEHOLDER_ALIASES = {
    "newtemplate1name": DEFAULT_TEMPLATE,
    "newtemplate2name": DEFAULT_TEMPLATE,
}


def normalize_template_name(value) -> str:
    """Lower-case and trim; non-strings and blank values become the default template."""
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_TEMPLATE
    return value.strip().lower()


def normalize_layout(value) -> str:
    if isinstance(value, str) and value.strip().lower() in LAYOUTS:
        return value.strip().lower()
    if value not in (None, ""):
        logger.warning("Unknown layout %r, using %s", value, DEFAULT_LAYOUT)
    return DEFAULT_LAYOUT


def dispatch(template) -> LayoutStrategy:
    name = normalize_template_name(template)
    if name in STRATEGIES:
        return STRATEGIES[name]
    if name in PLACEHOLDER_ALIASES:
        logger.info("Template %r is a placeholder, rendering %s", name, PLACEHOLDER_ALIASES[name])
        return STRATEGIES[PLACEHOLDER_ALIASES[name]]
    logger.warning("Unknown template %r, falling back to %s", template, DEFAULT_TEMPLATE)
    return STRATEGIES[DEFAULT_TEMPLATE]


def available_templates() -> List[str]:
    return [config.name for config in TEMPLATES]
