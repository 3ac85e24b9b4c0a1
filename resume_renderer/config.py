# resume_renderer/config.py
"""
Runtime settings for the resume renderer.
Reads configuration from environment variables:
  - RESUME_PDF_LOG_LEVEL
  - RESUME_PDF_DATE_FORMAT
  - RESUME_PDF_AUTHOR
  - RESUME_PDF_FONT, RESUME_PDF_BOLD_FONT (optional TrueType files for non-Latin text)
"""

import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

LOG_FORMAT = "%(levelname)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    date_format: str = "%m/%d/%Y"
    author: str = "University Portal"
    font: str = ""
    bold_font: str = ""


def get_settings() -> Settings:
    """Load settings from the environment, falling back to defaults."""
    defaults = Settings()
    return Settings(
        log_level=(os.getenv("RESUME_PDF_LOG_LEVEL") or defaults.log_level).upper(),
        date_format=os.getenv("RESUME_PDF_DATE_FORMAT") or defaults.date_format,
        author=os.getenv("RESUME_PDF_AUTHOR") or defaults.author,
        font=os.getenv("RESUME_PDF_FONT", defaults.font),
        bold_font=os.getenv("RESUME_PDF_BOLD_FONT", defaults.bold_font),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts and the preview app."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def format_footer_date(today: Optional[date] = None, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    return (today or date.today()).strftime(settings.date_format)
