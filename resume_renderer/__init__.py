"""Resume PDF renderer for the university portal."""

from .config import configure_logging, get_settings
from .normalizer import ResumeContent, StudentIdentity, normalize
from .pdf_exporter import available_templates, generate_resume_pdf, resume_filename, resume_pdf_bytes

__version__ = "1.0.0"

__all__ = [
    "ResumeContent",
    "StudentIdentity",
    "available_templates",
    "configure_logging",
    "generate_resume_pdf",
    "get_settings",
    "normalize",
    "resume_filename",
    "resume_pdf_bytes",
]
